class JsonRpcError(Exception):
    def __init__(self, code, message, data=None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_dict(self):
        error = {"code": self.code, "message": self.message}
        if self.data:
            error["data"] = self.data
        return error


class DecodeError(Exception):
    """A stdin line that is not a usable JSON-RPC request."""


class FetchError(Exception):
    """Base class for failures reported by a fetcher.

    Every variant is shown to the caller as text, so subclasses only
    differ in how ``render`` phrases the failure.
    """

    def render(self) -> str:
        return f"Error: {self}"


class NetworkError(FetchError):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def render(self) -> str:
        return f"Error: Request failed: {self.detail}"


class HttpStatusError(FetchError):
    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code

    def render(self) -> str:
        return f"Error: Failed to fetch page. Status: {self.status_code}"


class ExtractionError(FetchError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidArgumentError(FetchError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
