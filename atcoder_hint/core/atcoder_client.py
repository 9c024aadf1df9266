from typing import Optional, Protocol
from urllib.parse import quote

import httpx
from bs4 import BeautifulSoup

from atcoder_hint.config import AtCoderConfig
from atcoder_hint.core.errors import (
    ExtractionError,
    HttpStatusError,
    InvalidArgumentError,
    NetworkError,
)
import logging

logger = logging.getLogger(__name__)

PROBLEM_PATH = "/contests/{contest_id}/tasks/{problem_id}"
PROBLEM_SELECTOR = "#task-statement"
EDITORIAL_PATH = "/contests/{contest_id}/tasks/{problem_id}/editorial"
EDITORIAL_SELECTOR = "#main-container"


class Fetcher(Protocol):
    async def fetch(self, contest_id: str, problem_id: str) -> str:
        """Return extracted page text or raise a FetchError subclass."""
        ...


def create_http_client(atcoder: AtCoderConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    Creates the HTTP client shared by every fetcher for the process lifetime.
    """
    return httpx.AsyncClient(
        base_url=atcoder.base_url,
        headers={"User-Agent": atcoder.user_agent},
        timeout=httpx.Timeout(atcoder.timeout),
        follow_redirects=True,
        transport=transport,
    )


class AtCoderFetcher:
    """Fetches one AtCoder page per call and extracts the text of a section."""

    def __init__(self, client: httpx.AsyncClient, path_template: str, selector: str, missing_message: str):
        self._client = client
        self._path_template = path_template
        self._selector = selector
        self._missing_message = missing_message

    def build_path(self, contest_id: str, problem_id: str) -> str:
        return self._path_template.format(
            contest_id=quote(contest_id, safe=""),
            problem_id=quote(problem_id, safe=""),
        )

    async def fetch(self, contest_id: str, problem_id: str) -> str:
        if not contest_id:
            raise InvalidArgumentError("contest_id must not be empty")
        if not problem_id:
            raise InvalidArgumentError("problem_id must not be empty")

        path = self.build_path(contest_id, problem_id)
        logger.info(f"Fetching {path}")
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            logger.error(f"Request for {path} failed: {e}")
            raise NetworkError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"{path} returned status {response.status_code}")
            raise HttpStatusError(response.status_code)

        return self.extract(response.text)

    def extract(self, html: str) -> str:
        document = BeautifulSoup(html, "html.parser")
        element = document.select_one(self._selector)
        if element is None:
            raise ExtractionError(self._missing_message)
        return element.get_text().strip()


def problem_fetcher(client: httpx.AsyncClient) -> AtCoderFetcher:
    return AtCoderFetcher(
        client,
        PROBLEM_PATH,
        PROBLEM_SELECTOR,
        "Could not find problem statement in HTML.",
    )


def editorial_fetcher(client: httpx.AsyncClient) -> AtCoderFetcher:
    return AtCoderFetcher(
        client,
        EDITORIAL_PATH,
        EDITORIAL_SELECTOR,
        "Could not find editorial in HTML.",
    )
