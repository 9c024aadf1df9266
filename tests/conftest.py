"""Shared fixtures: a recording fetcher and a dispatcher wired to it."""

import pytest

from atcoder_hint.config import ServerConfig
from atcoder_hint.core.dispatcher import Dispatcher
from atcoder_hint.tools.atcoder_tools import create_registry


class StubFetcher:
    """Records every call and returns ``text`` or raises ``error``."""

    def __init__(self, text: str = "statement", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, contest_id: str, problem_id: str) -> str:
        self.calls.append((contest_id, problem_id))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def problem() -> StubFetcher:
    return StubFetcher(text="problem text")


@pytest.fixture
def editorial() -> StubFetcher:
    return StubFetcher(text="editorial text")


@pytest.fixture
def registry(problem: StubFetcher, editorial: StubFetcher):
    return create_registry(problem, editorial)


@pytest.fixture
def dispatcher(registry) -> Dispatcher:
    return Dispatcher(registry, ServerConfig())
