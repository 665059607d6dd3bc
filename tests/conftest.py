# File: tests/conftest.py
import asyncio
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable, Dict, List

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web

#: statuses served by the status_server fixture; anything else is a 404
STATUS_ROUTES: Dict[str, int] = {"/admin": 200, "/secret": 403, "/old": 410, "/boom": 500}


@asynccontextmanager
async def serve(app: web.Application) -> AsyncIterator[str]:
    """Start *app* on an ephemeral localhost port, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    port = runner.addresses[0][1]
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


def status_app() -> web.Application:
    app = web.Application()

    def make_handler(status: int):
        async def handler(_):
            return web.Response(status=status, text="x" * 64)

        return handler

    async def slow(_):
        await asyncio.sleep(1)
        return web.Response(text="late")

    for path, status in STATUS_ROUTES.items():
        app.router.add_get(path, make_handler(status))
    app.router.add_get("/", make_handler(200))
    app.router.add_get("/slow", slow)
    return app


@pytest_asyncio.fixture
async def status_server() -> AsyncIterator[str]:
    async with serve(status_app()) as url:
        yield url


@pytest_asyncio.fixture
async def closed_url() -> str:
    """URL of a port that was just released, so connections are refused."""
    async with serve(web.Application()) as url:
        pass
    return url


@pytest_asyncio.fixture
async def session() -> AsyncIterator[aiohttp.ClientSession]:
    async with aiohttp.ClientSession() as s:
        yield s


@pytest.fixture()
def wordlist_file(tmp_path) -> Path:
    """Word list with blanks and padding that the loader has to clean up."""
    path = tmp_path / "words.txt"
    path.write_text("admin\n\n  secret  \nold\nmissing\n", encoding="utf-8")
    return path


class Console:
    """Stand-in for click.echo collecting what would be printed."""

    def __init__(self) -> None:
        self.lines: List[str] = []
        self._partial = ""

    def __call__(self, message: str = "", nl: bool = True, **_: object) -> None:
        self._partial += message
        if nl:
            self.lines.append(self._partial)
            self._partial = ""

    @property
    def text(self) -> str:
        return "\n".join(self.lines + ([self._partial] if self._partial else []))


@pytest.fixture()
def console() -> Console:
    return Console()


def answers(*replies: str) -> Callable[[str], str]:
    """Prompt stub returning *replies* in order and recording the questions."""
    queue = list(replies)
    asked: List[str] = []

    def prompt(question: str) -> str:
        asked.append(question)
        if not queue:
            raise AssertionError("prompt called more often than expected")
        return queue.pop(0)

    prompt.asked = asked  # type: ignore[attr-defined]
    return prompt


def never_prompt(question: str) -> str:
    raise AssertionError(f"unexpected prompt: {question}")
