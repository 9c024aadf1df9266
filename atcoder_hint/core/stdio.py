import asyncio
from typing import AsyncIterator, TextIO


async def read_lines(stream: TextIO) -> AsyncIterator[str]:
    """Yield non-blank lines from ``stream`` until end of input.

    ``readline`` blocks, so it runs in a worker thread one line at a time.
    Read errors are not caught: a broken input stream ends the server.
    """
    while True:
        line = await asyncio.to_thread(stream.readline)
        if not line:
            return
        line = line.strip()
        if not line:
            continue
        yield line


def write_line(stream: TextIO, text: str) -> None:
    stream.write(text + "\n")
    stream.flush()
