import json
import logging
import asyncio
import sys
from typing import Optional, TextIO

import httpx

from atcoder_hint.config import config, Config
from atcoder_hint.core.atcoder_client import create_http_client, editorial_fetcher, problem_fetcher
from atcoder_hint.core.dispatcher import Dispatcher
from atcoder_hint.core.protocol import encode_response
from atcoder_hint.core.stdio import read_lines, write_line
from atcoder_hint.tools.atcoder_tools import create_registry

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    # stdout carries JSON-RPC replies, so logs go to stderr only.
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


async def serve(reader: TextIO, writer: TextIO, dispatcher: Dispatcher) -> None:
    """Handle requests strictly in order until the input stream ends."""
    async for line in read_lines(reader):
        response = await dispatcher.handle_line(line)
        if response is not None:
            write_line(writer, encode_response(response))
    logger.info("Input stream closed, shutting down.")


async def run(cfg: Config, reader: TextIO, writer: TextIO, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
    async with create_http_client(cfg.atcoder, transport) as client:
        registry = create_registry(problem_fetcher(client), editorial_fetcher(client))
        dispatcher = Dispatcher(registry, cfg.server)
        logger.info(f"Serving tools: {[t.name for t in registry.list_all()]}")
        await serve(reader, writer, dispatcher)


def configure_stdio(stdin: TextIO, stdout: TextIO) -> None:
    # Problem statements are Japanese; do not depend on the locale encoding.
    # Invalid UTF-8 decodes to U+FFFD and the line is then skipped as bad JSON.
    stdin.reconfigure(encoding="utf-8", errors="replace")
    stdout.reconfigure(encoding="utf-8")


def main() -> None:
    configure_stdio(sys.stdin, sys.stdout)
    configure_logging(config.server.log_level)
    logger.info(json.dumps({"event": "config_loaded", "config": config.summary()}, ensure_ascii=False))
    asyncio.run(run(config, sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
