"""Entry point: run the GitBook MCP server over stdio."""

import asyncio
import logging
import os
import signal
import sys

import mcp.server.stdio
from mcp.server import Server
from pydantic import ValidationError

from gitbook_mcp.config import GitBookConfig, load_config
from gitbook_mcp.core.errors import ConfigurationError
from gitbook_mcp.core.logging import get_logger, setup_logging
from gitbook_mcp.mcp_server.server import create_server, initialization_options

logger = get_logger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


async def serve(server: Server, config: GitBookConfig) -> None:
    """Serve MCP over stdio until the host closes stdin."""
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            initialization_options(server, config),
        )


def exit_now(code: int = 0) -> None:
    """Flush logs and end the process without unwinding the stdio streams.

    The stdin reader blocks in a worker thread that cancellation cannot
    interrupt while the host keeps the pipe open.
    """
    logging.shutdown()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(code)


async def main(config: GitBookConfig) -> None:
    """Serve MCP over stdio until the host disconnects or a signal arrives."""
    server = create_server(config)

    loop = asyncio.get_running_loop()
    shutdown = asyncio.Event()
    for sig in SHUTDOWN_SIGNALS:
        try:
            loop.add_signal_handler(sig, shutdown.set)
        except (NotImplementedError, RuntimeError):
            pass

    logger.info(
        "Starting GitBook MCP server",
        name=config.server_name,
        base_url=config.api_base_url,
    )

    serving = asyncio.create_task(serve(server, config))
    stopping = asyncio.create_task(shutdown.wait())
    try:
        done, _ = await asyncio.wait(
            {serving, stopping}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for sig in SHUTDOWN_SIGNALS:
            try:
                loop.remove_signal_handler(sig)
            except (NotImplementedError, RuntimeError):
                pass

    if stopping in done:
        logger.info("Shutdown signal received, closing server")
        exit_now(0)

    stopping.cancel()
    serving.result()
    logger.info("GitBook MCP server stopped")


def cli_main() -> None:
    """Synchronous entry point for the ``gitbook-mcp`` console script."""
    try:
        config = load_config()
    except (ConfigurationError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_level)

    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.critical(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
