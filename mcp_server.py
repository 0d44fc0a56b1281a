#!/usr/bin/env python3
"""
Aviation Weather MCP Server.

Exposes aviationweather.gov data as MCP tools:
- METAR observations and TAF forecasts
- PIREPs around an airport
- SIGMETs and decoded G-AIRMETs
- Airport information
- A composite route weather briefing

ENV:
  AWC_BASE_URL -> upstream data API base URL
  LOG_DIR      -> directory for mcp_server.log
"""

import argparse
import asyncio
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from rich.console import Console
from rich.logging import RichHandler

from config import Config
from tools.tool_registry import register_all_tools
from utils.awc_client import AviationWeatherClient
from utils.http_client import create_http_client

TRANSPORTS = ("stdio", "streamable-http")


def setup_logging(log_dir=Config.LOG_DIR):
    """Log to a file and to stderr; stdout belongs to the stdio transport."""
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "mcp_server.log"

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(detailed_formatter)
    console_handler = RichHandler(console=Console(stderr=True), show_path=False)

    logging.basicConfig(level=logging.INFO, handlers=[file_handler, console_handler])
    logging.getLogger("mcp.tools").setLevel(logging.INFO)
    return log_file


def create_app(client: AviationWeatherClient) -> FastMCP:
    """Build the FastMCP app with every tool bound to ``client``."""
    app = FastMCP(Config.SERVER_NAME, host=Config.SERVER_HOST, port=Config.SERVER_PORT)
    register_all_tools(app, client)
    return app


async def run_server(transport="stdio"):
    """Run the server until the transport closes."""
    async with create_http_client() as http_client:
        client = AviationWeatherClient(http_client, Config.base_url())
        app = create_app(client)
        logging.info(f"Aviation Weather MCP server starting ({transport})")
        logging.info(f"Upstream: {client.base_url}")

        try:
            if transport == "streamable-http":
                logging.info(f"Listening on {Config.SERVER_HOST}:{Config.SERVER_PORT}")
                await app.run_streamable_http_async()
            else:
                await app.run_stdio_async()
        except Exception as e:
            logging.error(f"Server error: {e}")
            raise
        finally:
            logging.info("Server shutting down...")


def main():
    parser = argparse.ArgumentParser(description="Aviation Weather MCP Server")
    parser.add_argument(
        "--transport", choices=TRANSPORTS, default="stdio", help="MCP transport"
    )
    args = parser.parse_args()
    log_file = setup_logging()
    logging.info(f"Logs: {log_file}")
    try:
        asyncio.run(run_server(args.transport))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
