#!/usr/bin/env python3
"""
Airport tool for the aviation weather server.
Provides airport metadata lookup.
"""

from mcp.server.fastmcp import FastMCP

from tools.results import AirportCode, failure, read_only, text_result, tool_logger
from utils.airports import lookup_airport, normalize_code
from utils.formatters import format_airport_info


async def fetch_airport_info(client, airport_code):
    """Formatted airport information block."""
    code = normalize_code(airport_code)
    try:
        airport = await lookup_airport(client, code)
    except Exception as e:
        return failure("airport info", e)
    return text_result(format_airport_info(code, airport))


def register_airport_tools(app: FastMCP, client):
    """Register airport-related tools with the FastMCP app."""

    @app.tool(name="get_airport_info", annotations=read_only("Get Airport Information"))
    async def get_airport_info(airport_code: AirportCode):
        """Get airport name, location, elevation and runways."""
        tool_logger.info(f"get_airport_info airport_code={airport_code}")
        return await fetch_airport_info(client, airport_code)
