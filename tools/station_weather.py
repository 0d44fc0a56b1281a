#!/usr/bin/env python3
"""
Station weather tools for the aviation weather server.
Provides current METAR observations and TAF forecasts.
"""

from mcp.server.fastmcp import FastMCP

from tools.results import AirportCode, failure, read_only, text_result, tool_logger
from utils.airports import normalize_code
from utils.formatters import text_or


async def _raw_report(client, endpoint, kind, airport_code):
    code = normalize_code(airport_code)
    try:
        text = await client.fetch_text(endpoint, {"ids": code})
    except Exception as e:
        return failure(kind, e)
    return text_result(text_or(text, f"No {kind} data available for {code}"))


async def fetch_metar(client, airport_code):
    """Raw METAR observation for one airport."""
    return await _raw_report(client, "metar", "METAR", airport_code)


async def fetch_taf(client, airport_code):
    """Raw TAF forecast for one airport."""
    return await _raw_report(client, "taf", "TAF", airport_code)


def register_station_weather_tools(app: FastMCP, client):
    """Register the METAR and TAF tools with the FastMCP app."""

    @app.tool(name="get_metar", annotations=read_only("Get METAR Observation"))
    async def get_metar(airport_code: AirportCode):
        """Get the current METAR (surface weather observation) for an airport."""
        tool_logger.info(f"get_metar airport_code={airport_code}")
        return await fetch_metar(client, airport_code)

    @app.tool(name="get_taf", annotations=read_only("Get Terminal Aerodrome Forecast"))
    async def get_taf(airport_code: AirportCode):
        """
        Get the current TAF for an airport.
        A TAF covers expected conditions near the airport for 24-30 hours.
        """
        tool_logger.info(f"get_taf airport_code={airport_code}")
        return await fetch_taf(client, airport_code)
