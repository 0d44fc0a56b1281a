#!/usr/bin/env python3
"""
Pilot report tool for the aviation weather server.
Provides PIREPs around an airport.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config import Config
from tools.results import AirportCode, failure, read_only, text_result, tool_logger
from utils.airports import lookup_airport, normalize_code
from utils.formatters import text_or


async def fetch_pireps(client, airport_code, radius=Config.DEFAULT_PIREP_RADIUS):
    """
    PIREPs within ``radius`` miles of an airport.

    The airport is looked up first so an unknown code fails clearly. The
    report query itself is filtered by code and distance, which the
    upstream API resolves on its own.
    """
    code = normalize_code(airport_code)
    try:
        await lookup_airport(client, code)
        text = await client.fetch_text("pirep", {"id": code, "distance": radius})
    except Exception as e:
        return failure("PIREPs", e)
    return text_result(text_or(text, f"No PIREPs found within {radius} miles of {code}"))


def register_pireps_tool(app: FastMCP, client):
    """Register the PIREP tool with the FastMCP app."""

    @app.tool(name="get_pireps", annotations=read_only("Get Pilot Reports"))
    async def get_pireps(
        airport_code: AirportCode,
        radius: Annotated[
            int, Field(description="Search radius in miles", gt=0)
        ] = Config.DEFAULT_PIREP_RADIUS,
    ):
        """Get pilot reports (PIREPs) of flight conditions near an airport."""
        tool_logger.info(f"get_pireps airport_code={airport_code} radius={radius}")
        return await fetch_pireps(client, airport_code, radius)
