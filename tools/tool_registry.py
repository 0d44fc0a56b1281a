#!/usr/bin/env python3
"""
Tool registry for the aviation weather MCP server.
Centralizes tool registration.
"""

from mcp.server.fastmcp import FastMCP

from tools.advisories import register_advisory_tools
from tools.airports import register_airport_tools
from tools.pireps import register_pireps_tool
from tools.route_weather import register_route_weather_tool
from tools.station_weather import register_station_weather_tools


def register_all_tools(app: FastMCP, client):
    """Register all aviation weather tools, sharing one upstream client."""

    register_station_weather_tools(app, client)  # METAR, TAF
    register_pireps_tool(app, client)
    register_route_weather_tool(app, client)
    register_advisory_tools(app, client)  # SIGMET, G-AIRMET
    register_airport_tools(app, client)
