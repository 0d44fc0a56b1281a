#!/usr/bin/env python3
"""
Route weather tool for the aviation weather server.
Builds a departure/destination/en-route briefing from several API calls.
"""

import asyncio

from mcp.server.fastmcp import FastMCP

from tools.results import AirportCode, failure, read_only, text_result, tool_logger
from utils.airports import lookup_airport, normalize_code
from utils.errors import UnexpectedShape
from utils.formatters import format_route_briefing
from utils.geo_utils import enroute_search_radius, midpoint, route_distance_nm
from utils.models import RouteBriefing


def _coordinates(code, airport):
    if not airport.has_coordinates:
        raise UnexpectedShape(f"No coordinates available for {code}")
    return float(airport.latitude), float(airport.longitude)


async def build_route_briefing(client, departure, destination):
    """Gather everything a RouteBriefing needs; errors propagate."""
    dep_airport, dest_airport = await asyncio.gather(
        lookup_airport(client, departure),
        lookup_airport(client, destination),
    )
    dep_lat, dep_lon = _coordinates(departure, dep_airport)
    dest_lat, dest_lon = _coordinates(destination, dest_airport)

    dep_metar, dep_taf, dest_metar, dest_taf = await asyncio.gather(
        client.fetch_text("metar", {"ids": departure}),
        client.fetch_text("taf", {"ids": departure}),
        client.fetch_text("metar", {"ids": destination}),
        client.fetch_text("taf", {"ids": destination}),
    )

    distance = route_distance_nm(dep_lat, dep_lon, dest_lat, dest_lon)
    mid_lat, mid_lon = midpoint(dep_lat, dep_lon, dest_lat, dest_lon)
    radius = enroute_search_radius(distance)

    pireps = await client.fetch_text(
        "pirep", {"lat": mid_lat, "lon": mid_lon, "distance": radius}
    )

    return RouteBriefing(
        departure=departure,
        destination=destination,
        distance_nm=distance,
        midpoint=(mid_lat, mid_lon),
        departure_metar=dep_metar,
        departure_taf=dep_taf,
        destination_metar=dest_metar,
        destination_taf=dest_taf,
        search_radius=radius,
        enroute_pireps=pireps,
    )


async def fetch_route_weather(client, departure, destination):
    """Formatted route weather briefing between two airports."""
    dep = normalize_code(departure)
    dest = normalize_code(destination)
    try:
        briefing = await build_route_briefing(client, dep, dest)
    except Exception as e:
        return failure("route weather", e)
    return text_result(format_route_briefing(briefing))


def register_route_weather_tool(app: FastMCP, client):
    """Register the route weather tool with the FastMCP app."""

    @app.tool(name="get_route_weather", annotations=read_only("Get Route Weather Briefing"))
    async def get_route_weather(departure: AirportCode, destination: AirportCode):
        """
        Get a weather briefing for a direct route between two airports:
        METAR and TAF at both ends plus PIREPs around the route midpoint.
        """
        tool_logger.info(f"get_route_weather departure={departure} destination={destination}")
        return await fetch_route_weather(client, departure, destination)
