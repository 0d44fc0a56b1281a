#!/usr/bin/env python3
"""
Hazard advisory tools for the aviation weather server.
Provides SIGMETs (domestic and international) and decoded G-AIRMETs.
"""

from typing import Annotated, Literal, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config import Config
from tools.results import failure, read_only, text_result, tool_logger
from utils.formatters import format_gairmets, text_or
from utils.models import parse_gairmet_payload

SIGMET_ENDPOINTS = {"us": "airsigmet", "international": "isigmet"}

GAirmetType = Literal["sierra", "tango", "zulu"]
GAirmetHazard = Literal[
    "turb-hi", "turb-lo", "llws", "sfc_wind", "ifr", "mtn_obs", "ice", "fzlvl"
]

NO_SIGMETS = "No SIGMETs found for the specified criteria"
NO_GAIRMETS = "No G-AIRMETs found for the specified criteria"


async def fetch_sigmets(client, region=Config.DEFAULT_SIGMET_REGION, hazard=None):
    """Raw SIGMET text for the US or the rest of the world."""
    try:
        endpoint = SIGMET_ENDPOINTS[region]
        text = await client.fetch_text(endpoint, {"hazard": hazard})
    except Exception as e:
        return failure("SIGMETs", e)
    return text_result(text_or(text, NO_SIGMETS))


async def fetch_gairmets(client, advisory_type=None, hazard=None):
    """Decoded G-AIRMETs, numbered one block per advisory."""
    try:
        data = await client.fetch_json(
            "gairmet", {"type": advisory_type, "hazard": hazard}, format="decoded"
        )
        text = format_gairmets(parse_gairmet_payload(data)) if data else ""
    except Exception as e:
        return failure("G-AIRMETs", e)
    return text_result(text_or(text, NO_GAIRMETS))


def register_advisory_tools(app: FastMCP, client):
    """Register the SIGMET and G-AIRMET tools with the FastMCP app."""

    @app.tool(name="get_sigmets", annotations=read_only("Get SIGMETs"))
    async def get_sigmets(
        region: Annotated[
            Literal["us", "international"],
            Field(description="'us' for domestic SIGMETs, 'international' for the rest"),
        ] = Config.DEFAULT_SIGMET_REGION,
        hazard: Annotated[
            Optional[str],
            Field(description="Hazard filter, e.g. conv, turb, ice, ifr"),
        ] = None,
    ):
        """Get active SIGMETs: advisories for weather hazardous to all aircraft."""
        tool_logger.info(f"get_sigmets region={region} hazard={hazard}")
        return await fetch_sigmets(client, region, hazard)

    @app.tool(name="get_gairmets", annotations=read_only("Get G-AIRMETs"))
    async def get_gairmets(
        advisory_type: Annotated[
            Optional[GAirmetType],
            Field(description="sierra (IFR/mountain obscuration), tango (turbulence/wind), zulu (icing)"),
        ] = None,
        hazard: Annotated[Optional[GAirmetHazard], Field(description="Hazard filter")] = None,
    ):
        """Get decoded graphical AIRMETs (G-AIRMETs)."""
        tool_logger.info(f"get_gairmets advisory_type={advisory_type} hazard={hazard}")
        return await fetch_gairmets(client, advisory_type, hazard)
