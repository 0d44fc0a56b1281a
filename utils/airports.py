#!/usr/bin/env python3
"""
Airport utilities for the aviation weather server.
Handles airport record lookups against the airport endpoint.
"""

from utils.errors import LookupMiss
from utils.models import AirportRecord


def normalize_code(code):
    """Airport identifiers are sent trimmed and upper-cased."""
    return (code or "").strip().upper()


def first_airport(data):
    """Pick the first airport record out of an airport endpoint response."""
    if isinstance(data, list):
        data = next((item for item in data if isinstance(item, dict)), None)
    if isinstance(data, dict) and data:
        return AirportRecord.from_json(data)
    return None


async def lookup_airport(client, code):
    """
    Fetch the airport record for ``code``.
    Raises LookupMiss when the upstream API has no record for it.
    """
    data = await client.fetch_json("airport", {"ids": code})
    airport = first_airport(data)
    if airport is None:
        raise LookupMiss(code)
    return airport
