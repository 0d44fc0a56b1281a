#!/usr/bin/env python3
"""
Text formatters for aviation weather responses.
Turns parsed records into stable, readable text blocks.
"""

from utils.models import parse_runway

NOT_AVAILABLE = "Not available"


def or_not_available(value, suffix=""):
    """Render a possibly-missing value, never blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return NOT_AVAILABLE
    return f"{value}{suffix}"


def text_or(text, fallback):
    """Trim a raw text payload, substituting ``fallback`` when it is empty."""
    trimmed = (text or "").strip()
    return trimmed or fallback


def format_runways(runways):
    """
    Format a runway list, one entry per line.

    Entries may already be parsed variants or raw upstream elements
    (strings, dicts, anything else).
    """
    if not runways:
        return "None listed"
    return "\n".join(parse_runway(r).describe() for r in runways)


def format_airport_info(code, airport):
    """Format an AirportRecord as an information block."""
    lines = [
        f"Airport Information for {code}:",
        f"Name: {or_not_available(airport.name)}",
        f"City: {or_not_available(airport.city)}",
        f"State: {or_not_available(airport.state)}",
        f"Country: {or_not_available(airport.country)}",
        f"Latitude: {or_not_available(airport.latitude)}",
        f"Longitude: {or_not_available(airport.longitude)}",
        f"Elevation: {or_not_available(airport.elevation, ' ft')}",
        "Runways:",
        format_runways(airport.runways),
    ]
    return "\n".join(lines)


def format_gairmets(payload):
    """Render a parsed G-AIRMET payload."""
    return payload.render()


def format_route_briefing(briefing):
    """Format a RouteBriefing as a multi-section text block."""
    mid_lat, mid_lon = briefing.midpoint
    lines = [
        f"Route Weather Briefing: {briefing.departure} to {briefing.destination}",
        f"Approximate distance: {round(briefing.distance_nm)} nm",
        f"Midpoint: {mid_lat:.4f}, {mid_lon:.4f}",
        "",
        f"=== Departure: {briefing.departure} ===",
        f"METAR: {text_or(briefing.departure_metar, NOT_AVAILABLE)}",
        f"TAF: {text_or(briefing.departure_taf, NOT_AVAILABLE)}",
        "",
        f"=== Destination: {briefing.destination} ===",
        f"METAR: {text_or(briefing.destination_metar, NOT_AVAILABLE)}",
        f"TAF: {text_or(briefing.destination_taf, NOT_AVAILABLE)}",
        "",
        f"=== En-route PIREPs (within {briefing.search_radius} miles of midpoint) ===",
        text_or(briefing.enroute_pireps, "No PIREPs found en-route"),
    ]
    return "\n".join(lines)
