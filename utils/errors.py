#!/usr/bin/env python3
"""
Error types raised while talking to the aviation weather API.
Tool handlers turn every one of these into an error result.
"""


class AviationWeatherError(Exception):
    """Base class for aviation weather failures."""


class LookupMiss(AviationWeatherError):
    """The upstream query returned no record for an identifier."""

    def __init__(self, identifier, kind="airport"):
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"Could not find {kind}: {identifier}")


class RequestFailed(AviationWeatherError):
    """The upstream API answered with a non-success status."""

    def __init__(self, status_code, endpoint=None):
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(f"HTTP error! status: {status_code}")


class TransportError(AviationWeatherError):
    """The request never got a response (DNS, connection, timeout)."""


class UnexpectedShape(AviationWeatherError):
    """The upstream payload did not match the requested format."""
