#!/usr/bin/env python3
"""
Client for the aviationweather.gov data API.
Builds per-endpoint queries and decodes raw text or JSON responses.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from utils.errors import RequestFailed, TransportError, UnexpectedShape

logger = logging.getLogger(__name__)

QueryParams = Dict[str, Any]


def build_params(params: Optional[QueryParams]) -> QueryParams:
    """Drop absent entries; they are never transmitted."""
    return {key: value for key, value in (params or {}).items() if value is not None}


class AviationWeatherClient:
    """Thin wrapper around a shared httpx client and the API base URL."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self._http = http_client
        self.base_url = base_url.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint}"

    async def _get(self, endpoint: str, params: QueryParams) -> httpx.Response:
        url = self.url_for(endpoint)
        query = build_params(params)
        try:
            response = await self._http.get(url, params=query)
        except httpx.TransportError as e:
            detail = str(e) or type(e).__name__
            logger.error(f"Request to {endpoint} failed: {detail}", exc_info=True)
            raise TransportError(f"Network error contacting {endpoint}: {detail}") from e

        if not response.is_success:
            logger.error(f"Request to {endpoint} returned HTTP {response.status_code}")
            raise RequestFailed(response.status_code, endpoint)
        return response

    async def fetch_text(self, endpoint: str, params: Optional[QueryParams] = None) -> str:
        """Fetch an endpoint in raw format and return the body text."""
        query = dict(params or {})
        query["format"] = "raw"
        response = await self._get(endpoint, query)
        if response.status_code == 204:
            return ""
        return response.text

    async def fetch_json(
        self, endpoint: str, params: Optional[QueryParams] = None, format: str = "json"
    ) -> Any:
        """Fetch an endpoint as JSON ("json" or "decoded") and return the parsed body."""
        query = dict(params or {})
        query["format"] = format
        response = await self._get(endpoint, query)
        if response.status_code == 204 or not response.content.strip():
            return []
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Response from {endpoint} is not valid JSON: {e}")
            raise UnexpectedShape(f"Expected JSON from {endpoint}") from e
