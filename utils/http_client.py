#!/usr/bin/env python3
"""
HTTP client utilities for the aviation weather server.
Builds the HTTP client with proper timeouts and headers.
"""

import httpx

from config import Config


def create_http_client(transport=None) -> httpx.AsyncClient:
    """
    Create the HTTP client shared by every tool invocation.

    The caller owns the client and is responsible for closing it, normally
    with ``async with``. ``transport`` is passed through to httpx so tests can
    swap in an ``httpx.MockTransport``.
    """
    timeout = httpx.Timeout(Config.HTTP_TIMEOUT, connect=Config.HTTP_CONNECT_TIMEOUT)
    headers = {"User-Agent": Config.USER_AGENT}
    return httpx.AsyncClient(timeout=timeout, headers=headers, transport=transport)
