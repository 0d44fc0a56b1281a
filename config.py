#!/usr/bin/env python3
"""
Configuration module for the Aviation Weather MCP server.
Centralizes upstream API, HTTP, and server settings.
"""

import os


class Config:
    """Configuration class for aviation weather settings."""

    # Upstream API
    AWC_BASE_URL = os.getenv("AWC_BASE_URL", "https://aviationweather.gov/api/data")

    # HTTP Settings
    HTTP_TIMEOUT = 20.0
    HTTP_CONNECT_TIMEOUT = 10.0
    USER_AGENT = "AviationWeatherMCP/1.0"

    # Server Settings
    SERVER_NAME = "aviation-weather"
    SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

    # Tool Settings
    DEFAULT_PIREP_RADIUS = 50
    MIN_ENROUTE_RADIUS = 50
    DEFAULT_SIGMET_REGION = "us"

    # File Paths
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    @classmethod
    def base_url(cls):
        """Get the upstream base URL without a trailing slash."""
        return cls.AWC_BASE_URL.rstrip("/")
