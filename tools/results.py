#!/usr/bin/env python3
"""
Shared result helpers for the aviation weather tools.
Every tool answers with a single text block, flagged when it is an error.
"""

import logging
from typing import Annotated

from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import Field

tool_logger = logging.getLogger("mcp.tools")

AirportCode = Annotated[
    str,
    Field(description="ICAO airport code (e.g. KJFK)", min_length=3, max_length=4),
]


def text_result(text):
    """Wrap formatted text as a successful tool result."""
    return CallToolResult(content=[TextContent(type="text", text=text)])


def error_result(message):
    """Wrap a human-readable message as a failed tool result."""
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def failure(context, error):
    """Log a handler failure and convert it to an error result."""
    tool_logger.warning(f"Error fetching {context}: {error}")
    return error_result(f"Error fetching {context}: {error}")


def read_only(title):
    """Annotations shared by every tool: read-only queries of a public API."""
    return ToolAnnotations(
        title=title,
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    )
