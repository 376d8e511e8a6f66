"""MCP server exposing srcset parsing tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from mcp.server.fastmcp import FastMCP

from .extract import extract_srcsets as extract_attributes
from .parser import parse

logger = logging.getLogger("srcset.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="srcset")


@mcp.tool()
def parse_srcset(value: str) -> List[Dict[str, Any]]:
    """Parse a srcset attribute value into image candidates."""
    return [candidate.to_dict() for candidate in parse(value)]


@mcp.tool()
def extract_srcsets(html: str) -> List[Dict[str, Any]]:
    """Find every srcset attribute in an HTML document and parse it."""
    return [attribute.to_dict() for attribute in extract_attributes(html)]


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
