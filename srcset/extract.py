"""HTML extraction of srcset attributes."""

from __future__ import annotations

import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from .config import ExtractConfig
from .models import SrcsetAttribute
from .parser import parse

logger = logging.getLogger("srcset")


def extract_srcsets(
    html: str,
    config: Optional[ExtractConfig] = None,
) -> List[SrcsetAttribute]:
    """Return every srcset attribute on the configured tags, in document order."""
    config = config or ExtractConfig()
    soup = BeautifulSoup(html, "html.parser")

    attributes: List[SrcsetAttribute] = []
    for tag in soup.find_all(list(config.tags), srcset=True):
        value = tag["srcset"]
        candidates = parse(value)
        logger.debug(
            "Found srcset on <%s> with %d candidate(s)", tag.name, len(candidates)
        )
        attributes.append(SrcsetAttribute(tag.name, value, candidates))
    return attributes


def fetch_html(url: str, config: Optional[ExtractConfig] = None) -> str:
    """Download a page and return its decoded HTML."""
    config = config or ExtractConfig()
    session = requests.Session()
    session.headers["User-Agent"] = config.user_agent
    logger.info("Fetching %s", url)
    resp = session.get(url, timeout=config.timeout)
    resp.raise_for_status()
    return resp.text
