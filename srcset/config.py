"""Configuration objects and constants for srcset extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_TAGS = ("img", "source")
DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "srcset/0.1 (+https://html.spec.whatwg.org/#srcset-attributes)"


@dataclass
class ExtractConfig:
    """Settings that control which attributes are read and how pages are fetched."""

    tags: Tuple[str, ...] = DEFAULT_TAGS
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
