"""Parser for the HTML ``srcset`` attribute."""

from .config import ExtractConfig
from .extract import extract_srcsets, fetch_html
from .models import ImageCandidate, SrcsetAttribute
from .parser import parse

__all__ = [
    "ExtractConfig",
    "ImageCandidate",
    "SrcsetAttribute",
    "extract_srcsets",
    "fetch_html",
    "parse",
]
