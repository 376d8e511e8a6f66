"""Data models produced by the srcset parser and extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ImageCandidate:
    """One image source listed in a srcset attribute."""

    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    density: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"url": self.url}
        if self.width is not None:
            data["width"] = self.width
        if self.height is not None:
            data["height"] = self.height
        if self.density is not None:
            data["density"] = self.density
        return data


@dataclass
class SrcsetAttribute:
    """A srcset value together with its parsed candidates.

    ``tag`` names the element the value was read from and ``source`` the
    file or URL of the document; both are None for values given directly.
    """

    tag: Optional[str]
    value: str
    candidates: List[ImageCandidate] = field(default_factory=list)
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.source is not None:
            data["source"] = self.source
        if self.tag is not None:
            data["tag"] = self.tag
        data["value"] = self.value
        data["candidates"] = [candidate.to_dict() for candidate in self.candidates]
        return data
