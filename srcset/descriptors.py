"""Classification and validation of srcset descriptor tokens."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import CandidateRejected
from .scanner import FLOATING_POINT, NON_NEGATIVE_INTEGER, matches

MAX_INTEGER = 2**63 - 1
MAX_INTEGER_DIGITS = len(str(MAX_INTEGER))


@dataclass(frozen=True)
class Descriptors:
    """Validated descriptor values for a single candidate."""

    width: Optional[int] = None
    height: Optional[int] = None
    density: Optional[float] = None


def _parse_dimension(body: str) -> Optional[int]:
    """Return a positive 64-bit integer, or None when out of range."""
    digits = body.lstrip("0")
    # Longer runs cannot fit and may exceed int()'s conversion limit.
    if len(digits) > MAX_INTEGER_DIGITS:
        return None
    value = int(digits or "0")
    if value == 0 or value > MAX_INTEGER:
        return None
    return value


def _parse_density(body: str) -> Optional[float]:
    value = float(body)
    if value < 0 or math.isinf(value):
        return None
    return value


def classify(tokens: Sequence[str]) -> Descriptors:
    """Turn descriptor tokens into typed values.

    Every token is examined even after a failure so that a later token can
    never make an invalid candidate acceptable. Raises CandidateRejected
    listing every problem found; an empty sequence is always valid.
    """
    width: Optional[int] = None
    height: Optional[int] = None
    density: Optional[float] = None
    reasons: List[str] = []

    for token in tokens:
        body, kind = token[:-1], token[-1:]

        if kind == "w" and matches(body, NON_NEGATIVE_INTEGER):
            if width is not None or density is not None:
                reasons.append(f"{token!r} conflicts with an earlier descriptor")
            value = _parse_dimension(body)
            if value is None:
                reasons.append(f"{token!r} is not a valid width")
            else:
                width = value
        elif kind == "x" and matches(body, FLOATING_POINT):
            if width is not None or height is not None or density is not None:
                reasons.append(f"{token!r} conflicts with an earlier descriptor")
            density_value = _parse_density(body)
            if density_value is None:
                reasons.append(f"{token!r} is not a valid density")
            else:
                density = density_value
        elif kind == "h" and matches(body, NON_NEGATIVE_INTEGER):
            if height is not None or density is not None:
                reasons.append(f"{token!r} conflicts with an earlier descriptor")
            value = _parse_dimension(body)
            if value is None:
                reasons.append(f"{token!r} is not a valid height")
            else:
                height = value
        else:
            reasons.append(f"{token!r} is not a recognised descriptor")

    if reasons:
        raise CandidateRejected(reasons)
    return Descriptors(width=width, height=height, density=density)
