"""Parser for the value of an HTML ``srcset`` attribute.

Follows the WHATWG "parse a srcset attribute" algorithm. Candidates with
invalid descriptors are dropped and parsing carries on with the next one,
so :func:`parse` returns a list for every input string.
"""

from __future__ import annotations

import logging
from typing import List

from .descriptors import classify
from .errors import CandidateRejected
from .models import ImageCandidate
from .scanner import (
    LEADING_COMMAS_OR_SPACES,
    LEADING_NOT_SPACES,
    Cursor,
    collect,
    strip_trailing_commas,
)
from .tokenizer import tokenize_descriptors

logger = logging.getLogger("srcset")


def parse(value: str) -> List[ImageCandidate]:
    """Parse a srcset value into image candidates, in input order."""
    cursor = Cursor(value)
    candidates: List[ImageCandidate] = []

    while True:
        collect(cursor, LEADING_COMMAS_OR_SPACES)
        if cursor.at_end:
            return candidates

        url = collect(cursor, LEADING_NOT_SPACES)
        if url.endswith(","):
            url = strip_trailing_commas(url)
            tokens: List[str] = []
        else:
            tokens = tokenize_descriptors(cursor)

        try:
            descriptors = classify(tokens)
        except CandidateRejected as exc:
            logger.debug("Dropping srcset candidate %s: %s", url, exc)
            continue

        candidates.append(
            ImageCandidate(
                url=url,
                width=descriptors.width,
                height=descriptors.height,
                density=descriptors.density,
            )
        )
