"""Exceptions raised while classifying srcset candidates."""

from __future__ import annotations

from typing import Sequence


class CandidateRejected(ValueError):
    """A candidate's descriptors are invalid; the candidate must be dropped."""

    def __init__(self, reasons: Sequence[str]) -> None:
        self.reasons = list(reasons)
        super().__init__("; ".join(self.reasons))
