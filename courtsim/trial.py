"""A trial and the score shared by all trials."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class TrialType(Enum):
    PENAL = 0
    CIVIL = 1


class Trial:
    """A trial of a given type; all trials share one running score."""

    _score: ClassVar[int] = 0

    def __init__(self, kind: TrialType = TrialType.CIVIL) -> None:
        self.kind = kind

    @classmethod
    def add_score(cls, value: int) -> None:
        """Add ``value`` to the shared score."""
        Trial._score += value

    @classmethod
    def total_score(cls) -> int:
        return Trial._score