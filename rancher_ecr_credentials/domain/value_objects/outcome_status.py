"""Outcome status value object."""

from enum import StrEnum, auto


class OutcomeStatus(StrEnum):
    """Terminal state of a single token's reconciliation."""

    UPDATED = auto()
    CREATED = auto()
    SKIPPED = auto()
    FAILED = auto()

    def __str__(self) -> str:
        return self.value
