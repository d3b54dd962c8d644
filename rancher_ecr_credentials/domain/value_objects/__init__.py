"""Domain value objects - Immutable objects defined by their attributes."""

from .outcome_reason import OutcomeReason
from .outcome_status import OutcomeStatus
from .reconciliation_config import ReconciliationConfig

__all__ = [
    "OutcomeReason",
    "OutcomeStatus",
    "ReconciliationConfig",
]
