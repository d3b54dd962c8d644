"""Reconciliation report aggregate root."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..value_objects import OutcomeReason, OutcomeStatus


@dataclass(frozen=True, slots=True)
class TupleOutcome:
    """Result of reconciling one authorization token."""

    endpoint: str
    status: OutcomeStatus
    reason: OutcomeReason | None = None
    registry_id: str | None = None
    credential_id: str | None = None
    message: str = ""

    @property
    def requires_operator(self) -> bool:
        """Check if this outcome left state that a human must fix."""
        return self.reason is not None and self.reason.requires_operator


@dataclass(slots=True)
class ReconciliationReport:
    """Aggregate root collecting the outcomes of one reconciliation pass."""

    outcomes: list[TupleOutcome] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def add(self, outcome: TupleOutcome) -> None:
        """Record the outcome of one token."""
        self.outcomes.append(outcome)

    def _with_status(self, status: OutcomeStatus) -> list[TupleOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def updated(self) -> list[TupleOutcome]:
        """Outcomes where an existing credential was refreshed."""
        return self._with_status(OutcomeStatus.UPDATED)

    @property
    def created(self) -> list[TupleOutcome]:
        """Outcomes where a registry and credential were created."""
        return self._with_status(OutcomeStatus.CREATED)

    @property
    def skipped(self) -> list[TupleOutcome]:
        """Outcomes that were skipped without error."""
        return self._with_status(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> list[TupleOutcome]:
        """Outcomes that failed."""
        return self._with_status(OutcomeStatus.FAILED)

    @property
    def total_count(self) -> int:
        """Number of tokens processed."""
        return len(self.outcomes)

    @property
    def has_failures(self) -> bool:
        """Check if any token failed."""
        return any(o.status == OutcomeStatus.FAILED for o in self.outcomes)

    @property
    def requires_attention(self) -> bool:
        """Check if any outcome needs manual cleanup."""
        return any(o.requires_operator for o in self.outcomes)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the pass."""
        if not self.outcomes:
            return "No authorization tokens processed"

        parts: list[str] = []
        for label, items in (
            ("updated", self.updated),
            ("created", self.created),
            ("skipped", self.skipped),
            ("failed", self.failed),
        ):
            if items:
                parts.append(f"{len(items)} {label}")

        return f"{self.total_count} tokens processed: {', '.join(parts)}"
