"""Reconciliation configuration value object."""

import re
from dataclasses import dataclass, field

_ACCOUNT_ID = re.compile(r"^\d{12}$")


@dataclass(frozen=True, slots=True)
class ReconciliationConfig:
    """Process-wide reconciliation settings, immutable after startup."""

    registry_ids: frozenset[str] = field(default_factory=frozenset)
    auto_create: bool = False
    host_override: str | None = None

    def __post_init__(self) -> None:
        """Normalize the override and validate account ids."""
        if self.host_override is not None and not self.host_override.strip():
            object.__setattr__(self, "host_override", None)

        invalid = sorted(rid for rid in self.registry_ids if not _ACCOUNT_ID.match(rid))
        if invalid:
            msg = f"Registry ids must be 12 digit AWS account ids: {', '.join(invalid)}"
            raise ValueError(msg)
