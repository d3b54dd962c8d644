"""Domain entities - Objects with identity and lifecycle."""

from .authorization import AuthorizationTuple, DecodedCredential
from .reconciliation_report import ReconciliationReport, TupleOutcome
from .registry import CredentialRecord, RegistryRecord

__all__ = [
    "AuthorizationTuple",
    "CredentialRecord",
    "DecodedCredential",
    "ReconciliationReport",
    "RegistryRecord",
    "TupleOutcome",
]
