"""Application use cases."""

from .reconcile_registry_credentials import RegistryCredentialReconciler
from .sync_registry_credentials import SyncRegistryCredentials, SyncResult

__all__ = [
    "RegistryCredentialReconciler",
    "SyncRegistryCredentials",
    "SyncResult",
]
