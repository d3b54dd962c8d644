"""Application ports - Interfaces for external adapters."""

from .credential_store import CredentialStore
from .registry_directory import RegistryDirectory
from .token_provider import TokenProvider

__all__ = [
    "CredentialStore",
    "RegistryDirectory",
    "TokenProvider",
]
