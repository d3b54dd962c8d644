"""Rancher API adapters."""

from .client import RancherClient, RancherClientConfig
from .credential_store import RancherCredentialStore
from .registry_directory import RancherRegistryDirectory

__all__ = [
    "RancherClient",
    "RancherClientConfig",
    "RancherCredentialStore",
    "RancherRegistryDirectory",
]
