"""Infrastructure adapters - Implementations of application ports."""

from .ecr import EcrConfig, EcrTokenProvider
from .rancher import (
    RancherClient,
    RancherClientConfig,
    RancherCredentialStore,
    RancherRegistryDirectory,
)

__all__ = [
    "EcrConfig",
    "EcrTokenProvider",
    "RancherClient",
    "RancherClientConfig",
    "RancherCredentialStore",
    "RancherRegistryDirectory",
]
