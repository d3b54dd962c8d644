"""AWS ECR adapters."""

from .token_provider import EcrConfig, EcrTokenProvider

__all__ = [
    "EcrConfig",
    "EcrTokenProvider",
]
