"""Domain services - Stateless operations on domain objects."""

from .host_resolver import resolve_host, resolve_registry_host
from .token_decoder import decode_token

__all__ = [
    "decode_token",
    "resolve_host",
    "resolve_registry_host",
]
