"""Resolution of registry endpoints to the host used for matching."""

import re
from urllib.parse import SplitResult, urlsplit

from ..exceptions import InvalidEndpointError

# host:port, optionally followed by a path, stored without a scheme
_BARE_HOST_PORT = re.compile(r"^[^/:@]+:\d+(/.*)?$")


def _split(address: str) -> SplitResult:
    try:
        parts = urlsplit(address)
        # Accessing the port validates it
        parts.port  # noqa: B018
    except ValueError as e:
        msg = f"Failed to parse registry URL {address!r}: {e}"
        raise InvalidEndpointError(msg) from e
    return parts


def _host(parts: SplitResult) -> str:
    """Host and port of a parsed URL, without userinfo."""
    return parts.netloc.rpartition("@")[2]


def resolve_host(proxy_endpoint: str, override: str | None = None) -> str:
    """
    Resolve the host an authorization token should be matched against.

    Args:
        proxy_endpoint: Registry endpoint URL returned with the token.
        override: Host to use instead of the endpoint host, for registries
            reached through a host-rewriting proxy.

    Returns:
        The override if given, otherwise the endpoint's host component.

    Raises:
        InvalidEndpointError: If the endpoint cannot be parsed or has no host.
    """
    if override:
        return override

    host = _host(_split(proxy_endpoint))
    if not host:
        msg = f"Registry URL {proxy_endpoint!r} has no host"
        raise InvalidEndpointError(msg)
    return host


def resolve_registry_host(server_address: str, override: str | None = None) -> str:
    """
    Resolve the host of a configured registry's server address.

    A non-empty override is returned verbatim, as for tokens. Entries stored
    as ``host:port`` resolve to ``host:port``. Other entries stored without a
    scheme parse with an empty host; their path component is used instead.

    Raises:
        InvalidEndpointError: If the address cannot be parsed.
    """
    if override:
        return override

    if _BARE_HOST_PORT.match(server_address):
        return _host(_split(f"//{server_address}"))

    parts = _split(server_address)
    return _host(parts) or parts.path
