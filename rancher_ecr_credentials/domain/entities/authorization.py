"""Authorization token entities issued by the registry provider."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class AuthorizationTuple:
    """A raw authorization token and the registry endpoint it is valid for."""

    proxy_endpoint: str
    raw_token: str = field(repr=False)
    account_id: str | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class DecodedCredential:
    """Username and password carried by an authorization token."""

    username: str
    password: str = field(repr=False)
