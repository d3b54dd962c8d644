"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class DecodeError(DomainError):
    """Raised when an authorization token cannot be decoded."""


class InvalidEncodingError(DecodeError):
    """Raised when a token is not valid base64 encoded UTF-8."""


class MalformedCredentialFormatError(DecodeError):
    """Raised when a decoded token is not a single <user>:<password> pair."""

    def __init__(self, decoded_text: str) -> None:
        self.decoded_text = decoded_text
        self.field_count = len(decoded_text.split(":"))
        super().__init__(
            f"Authorization token does not contain data in <user>:<password> format "
            f"({self.field_count} fields)"
        )


class ResolveError(DomainError):
    """Raised when a registry host cannot be resolved."""


class InvalidEndpointError(ResolveError):
    """Raised when an endpoint or server address cannot be parsed."""


class AmbiguousCredentialStateError(DomainError):
    """Raised when a registry does not own exactly one credential."""

    def __init__(self, registry_id: str, count: int) -> None:
        self.registry_id = registry_id
        self.count = count
        super().__init__(f"Registry {registry_id} has {count} credentials, expected exactly 1")
