"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class ProviderError(ApplicationError):
    """Raised when authorization tokens cannot be fetched."""


class DirectoryError(ApplicationError):
    """Raised when registry directory operations fail."""


class CredentialStoreError(ApplicationError):
    """Raised when credential store operations fail."""


class PartialCreateFailureError(ApplicationError):
    """Raised when a registry was created but its credential was not."""

    def __init__(self, registry_id: str, cause: Exception) -> None:
        self.registry_id = registry_id
        super().__init__(
            f"Registry {registry_id} was created but its credential could not be: {cause}. "
            "The registry must be removed or completed manually"
        )


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""


class StartupError(ApplicationError):
    """Raised when a required dependency is unavailable at startup."""
