"""Port for the credential store - driven/secondary port."""

from typing import Protocol

from ...domain.entities import CredentialRecord


class CredentialStore(Protocol):
    """
    Port for registry credentials stored in the cluster manager.

    All methods raise CredentialStoreError on failure.
    """

    async def list_credentials(self, registry_id: str) -> list[CredentialRecord]:
        """List the credentials belonging to a registry."""
        ...

    async def create_credential(self, registry_id: str, username: str, password: str) -> CredentialRecord:
        """Create a credential for a registry."""
        ...

    async def update_credential(self, credential_id: str, username: str, password: str) -> CredentialRecord:
        """Overwrite the username and password of a credential."""
        ...
