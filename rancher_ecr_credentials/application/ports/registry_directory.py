"""Port for the registry directory - driven/secondary port."""

from collections.abc import Mapping
from typing import Protocol

from ...domain.entities import RegistryRecord


class RegistryDirectory(Protocol):
    """Port for listing and creating registry records in the cluster manager."""

    async def list_registries(self, filters: Mapping[str, str] | None = None) -> list[RegistryRecord]:
        """
        List registry records, exhausting any pagination.

        Raises:
            DirectoryError: If the listing fails.
        """
        ...

    async def create_registry(self, server_address: str) -> RegistryRecord:
        """
        Create a registry record for a server address.

        Raises:
            DirectoryError: If creation fails.
        """
        ...
