"""Rancher registry directory implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ....application.exceptions import DirectoryError
from ....domain.entities import RegistryRecord
from .client import RancherClient

logger = logging.getLogger(__name__)

REGISTRIES = "registries"


class RancherRegistryDirectory:
    """
    Registry directory implementation using the Rancher API.

    Implements the RegistryDirectory port.
    """

    def __init__(self, client: RancherClient) -> None:
        self._client = client

    async def list_registries(self, filters: Mapping[str, str] | None = None) -> list[RegistryRecord]:
        """
        Retrieve all registries.

        Raises:
            DirectoryError: If retrieval fails.
        """
        try:
            raw = await self._client.list_collection(REGISTRIES, filters)
            registries = [self._map_registry(item) for item in raw]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            msg = f"Failed to retrieve registries: {e}"
            raise DirectoryError(msg) from e

        logger.debug("Retrieved %d registries", len(registries))
        return registries

    async def create_registry(self, server_address: str) -> RegistryRecord:
        """
        Create a registry for a server address.

        Raises:
            DirectoryError: If creation fails.
        """
        try:
            raw = await self._client.create(REGISTRIES, {"serverAddress": server_address})
            registry = self._map_registry(raw)
        except (httpx.HTTPError, KeyError, ValueError) as e:
            msg = f"Failed to create registry for {server_address}: {e}"
            raise DirectoryError(msg) from e

        logger.info("Created registry %s for %s", registry.id, server_address)
        return registry

    @staticmethod
    def _map_registry(raw: dict[str, Any]) -> RegistryRecord:
        return RegistryRecord(
            id=raw["id"],
            server_address=raw.get("serverAddress") or "",
        )
