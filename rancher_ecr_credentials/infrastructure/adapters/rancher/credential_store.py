"""Rancher registry credential store implementation."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ....application.exceptions import CredentialStoreError
from ....domain.entities import CredentialRecord
from .client import RancherClient

logger = logging.getLogger(__name__)

REGISTRY_CREDENTIALS = "registrycredentials"

# Older Rancher releases reject registry credentials without an email
PLACEHOLDER_EMAIL = "not-really@required.anymore"


class RancherCredentialStore:
    """
    Credential store implementation using the Rancher API.

    Implements the CredentialStore port.
    """

    def __init__(self, client: RancherClient) -> None:
        self._client = client

    async def list_credentials(self, registry_id: str) -> list[CredentialRecord]:
        """Retrieve the credentials of a registry."""
        try:
            raw = await self._client.list_collection(REGISTRY_CREDENTIALS, {"registryId": registry_id})
            return [self._map_credential(item) for item in raw]
        except (httpx.HTTPError, KeyError, ValueError) as e:
            msg = f"Failed to retrieve registry credentials for id {registry_id}: {e}"
            raise CredentialStoreError(msg) from e

    async def create_credential(self, registry_id: str, username: str, password: str) -> CredentialRecord:
        """Create a credential for a registry."""
        payload = {
            "registryId": registry_id,
            "publicValue": username,
            "secretValue": password,
            "email": PLACEHOLDER_EMAIL,
        }
        try:
            raw = await self._client.create(REGISTRY_CREDENTIALS, payload)
            credential = self._map_credential(raw)
        except (httpx.HTTPError, KeyError, ValueError) as e:
            msg = f"Failed to create registry credential for registry {registry_id}: {e}"
            raise CredentialStoreError(msg) from e

        logger.info("Created registry credential %s for registry %s", credential.id, registry_id)
        return credential

    async def update_credential(self, credential_id: str, username: str, password: str) -> CredentialRecord:
        """Overwrite the username and password of a credential."""
        payload = {
            "publicValue": username,
            "secretValue": password,
            "email": PLACEHOLDER_EMAIL,
        }
        try:
            raw = await self._client.update(REGISTRY_CREDENTIALS, credential_id, payload)
            return self._map_credential(raw)
        except (httpx.HTTPError, KeyError, ValueError) as e:
            msg = f"Failed to update registry credential {credential_id}: {e}"
            raise CredentialStoreError(msg) from e

    @staticmethod
    def _map_credential(raw: dict[str, Any]) -> CredentialRecord:
        """Map a raw Rancher credential to the domain entity."""
        return CredentialRecord(
            id=raw["id"],
            registry_id=raw.get("registryId") or "",
            username=raw.get("publicValue") or "",
            password=raw.get("secretValue") or "",
        )
