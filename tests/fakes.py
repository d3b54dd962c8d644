"""In-memory fakes of the application ports."""

from __future__ import annotations

import base64
from collections.abc import Collection, Mapping

from rancher_ecr_credentials.application.exceptions import ProviderError
from rancher_ecr_credentials.domain.entities import (
    AuthorizationTuple,
    CredentialRecord,
    RegistryRecord,
)

ECR_HOST = "012345678910.dkr.ecr.us-east-1.amazonaws.com"
ECR_ENDPOINT = f"https://{ECR_HOST}"


def encode(text: str) -> str:
    """Base64 encode a token payload."""
    return base64.b64encode(text.encode()).decode()


class FakeRegistryDirectory:
    """In-memory registry directory recording every call."""

    def __init__(self, registries: list[RegistryRecord] | None = None) -> None:
        self.registries = list(registries or [])
        self.created: list[str] = []
        self.list_error: Exception | None = None
        self.create_error: Exception | None = None

    async def list_registries(self, filters: Mapping[str, str] | None = None) -> list[RegistryRecord]:
        if self.list_error:
            raise self.list_error
        return list(self.registries)

    async def create_registry(self, server_address: str) -> RegistryRecord:
        if self.create_error:
            raise self.create_error
        self.created.append(server_address)
        registry = RegistryRecord(id=f"1r{len(self.registries) + 1}", server_address=server_address)
        self.registries.append(registry)
        return registry


class FakeCredentialStore:
    """In-memory credential store recording every call."""

    def __init__(self, credentials: list[CredentialRecord] | None = None) -> None:
        self.credentials = list(credentials or [])
        self.created: list[tuple[str, str, str]] = []
        self.updated: list[tuple[str, str, str]] = []
        self.list_error: Exception | None = None
        self.create_error: Exception | None = None
        self.update_error: Exception | None = None

    async def list_credentials(self, registry_id: str) -> list[CredentialRecord]:
        if self.list_error:
            raise self.list_error
        return [c for c in self.credentials if c.registry_id == registry_id]

    async def create_credential(self, registry_id: str, username: str, password: str) -> CredentialRecord:
        if self.create_error:
            raise self.create_error
        self.created.append((registry_id, username, password))
        credential = CredentialRecord(
            id=f"1rc{len(self.credentials) + 1}",
            registry_id=registry_id,
            username=username,
            password=password,
        )
        self.credentials.append(credential)
        return credential

    async def update_credential(self, credential_id: str, username: str, password: str) -> CredentialRecord:
        if self.update_error:
            raise self.update_error
        self.updated.append((credential_id, username, password))
        current = next(c for c in self.credentials if c.id == credential_id)
        return CredentialRecord(
            id=credential_id,
            registry_id=current.registry_id,
            username=username,
            password=password,
        )


class FakeTokenProvider:
    """Token provider returning canned tokens."""

    def __init__(self, tokens: list[AuthorizationTuple] | None = None, error: str | None = None) -> None:
        self.tokens = list(tokens or [])
        self.error = error
        self.requests: list[Collection[str] | None] = []

    async def get_authorization_tokens(
        self, account_ids: Collection[str] | None = None
    ) -> list[AuthorizationTuple]:
        self.requests.append(account_ids)
        if self.error:
            raise ProviderError(self.error)
        return list(self.tokens)
