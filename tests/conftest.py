"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from rancher_ecr_credentials.domain.entities import (
    AuthorizationTuple,
    CredentialRecord,
    RegistryRecord,
)
from rancher_ecr_credentials.domain.value_objects import ReconciliationConfig
from tests.fakes import (
    ECR_ENDPOINT,
    ECR_HOST,
    FakeCredentialStore,
    FakeRegistryDirectory,
    encode,
)


@pytest.fixture
def mock_token() -> AuthorizationTuple:
    """An ECR token for mockUser:mockPassword."""
    return AuthorizationTuple(
        proxy_endpoint=ECR_ENDPOINT,
        raw_token=encode("mockUser:mockPassword"),
        account_id="012345678910",
    )


@pytest.fixture
def default_config() -> ReconciliationConfig:
    """Reconciliation config without auto-create."""
    return ReconciliationConfig()


@pytest.fixture
def auto_create_config() -> ReconciliationConfig:
    """Reconciliation config with auto-create enabled."""
    return ReconciliationConfig(auto_create=True)


@pytest.fixture
def matching_directory() -> FakeRegistryDirectory:
    """Directory with one registry for the ECR host."""
    return FakeRegistryDirectory([RegistryRecord(id="1r1", server_address=ECR_HOST)])


@pytest.fixture
def single_credential_store() -> FakeCredentialStore:
    """Store with exactly one credential for registry 1r1."""
    return FakeCredentialStore([CredentialRecord(id="1rc1", registry_id="1r1")])
