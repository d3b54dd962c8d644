"""AWS ECR authorization token provider."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Collection
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

import boto3
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from ....application.exceptions import ProviderError
from ....domain.entities import AuthorizationTuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EcrConfig:
    """ECR client configuration."""

    region: str | None = None


class EcrTokenProvider:
    """
    Token provider implementation using the ECR GetAuthorizationToken API.

    Implements the TokenProvider port.
    """

    def __init__(self, config: EcrConfig, client: BaseClient | None = None) -> None:
        """
        Initialize the provider.

        Args:
            config: ECR configuration.
            client: Pre-built boto3 ECR client; created from the default
                credential chain when omitted.
        """
        self._config = config
        self._client = client

    def _get_client(self) -> BaseClient:
        if self._client is None:
            self._client = boto3.client("ecr", region_name=self._config.region)
        return self._client

    async def get_authorization_tokens(
        self, account_ids: Collection[str] | None = None
    ) -> list[AuthorizationTuple]:
        """
        Request authorization tokens from ECR.

        The boto3 call blocks, so it runs in a worker thread.

        Raises:
            ProviderError: If the call fails or returns no authorization data.
        """
        return await asyncio.to_thread(self._fetch, account_ids)

    def _fetch(self, account_ids: Collection[str] | None) -> list[AuthorizationTuple]:
        kwargs: dict[str, Any] = {}
        if account_ids:
            kwargs["registryIds"] = list(account_ids)

        try:
            response = self._get_client().get_authorization_token(**kwargs)
        except (BotoCoreError, ClientError) as e:
            msg = f"GetAuthorizationToken failed: {e}"
            raise ProviderError(msg) from e

        logger.info("Returned from AWS GetAuthorizationToken call successfully")

        data = response.get("authorizationData", [])
        if not data:
            msg = "Request did not return authorization data"
            raise ProviderError(msg)

        return [self._map_authorization(item) for item in data]

    @staticmethod
    def _map_authorization(raw: dict[str, Any]) -> AuthorizationTuple:
        endpoint = raw.get("proxyEndpoint", "")
        return AuthorizationTuple(
            proxy_endpoint=endpoint,
            raw_token=raw.get("authorizationToken", ""),
            account_id=_account_id(endpoint),
            expires_at=raw.get("expiresAt"),
        )


def _account_id(endpoint: str) -> str | None:
    """Account id from an endpoint like https://<account>.dkr.ecr.<region>.amazonaws.com."""
    try:
        host = urlsplit(endpoint).hostname or ""
    except ValueError:
        return None
    label = host.split(".", 1)[0]
    return label if label.isdigit() else None
