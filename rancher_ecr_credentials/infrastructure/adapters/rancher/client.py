"""Rancher (cattle) v1 API client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


def _as_object(response: httpx.Response) -> dict[str, Any]:
    """
    Decode a JSON object response body.

    Raises:
        ValueError: If the body is not JSON or not an object.
    """
    data = response.json()
    if not isinstance(data, dict):
        msg = f"Unexpected Rancher API payload: expected an object, got {type(data).__name__}"
        raise ValueError(msg)
    return data


@dataclass(frozen=True, slots=True)
class RancherClientConfig:
    """Configuration for the Rancher API client."""

    url: str
    access_key: str
    secret_key: str
    timeout: float = 30.0


class RancherClient:
    """
    Async client for the Rancher API.

    Handles authentication and paginated collection requests.
    """

    def __init__(
        self,
        config: RancherClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Rancher client."""
        self._config = config
        self._base_url = config.url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            auth=(self._config.access_key, self._config.secret_key),
            timeout=self._config.timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    def _url(self, path: str) -> str:
        # Handle both relative paths and absolute pagination links
        return path if path.startswith("http") else f"{self._base_url}/{path.lstrip('/')}"

    async def ping(self) -> None:
        """
        Check that the API is reachable with the configured keys.

        Raises:
            httpx.HTTPError: If the request fails.
        """
        async with self._client() as client:
            response = await client.get(self._base_url)
            response.raise_for_status()
        logger.info("Connected to Rancher API at %s", self._base_url)

    async def list_collection(
        self,
        collection: str,
        filters: Mapping[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Retrieve all pages of a collection.

        Args:
            collection: Collection name, e.g. ``registries``.
            filters: Query filters, e.g. ``{"registryId": "1r1"}``.

        Returns:
            Combined list of all resources across pages.

        Raises:
            httpx.HTTPError: If a request fails.
            ValueError: If a page is not a collection of objects.
        """
        results: list[dict[str, Any]] = []
        url: str | None = self._url(collection)
        params: dict[str, str] | None = dict(filters) if filters else None

        async with self._client() as client:
            while url:
                response = await client.get(url, params=params)
                response.raise_for_status()
                data = _as_object(response)

                page = data.get("data", [])
                if not isinstance(page, list) or not all(isinstance(item, dict) for item in page):
                    msg = f"Unexpected {collection} collection payload: data is not a list of objects"
                    raise ValueError(msg)
                results.extend(page)
                pagination = data.get("pagination") or {}
                url = pagination.get("next") if isinstance(pagination, dict) else None
                # Next links already carry the query
                params = None

        return results

    async def create(self, collection: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Create a resource in a collection."""
        async with self._client() as client:
            response = await client.post(self._url(collection), json=dict(payload))
            response.raise_for_status()
            return _as_object(response)

    async def update(self, collection: str, resource_id: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Update a resource by id."""
        async with self._client() as client:
            response = await client.put(self._url(f"{collection}/{resource_id}"), json=dict(payload))
            response.raise_for_status()
            return _as_object(response)
