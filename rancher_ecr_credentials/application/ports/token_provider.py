"""Port for authorization token retrieval - driven/secondary port."""

from collections.abc import Collection
from typing import Protocol

from ...domain.entities import AuthorizationTuple


class TokenProvider(Protocol):
    """
    Port for fetching registry authorization tokens.

    This is a driven (secondary) port that defines how the application
    obtains short-lived tokens from the container registry provider.
    """

    async def get_authorization_tokens(
        self, account_ids: Collection[str] | None = None
    ) -> list[AuthorizationTuple]:
        """
        Request authorization tokens.

        Args:
            account_ids: Accounts to request tokens for, or None for the
                provider's default account.

        Returns:
            One tuple per registry endpoint returned by the provider.

        Raises:
            ProviderError: If the request fails.
        """
        ...
