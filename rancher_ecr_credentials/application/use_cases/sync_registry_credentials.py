"""Use case running one full credential synchronization pass."""

import logging
from dataclasses import dataclass

from ...domain.entities import ReconciliationReport
from ...domain.value_objects import ReconciliationConfig
from ..exceptions import ProviderError
from ..ports import TokenProvider
from .reconcile_registry_credentials import RegistryCredentialReconciler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyncResult:
    """Result of one synchronization pass."""

    report: ReconciliationReport
    provider_error: str | None = None

    @property
    def success(self) -> bool:
        """Check if tokens were fetched and no token failed."""
        return self.provider_error is None and not self.report.has_failures


class SyncRegistryCredentials:
    """Fetches fresh authorization tokens and reconciles them."""

    def __init__(
        self,
        token_provider: TokenProvider,
        reconciler: RegistryCredentialReconciler,
        config: ReconciliationConfig,
    ) -> None:
        self._provider = token_provider
        self._reconciler = reconciler
        self._config = config

    async def execute(self) -> SyncResult:
        """
        Run one synchronization pass.

        A provider failure ends the pass early and is returned in the result;
        the next scheduled pass tries again.
        """
        logger.info("Updating ECR credentials")

        account_ids = sorted(self._config.registry_ids) or None
        try:
            tokens = await self._provider.get_authorization_tokens(account_ids)
        except ProviderError as e:
            logger.error("Error updating ECR credentials: %s", e)
            return SyncResult(report=ReconciliationReport(), provider_error=str(e))

        logger.info("Retrieved %d authorization tokens", len(tokens))
        for token in tokens:
            if token.expires_at is not None:
                logger.debug("Token for %s expires at %s", token.proxy_endpoint, token.expires_at.isoformat())

        report = await self._reconciler.reconcile(tokens)
        return SyncResult(report=report)
