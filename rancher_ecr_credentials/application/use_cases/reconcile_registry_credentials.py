"""Use case for reconciling authorization tokens into registry credentials."""

import logging
from collections.abc import Iterable

from ...domain.entities import (
    AuthorizationTuple,
    DecodedCredential,
    ReconciliationReport,
    RegistryRecord,
    TupleOutcome,
)
from ...domain.exceptions import AmbiguousCredentialStateError, DecodeError, ResolveError
from ...domain.services import decode_token, resolve_host, resolve_registry_host
from ...domain.value_objects import OutcomeReason, OutcomeStatus, ReconciliationConfig
from ..exceptions import CredentialStoreError, DirectoryError, PartialCreateFailureError
from ..ports import CredentialStore, RegistryDirectory

logger = logging.getLogger(__name__)


class RegistryCredentialReconciler:
    """
    Propagates authorization tokens into the cluster manager's registry credentials.

    Each token is handled independently: it is decoded, its host is matched
    against the configured registries, and the matching registry's credential
    is overwritten. When nothing matches and auto-create is enabled, a new
    registry and credential are created instead.
    """

    def __init__(
        self,
        config: ReconciliationConfig,
        registry_directory: RegistryDirectory,
        credential_store: CredentialStore,
    ) -> None:
        """
        Initialize the reconciler.

        Args:
            config: Reconciliation settings.
            registry_directory: Adapter for registry records.
            credential_store: Adapter for credential records.
        """
        self._config = config
        self._directory = registry_directory
        self._store = credential_store

    async def reconcile(self, tokens: Iterable[AuthorizationTuple]) -> ReconciliationReport:
        """
        Reconcile every token, in order.

        A failure while handling one token is recorded in the report and does
        not stop the remaining tokens from being processed.

        Returns:
            ReconciliationReport with one outcome per token.
        """
        report = ReconciliationReport()

        for token in tokens:
            outcome = await self._reconcile_token(token)
            self._log_outcome(outcome)
            report.add(outcome)

        logger.info("Reconciliation complete: %s", report.get_summary())
        return report

    async def _reconcile_token(self, token: AuthorizationTuple) -> TupleOutcome:
        endpoint = token.proxy_endpoint

        try:
            credential = decode_token(token.raw_token)
        except DecodeError as e:
            return _failed(endpoint, OutcomeReason.DECODE_ERROR, e)

        try:
            host = resolve_host(endpoint, self._config.host_override)
        except ResolveError as e:
            return _failed(endpoint, OutcomeReason.RESOLVE_ERROR, e)

        logger.info("Looking for configured registry for host %s", host)
        try:
            registry = await self._find_registry(host)
        except DirectoryError as e:
            return _failed(endpoint, OutcomeReason.DIRECTORY_ERROR, e)

        if registry is not None:
            return await self._update_credential(endpoint, registry, credential)

        if not self._config.auto_create:
            return TupleOutcome(
                endpoint=endpoint,
                status=OutcomeStatus.SKIPPED,
                reason=OutcomeReason.NO_MATCHING_REGISTRY,
                message=f"Failed to find configured registry to update for host {host}",
            )

        return await self._create_registry(endpoint, host, credential)

    async def _find_registry(self, host: str) -> RegistryRecord | None:
        """Return the first registry, in listing order, whose host matches."""
        registries = await self._directory.list_registries()

        for registry in registries:
            try:
                registry_host = resolve_registry_host(registry.server_address, self._config.host_override)
            except ResolveError:
                logger.warning(
                    "Skipping registry %s with unparseable server address %r",
                    registry.id,
                    registry.server_address,
                )
                continue

            if registry_host == host:
                return registry

        return None

    async def _update_credential(
        self,
        endpoint: str,
        registry: RegistryRecord,
        credential: DecodedCredential,
    ) -> TupleOutcome:
        try:
            existing = await self._store.list_credentials(registry.id)
            if len(existing) != 1:
                raise AmbiguousCredentialStateError(registry.id, len(existing))

            target = existing[0]
            await self._store.update_credential(target.id, credential.username, credential.password)

        except AmbiguousCredentialStateError as e:
            return _failed(endpoint, OutcomeReason.AMBIGUOUS_CREDENTIAL_STATE, e, registry_id=registry.id)
        except CredentialStoreError as e:
            return _failed(endpoint, OutcomeReason.CREDENTIAL_STORE_ERROR, e, registry_id=registry.id)

        return TupleOutcome(
            endpoint=endpoint,
            status=OutcomeStatus.UPDATED,
            registry_id=registry.id,
            credential_id=target.id,
            message=(
                f"Successfully updated credentials {target.id} for registry {registry.id}; "
                f"registry address: {registry.server_address}"
            ),
        )

    async def _create_registry(
        self,
        endpoint: str,
        host: str,
        credential: DecodedCredential,
    ) -> TupleOutcome:
        try:
            registry = await self._directory.create_registry(host)
        except DirectoryError as e:
            return _failed(endpoint, OutcomeReason.DIRECTORY_ERROR, e)

        try:
            created = await self._store.create_credential(registry.id, credential.username, credential.password)
        except CredentialStoreError as e:
            error = PartialCreateFailureError(registry.id, e)
            return _failed(endpoint, OutcomeReason.PARTIAL_CREATE_FAILURE, error, registry_id=registry.id)

        return TupleOutcome(
            endpoint=endpoint,
            status=OutcomeStatus.CREATED,
            registry_id=registry.id,
            credential_id=created.id,
            message=f"Created registry {registry.id} with credentials {created.id} for host {host}",
        )

    @staticmethod
    def _log_outcome(outcome: TupleOutcome) -> None:
        """Log an outcome with its token endpoint as context."""
        if outcome.status == OutcomeStatus.FAILED:
            if outcome.requires_operator:
                logger.error("[%s] Manual action required: %s", outcome.endpoint, outcome.message)
            else:
                logger.error("[%s] %s", outcome.endpoint, outcome.message)
        else:
            logger.info("[%s] %s", outcome.endpoint, outcome.message)


def _failed(
    endpoint: str,
    reason: OutcomeReason,
    error: Exception,
    *,
    registry_id: str | None = None,
) -> TupleOutcome:
    return TupleOutcome(
        endpoint=endpoint,
        status=OutcomeStatus.FAILED,
        reason=reason,
        registry_id=registry_id,
        message=f"{reason.display_name}: {error}",
    )
