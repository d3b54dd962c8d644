#!/usr/bin/env python3
"""
Rancher ECR Credentials

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys

import httpx
import uvicorn

from .application.exceptions import StartupError
from .application.use_cases import RegistryCredentialReconciler, SyncRegistryCredentials, SyncResult
from .infrastructure.adapters import (
    EcrTokenProvider,
    RancherClient,
    RancherCredentialStore,
    RancherRegistryDirectory,
)
from .infrastructure.adapters.api import create_app
from .infrastructure.config import Settings, load_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self.rancher_client = RancherClient(settings.rancher_config)

    def create_token_provider(self) -> EcrTokenProvider:
        """Create the ECR token provider adapter."""
        return EcrTokenProvider(self._settings.ecr_config)

    def create_reconciler(self) -> RegistryCredentialReconciler:
        """Create the reconciler with the Rancher adapters."""
        return RegistryCredentialReconciler(
            config=self._settings.reconciliation_config,
            registry_directory=RancherRegistryDirectory(self.rancher_client),
            credential_store=RancherCredentialStore(self.rancher_client),
        )

    def create_sync_use_case(self) -> SyncRegistryCredentials:
        """Create the main use case with all dependencies."""
        return SyncRegistryCredentials(
            token_provider=self.create_token_provider(),
            reconciler=self.create_reconciler(),
            config=self._settings.reconciliation_config,
        )


class Application:
    """
    Main application orchestrator.

    Handles run modes (single pass or scheduled service) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def verify_connectivity(self) -> None:
        """
        Fail fast when the Rancher API cannot be reached.

        Raises:
            StartupError: If the API is unreachable or rejects the keys.
        """
        try:
            await self._container.rancher_client.ping()
        except httpx.HTTPError as e:
            msg = f"Cannot reach Rancher API at {self._settings.cattle_url}: {e}"
            raise StartupError(msg) from e

    async def run_once(self) -> SyncResult:
        """Execute a single synchronization pass."""
        use_case = self._container.create_sync_use_case()
        return await use_case.execute()

    async def _run_pass(self) -> None:
        """Run a pass, containing any error so the schedule keeps going."""
        try:
            result = await self.run_once()
        except Exception:
            logger.exception("Error updating ECR credentials")
            return

        if result.report.requires_attention:
            logger.warning("Some registries require manual attention in Rancher")

    async def run_scheduled(self) -> None:
        """Run one pass immediately, then one pass per refresh interval."""
        interval = self._settings.refresh_interval_seconds
        logger.info("Starting scheduled mode with interval: %s hours", self._settings.refresh_interval_hours)

        # Run immediately on startup
        await self._run_pass()

        while True:
            logger.info("Next update in %s hours", self._settings.refresh_interval_hours)
            await asyncio.sleep(interval)
            await self._run_pass()

    async def run_service(self) -> None:
        """Run the health check listener alongside the scheduler."""
        config = uvicorn.Config(
            create_app(version=__version__),
            host=self._settings.listen_host,
            port=self._settings.listen_port,
            log_level=self._settings.log_level.lower(),
        )
        server = uvicorn.Server(config)
        server_task = asyncio.create_task(server.serve())

        logger.info(
            "Starting health check listener at %s:%d/ping",
            self._settings.listen_host,
            self._settings.listen_port,
        )
        while not server.started:
            if server_task.done():
                server_task.result()
                msg = f"Error creating health check listener on port {self._settings.listen_port}"
                raise StartupError(msg)
            await asyncio.sleep(0.1)

        scheduler_task = asyncio.create_task(self.run_scheduled())
        try:
            # Cancelling the service stops the listener through its own shutdown
            await asyncio.shield(server_task)
        finally:
            scheduler_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await scheduler_task
            server.should_exit = True
            await server_task

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        await self.verify_connectivity()

        if self._settings.run_mode.lower() == "once":
            logger.info("Running in single-pass mode")
            result = await self.run_once()
            return 0 if result.success else 1

        await self.run_service()
        return 0


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Rancher ECR Credentials starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except StartupError as e:
        logger.error("Startup failed: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
