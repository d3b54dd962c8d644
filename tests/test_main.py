"""Tests for the application entry point."""

from __future__ import annotations

import asyncio
import contextlib
import socket

import httpx
import pytest

from rancher_ecr_credentials.application.exceptions import StartupError
from rancher_ecr_credentials.application.use_cases import SyncResult
from rancher_ecr_credentials.domain.entities import ReconciliationReport
from rancher_ecr_credentials.infrastructure.adapters.rancher import RancherClient
from rancher_ecr_credentials.infrastructure.config import Settings
from rancher_ecr_credentials.main import Application, async_main


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Valid settings for a local Rancher."""
    monkeypatch.setenv("CATTLE_URL", "http://rancher.local:8080/v1")
    monkeypatch.setenv("CATTLE_ACCESS_KEY", "access")
    monkeypatch.setenv("CATTLE_SECRET_KEY", "secret")
    monkeypatch.setenv("RUN_MODE", "once")
    return Settings()


class _StopScheduler(Exception):
    """Raised by the patched sleep to end the scheduler loop."""


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestApplication:
    """Tests for Application startup."""

    @pytest.mark.asyncio
    async def test_unreachable_rancher_is_fatal(self, settings: Settings) -> None:
        """Startup fails when Rancher rejects the keys."""
        app = Application(settings)
        app._container.rancher_client = RancherClient(
            settings.rancher_config,
            transport=httpx.MockTransport(lambda request: httpx.Response(401)),
        )

        with pytest.raises(StartupError, match="Cannot reach Rancher API"):
            await app.run()

    @pytest.mark.asyncio
    async def test_configuration_error_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing configuration exits with status 1."""
        monkeypatch.delenv("CATTLE_URL", raising=False)

        assert await async_main() == 1


class TestScheduler:
    """Tests for scheduled mode."""

    @pytest.fixture
    def sleeps(self, monkeypatch: pytest.MonkeyPatch) -> list[float]:
        """Record scheduler sleeps and stop the loop after the third one."""
        recorded: list[float] = []

        async def fake_sleep(delay: float) -> None:
            recorded.append(delay)
            if len(recorded) == 3:
                raise _StopScheduler

        monkeypatch.setattr("rancher_ecr_credentials.main.asyncio.sleep", fake_sleep)
        return recorded

    @pytest.mark.asyncio
    async def test_runs_eagerly_then_once_per_interval(self, settings: Settings, sleeps: list[float]) -> None:
        """One pass runs at startup and one after every interval."""
        settings.refresh_interval_hours = 2
        app = Application(settings)
        passes: list[int] = []

        async def run_once() -> SyncResult:
            passes.append(len(sleeps))
            return SyncResult(report=ReconciliationReport())

        app.run_once = run_once

        with pytest.raises(_StopScheduler):
            await app.run_scheduled()

        # Pass n runs after n sleeps
        assert passes == [0, 1, 2]
        assert sleeps == [7200, 7200, 7200]

    @pytest.mark.asyncio
    async def test_failing_pass_does_not_stop_schedule(self, settings: Settings, sleeps: list[float]) -> None:
        """An error escaping a pass is logged and the next pass still runs."""
        app = Application(settings)
        passes: list[int] = []

        async def run_once() -> SyncResult:
            passes.append(len(sleeps))
            if len(passes) == 1:
                raise RuntimeError("rancher went away")
            return SyncResult(report=ReconciliationReport())

        app.run_once = run_once

        with pytest.raises(_StopScheduler):
            await app.run_scheduled()

        assert passes == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_ping_answers_during_slow_pass(self, settings: Settings) -> None:
        """The health check listener stays responsive while a pass is running."""
        settings.listen_host = "127.0.0.1"
        settings.listen_port = _free_port()
        settings.log_level = "WARNING"
        app = Application(settings)
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow_pass() -> SyncResult:
            started.set()
            await release.wait()
            return SyncResult(report=ReconciliationReport())

        app.run_once = slow_pass
        service = asyncio.create_task(app.run_service())
        try:
            await asyncio.wait_for(started.wait(), timeout=10)
            async with httpx.AsyncClient() as client:
                response = await client.get(f"http://127.0.0.1:{settings.listen_port}/ping")
        finally:
            service.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await service

        assert not release.is_set()
        assert response.status_code == 200
        assert response.json()["status"] == "pong!"
