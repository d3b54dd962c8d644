"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.value_objects import ReconciliationConfig
from ..adapters.ecr import EcrConfig
from ..adapters.rancher import RancherClientConfig

# Level names accepted by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _env_list(key: str) -> list[str]:
    """Get comma separated list from environment variable."""
    return [item.strip() for item in os.environ.get(key, "").split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings container."""

    # Rancher
    cattle_url: str = field(default_factory=lambda: _env_str("CATTLE_URL"))
    cattle_access_key: str = field(default_factory=lambda: _env_str("CATTLE_ACCESS_KEY"))
    cattle_secret_key: str = field(default_factory=lambda: _env_str("CATTLE_SECRET_KEY"))
    http_timeout_seconds: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT_SECONDS", 30.0))

    # AWS ECR
    aws_region: str = field(default_factory=lambda: _env_str("AWS_REGION"))
    registry_ids: list[str] = field(default_factory=lambda: _env_list("AWS_ECR_REGISTRY_IDS"))

    # Reconciliation
    auto_create: bool = field(default_factory=lambda: _env_bool("AUTO_CREATE"))
    registry_host_override: str = field(default_factory=lambda: _env_str("REGISTRY_HOST_OVERRIDE"))

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "scheduled"))
    refresh_interval_hours: float = field(default_factory=lambda: _env_float("REFRESH_INTERVAL_HOURS", 6))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # Health check listener
    listen_host: str = field(default_factory=lambda: _env_str("LISTEN_HOST", "0.0.0.0"))  # noqa: S104
    listen_port: int = field(default_factory=lambda: _env_int("LISTEN_PORT", 8080))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.cattle_url:
            missing.append("CATTLE_URL")
        if not self.cattle_access_key:
            missing.append("CATTLE_ACCESS_KEY")
        if not self.cattle_secret_key:
            missing.append("CATTLE_SECRET_KEY")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

        if self.run_mode.lower() not in ("once", "scheduled"):
            msg = f"Invalid RUN_MODE: {self.run_mode} (use 'once' or 'scheduled')"
            raise ValueError(msg)

        if self.refresh_interval_hours <= 0:
            msg = f"REFRESH_INTERVAL_HOURS must be positive, got {self.refresh_interval_hours}"
            raise ValueError(msg)

        level = self.log_level.strip().upper()
        if level == "WARN":
            level = "WARNING"
        if level not in LOG_LEVELS:
            msg = f"Invalid LOG_LEVEL: {self.log_level} (use one of {', '.join(LOG_LEVELS)})"
            raise ValueError(msg)
        self.log_level = level

        # Fails on malformed registry ids
        _ = self.reconciliation_config

    @property
    def refresh_interval_seconds(self) -> float:
        """Interval between synchronization passes."""
        return self.refresh_interval_hours * 3600

    @cached_property
    def rancher_config(self) -> RancherClientConfig:
        """Get Rancher API client configuration."""
        return RancherClientConfig(
            url=self.cattle_url,
            access_key=self.cattle_access_key,
            secret_key=self.cattle_secret_key,
            timeout=self.http_timeout_seconds,
        )

    @cached_property
    def ecr_config(self) -> EcrConfig:
        """Get ECR client configuration."""
        return EcrConfig(region=self.aws_region or None)

    @cached_property
    def reconciliation_config(self) -> ReconciliationConfig:
        """Get reconciliation configuration."""
        return ReconciliationConfig(
            registry_ids=frozenset(self.registry_ids),
            auto_create=self.auto_create,
            host_override=self.registry_host_override or None,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
