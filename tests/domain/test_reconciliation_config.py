"""Tests for ReconciliationConfig value object."""

from __future__ import annotations

import pytest

from rancher_ecr_credentials.domain.value_objects import ReconciliationConfig


class TestReconciliationConfig:
    """Tests for ReconciliationConfig."""

    def test_defaults(self) -> None:
        """Default config requests the default account and never creates."""
        config = ReconciliationConfig()
        assert config.registry_ids == frozenset()
        assert config.auto_create is False
        assert config.host_override is None

    def test_accepts_account_ids(self) -> None:
        """12 digit account ids are accepted."""
        config = ReconciliationConfig(registry_ids=frozenset({"012345678910", "109876543210"}))
        assert len(config.registry_ids) == 2

    @pytest.mark.parametrize("registry_id", ["12345", "abcdefghijkl", "0123456789101"])
    def test_rejects_invalid_account_ids(self, registry_id: str) -> None:
        """Anything but a 12 digit account id is rejected."""
        with pytest.raises(ValueError, match="12 digit"):
            ReconciliationConfig(registry_ids=frozenset({registry_id}))

    @pytest.mark.parametrize("override", ["", "   "])
    def test_blank_override_normalized(self, override: str) -> None:
        """A blank host override means no override."""
        assert ReconciliationConfig(host_override=override).host_override is None

    def test_config_is_frozen(self) -> None:
        """Config should be immutable."""
        config = ReconciliationConfig()
        with pytest.raises(AttributeError):
            config.auto_create = True  # type: ignore[misc]
