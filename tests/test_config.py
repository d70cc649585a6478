"""Unit tests for evograph.config and evograph.logging."""
import pytest
import structlog
from pydantic import ValidationError

from evograph.config import Settings, get_settings
from evograph.logging import get_logger, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("EVOGRAPH_NODE_WIDTH", "EVOGRAPH_MERGE_LOCATION_CONDITIONS", "EVOGRAPH_LOG_FORMAT"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings(_env_file=None)
        assert (settings.node_width, settings.node_height) == (180, 220)
        assert (settings.node_separation, settings.rank_separation) == (150, 100)
        assert settings.merge_location_conditions is False
        assert settings.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("EVOGRAPH_NODE_WIDTH", "120")
        monkeypatch.setenv("EVOGRAPH_MERGE_LOCATION_CONDITIONS", "true")
        settings = Settings(_env_file=None)
        assert settings.node_width == 120
        assert settings.merge_location_conditions is True

    def test_rejects_invalid_values(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, node_width=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_setup_and_log(self, capsys):
        setup_logging()
        get_logger("evograph.tests").info("hello", chain_id=1)
        assert "hello" in capsys.readouterr().out
