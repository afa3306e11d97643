"""Tests for runtime configuration."""

import pytest

from hardwood.config import GameConfig, get_config, reset_config
from hardwood.core.enums import Difficulty


class TestGameConfig:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Without overrides a run is random, medium and three seasons long."""
        for name in ("HARDWOOD_SEED", "HARDWOOD_DIFFICULTY", "HARDWOOD_SEASONS",
                     "HARDWOOD_LOG_LEVEL", "HARDWOOD_SAVE_DIR"):
            monkeypatch.delenv(name, raising=False)

        config = GameConfig.from_env()
        assert config.seed is None
        assert config.difficulty_level is Difficulty.MEDIUM
        assert config.seasons == 3
        assert config.log_level == "INFO"
        assert config.save_dir == "saves"
        assert config.validate() == []

    def test_env_overrides(self, monkeypatch):
        """Environment variables take effect and are normalized."""
        monkeypatch.setenv("HARDWOOD_SEED", "99")
        monkeypatch.setenv("HARDWOOD_DIFFICULTY", "HARD")
        monkeypatch.setenv("HARDWOOD_SEASONS", "5")
        monkeypatch.setenv("HARDWOOD_LOG_LEVEL", "debug")

        config = GameConfig.from_env()
        assert config.seed == 99
        assert config.difficulty_level is Difficulty.HARD
        assert config.seasons == 5
        assert config.log_level == "DEBUG"

    def test_unparseable_seed_ignored(self, monkeypatch):
        """A non-numeric seed falls back to random."""
        monkeypatch.setenv("HARDWOOD_SEED", "abc")
        assert GameConfig.from_env().seed is None

    def test_validate_reports_errors(self):
        """Every bad field is reported."""
        config = GameConfig(seed=1, difficulty="brutal", seasons=0, log_level="LOUD", save_dir="")
        errors = config.validate()
        assert len(errors) == 4
        with pytest.raises(ValueError):
            config.difficulty_level


class TestConfigSingleton:
    """Tests for the cached instance."""

    def test_cached_until_reset(self, monkeypatch):
        """get_config caches; reset_config re-reads the environment."""
        monkeypatch.setenv("HARDWOOD_SEASONS", "2")
        first = get_config()
        assert get_config() is first
        assert first.seasons == 2

        monkeypatch.setenv("HARDWOOD_SEASONS", "4")
        assert get_config().seasons == 2
        reset_config()
        assert get_config().seasons == 4
