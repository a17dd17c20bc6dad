"""Tests for engine configuration."""

import pytest

from draftroom.config import EngineConfig, get_config, set_config


@pytest.fixture(autouse=True)
def reset_global_config():
    set_config(None)
    yield
    set_config(None)


class TestEngineConfig:

    def test_defaults(self, monkeypatch):
        for name in ["DRAFTROOM_TOTAL_TEAMS", "DRAFTROOM_SNAKE_DRAFT", "DRAFTROOM_CACHE_TTL"]:
            monkeypatch.delenv(name, raising=False)
        config = EngineConfig()

        assert config.cache_ttl_seconds == 604800
        assert config.draft_board_ttl_seconds == 300
        assert config.total_teams == 32
        assert config.is_snake_draft is True
        assert config.validate() == []

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DRAFTROOM_TOTAL_TEAMS", "10")
        monkeypatch.setenv("DRAFTROOM_SNAKE_DRAFT", "false")
        monkeypatch.setenv("DRAFTROOM_RECOMMENDATION_DECAY", "5.5")
        config = EngineConfig.from_env()

        assert config.total_teams == 10
        assert config.is_snake_draft is False
        assert config.recommendation_decay == 5.5

    def test_validate(self, config):
        config.total_teams = 0
        config.recommendation_decay = 0
        config.viable_ratio = 1.5

        problems = config.validate()
        assert len(problems) == 3
        assert any("TOTAL_TEAMS" in p for p in problems)

    def test_non_numeric_env_names_variable(self, monkeypatch):
        monkeypatch.setenv("DRAFTROOM_TOTAL_TEAMS", "thirty-two")
        with pytest.raises(ValueError, match="DRAFTROOM_TOTAL_TEAMS"):
            EngineConfig.from_env()

    def test_unknown_log_level_reported(self, config):
        config.log_level = "verbose"
        assert config.validate() == ["DRAFTROOM_LOG_LEVEL is not a logging level: 'verbose'"]

    def test_log_level_case_insensitive(self, config):
        config.log_level = "debug"
        assert config.validate() == []


class TestGlobalConfig:

    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_set_config(self, config):
        set_config(config)
        assert get_config() is config

    def test_reset_rereads_environment(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("DRAFTROOM_TOTAL_ROUNDS", "7")
        set_config(None)

        second = get_config()
        assert second is not first
        assert second.total_rounds == 7
