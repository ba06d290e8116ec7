"""Tests for configuration handling."""

import json

import pytest

from talent_matcher.core import ConfigurationError
from talent_matcher.utils import Config


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(Config.TABLES_ENV, raising=False)
    monkeypatch.delenv(Config.LOG_LEVEL_ENV, raising=False)


class TestConfig:
    """Test loading, merging and saving configuration."""

    def test_defaults_without_file(self, config_path):
        config = Config(str(config_path))

        assert config.get("weights.skills") == 0.5
        assert config.get("batch.parallel") is True
        assert config.get("missing.key", "fallback") == "fallback"

    def test_file_is_merged_over_defaults(self, config_path):
        """Verify partial sections keep their other defaults."""
        config_path.write_text(json.dumps({"weights": {"skills": 0.8}}))

        config = Config(str(config_path))

        assert config.get("weights.skills") == 0.8
        assert config.get("weights.location") == 0.2

    def test_set_and_save(self, config_path):
        config = Config(str(config_path))
        config.set("batch.min_score", 40)
        config.set("new.nested.value", "x")
        config.save()

        reloaded = Config(str(config_path))
        assert reloaded.get("batch.min_score") == 40
        assert reloaded.get("new.nested.value") == "x"

    def test_set_does_not_leak_into_defaults(self, config_path):
        Config(str(config_path)).set("weights.skills", 0.9)
        assert Config.DEFAULT_CONFIG["weights"]["skills"] == 0.5

    def test_environment_takes_precedence(self, config_path, monkeypatch):
        config = Config(str(config_path))
        config.set("tables.source", "/etc/tables.json")
        monkeypatch.setenv(Config.TABLES_ENV, "https://example.com/tables.json")
        monkeypatch.setenv(Config.LOG_LEVEL_ENV, "debug")

        assert config.get_tables_source() == "https://example.com/tables.json"
        assert config.get_log_level() == "DEBUG"

    def test_create_default_config(self, config_path):
        Config.create_default_config(str(config_path))
        assert json.loads(config_path.read_text())["report"]["default_format"] == "markdown"


class TestBuildMatcher:
    """Test constructing matchers from configuration."""

    def test_weights_and_thresholds(self, config_path):
        config = Config(str(config_path))
        config.set("weights", {"skills": 1, "location": 1, "experience": 0, "education": 0, "work_model": 0})
        config.set("skills.matched_threshold", 0.85)
        config.set("skills.no_requirement_score", 50)

        matcher = config.build_matcher()

        assert matcher.weights.skills == pytest.approx(0.5)
        assert matcher.skill_scorer.matched_threshold == 0.85
        assert matcher.skill_scorer.no_requirement_score == 50.0

    def test_invalid_weights(self, config_path):
        config = Config(str(config_path))
        config.set("weights.skills", -2)

        with pytest.raises(ConfigurationError):
            config.build_matcher()

    def test_tables_from_config(self, config_path, tables_file):
        config = Config(str(config_path))
        config.set("tables.source", str(tables_file))

        matcher = config.build_matcher()

        assert matcher.knowledge.are_synonyms("golang", "go")

    def test_batch_matcher(self, config_path):
        config = Config(str(config_path))
        config.set("batch.parallel", False)
        config.set("batch.min_score", 25)

        batch = config.build_batch_matcher()

        assert batch.parallel is False
        assert batch.min_score == 25.0
