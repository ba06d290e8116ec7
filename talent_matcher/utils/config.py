"""
Configuration management for Talent Matcher.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os

from talent_matcher.batch import BatchMatcher
from talent_matcher.core.knowledge import KnowledgeBase
from talent_matcher.core.matcher import JobMatcher
from talent_matcher.core.models import MatchWeights, SimilarityWeights

from .tables import load_knowledge_base


class Config:
    """Manages matching weights, thresholds, table source and batch settings."""

    TABLES_ENV = "TALENT_MATCHER_TABLES"
    LOG_LEVEL_ENV = "TALENT_MATCHER_LOG_LEVEL"

    DEFAULT_CONFIG = {
        "weights": MatchWeights().to_dict(),
        "skills": {
            "similarity": SimilarityWeights().to_dict(),
            "matched_threshold": None,
            "partial_threshold": None,
            "no_requirement_score": 0.0,
        },
        "tables": {
            "source": "",
        },
        "batch": {
            "parallel": True,
            "max_workers": None,
            "min_score": 0.0,
        },
        "report": {
            "output_dir": "./reports",
            "default_format": "markdown",
        },
        "logging": {
            "level": "WARNING",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.talent_matcher/config.json)
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".talent_matcher" / "config.json"

        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file or use the defaults."""
        if self.config_path.exists():
            with open(self.config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            # Merge with defaults
            return self._deep_merge(copy.deepcopy(self.DEFAULT_CONFIG), user_config)

        return copy.deepcopy(self.DEFAULT_CONFIG)

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None):
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "weights.skills")
            default: Default value if key not found
        """
        value = self.config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value) -> None:
        """
        Set a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "batch.min_score")
            value: Value to set
        """
        keys = key.split(".")
        config = self.config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_tables_source(self) -> str:
        """Knowledge table file or URL; the environment takes precedence."""
        return os.environ.get(self.TABLES_ENV) or self.get("tables.source", "") or ""

    def get_log_level(self) -> str:
        """Log level name; the environment takes precedence."""
        return (os.environ.get(self.LOG_LEVEL_ENV) or self.get("logging.level", "WARNING")).upper()

    def get_output_dir(self) -> str:
        """Get the report output directory."""
        return self.get("report.output_dir", "./reports")

    def get_report_format(self) -> str:
        """Get the format used when a report is requested without one."""
        return self.get("report.default_format", "markdown")

    def get_weights(self) -> MatchWeights:
        return MatchWeights.from_dict(self.get("weights", {}))

    def get_similarity_weights(self) -> SimilarityWeights:
        return SimilarityWeights.from_dict(self.get("skills.similarity", {}))

    def load_knowledge(self) -> KnowledgeBase:
        return load_knowledge_base(self.get_tables_source())

    def build_matcher(self, knowledge: Optional[KnowledgeBase] = None) -> JobMatcher:
        """
        Construct a matcher from the configured weights, thresholds and tables.

        Raises:
            ConfigurationError: Invalid weights or tables
        """
        return JobMatcher(
            weights=self.get_weights(),
            knowledge=knowledge or self.load_knowledge(),
            similarity_weights=self.get_similarity_weights(),
            matched_threshold=self.get("skills.matched_threshold"),
            partial_threshold=self.get("skills.partial_threshold"),
            no_requirement_score=float(self.get("skills.no_requirement_score") or 0.0),
        )

    def build_batch_matcher(self, matcher: Optional[JobMatcher] = None) -> BatchMatcher:
        return BatchMatcher(
            matcher=matcher or self.build_matcher(),
            parallel=bool(self.get("batch.parallel", True)),
            max_workers=self.get("batch.max_workers"),
            min_score=float(self.get("batch.min_score") or 0.0),
        )

    def print_config(self) -> None:
        """Print current configuration."""
        print(json.dumps(self.config, indent=2))

    @classmethod
    def create_default_config(cls, path: str = None) -> "Config":
        """Create a new config file with default values."""
        config = cls(path)
        config.save()
        return config
