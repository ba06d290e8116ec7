"""
Loading and exporting the knowledge tables.

Tables can be tuned without a code change: export the defaults, edit the
JSON and point the configuration (or TALENT_MATCHER_TABLES) at the file
or at an http(s) URL serving it.
"""

from pathlib import Path
from typing import Optional
import json
import logging

import requests

from talent_matcher.core.exceptions import ConfigurationError
from talent_matcher.core.knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase


logger = logging.getLogger("KnowledgeLoader")

REQUEST_TIMEOUT = 30


def load_tables(source: str) -> dict:
    """
    Read raw knowledge tables from a JSON file or an http(s) URL.

    Raises:
        OSError / requests.RequestException: The source cannot be read
        ConfigurationError: The source is not a JSON object
    """
    if source.startswith(("http://", "https://")):
        logger.info(f"Fetching knowledge tables from {source}")
        response = requests.get(source, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as e:
            raise ConfigurationError(f"Knowledge tables at {source} are not valid JSON: {e}") from e
    else:
        path = Path(source).expanduser()
        logger.info(f"Loading knowledge tables from {path}")
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except ValueError as e:
                raise ConfigurationError(f"Knowledge tables in {path} are not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Knowledge tables in {source} must be a JSON object")
    return data


def load_knowledge_base(source: Optional[str] = None) -> KnowledgeBase:
    """
    Build a knowledge base from a file or URL, or the defaults if none.

    Tables present in the source replace the default tables of the same
    name; the others keep their defaults.
    """
    if not source:
        return DEFAULT_KNOWLEDGE
    return KnowledgeBase.from_dict(load_tables(source))


def export_tables(path: str, knowledge: KnowledgeBase = DEFAULT_KNOWLEDGE) -> str:
    """Write the tables of a knowledge base as editable JSON."""
    filepath = Path(path).expanduser()
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(knowledge.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Exported knowledge tables to {filepath}")
    return str(filepath)
