"""Tests for knowledge tables and their loading."""

import json

import pytest
import requests

from talent_matcher.core import DEFAULT_KNOWLEDGE, ConfigurationError, EducationLevel, KnowledgeBase
from talent_matcher.utils import export_tables, load_knowledge_base, load_tables


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


class TestKnowledgeBase:
    """Test the immutable table bundle."""

    def test_default_tables(self):
        assert DEFAULT_KNOWLEDGE.are_synonyms("js", "javascript")
        assert DEFAULT_KNOWLEDGE.share_category("docker", "kubernetes")
        assert DEFAULT_KNOWLEDGE.regions_for("Leipzig Zentrum".lower()) == {"Sachsen"}

    def test_longest_city_name_wins(self):
        """Verify a city named inside a longer mentioned city is not counted."""
        assert DEFAULT_KNOWLEDGE.regions_for("frankfurt oder") == {"Berlin/Brandenburg"}
        assert DEFAULT_KNOWLEDGE.regions_for("frankfurt am main") == {"Hessen"}
        assert DEFAULT_KNOWLEDGE.regions_for("berlin, frankfurt") == {"Berlin/Brandenburg", "Hessen"}

    def test_entries_are_normalized(self):
        """Verify table entries use the input normalization rules."""
        knowledge = KnowledgeBase.from_dict({"synonyms": [["  Go Lang ", "GO"]]})
        assert knowledge.are_synonyms("go lang", "go")

    def test_overlay_keeps_other_tables(self):
        knowledge = KnowledgeBase.from_dict({"synonyms": []})
        assert not knowledge.are_synonyms("js", "javascript")
        assert knowledge.share_category("react", "vue")

    def test_education_levels_highest_first(self):
        levels = [level for level, _ in DEFAULT_KNOWLEDGE.education_keywords]
        assert levels[0] is EducationLevel.PROFESSOR
        assert levels[-1] is EducationLevel.VOCATIONAL

    @pytest.mark.parametrize("data", [
        {"unknown_table": []},
        {"categories": ["frontend"]},
        {"education_keywords": {"wizard": ["magic"]}},
        {"work_model_keywords": {"sabbatical": ["break"]}},
        ["not", "a", "mapping"],
    ])
    def test_malformed_tables_raise(self, data):
        with pytest.raises(ConfigurationError):
            KnowledgeBase.from_dict(data)

    def test_export_round_trip(self):
        assert KnowledgeBase.from_dict(DEFAULT_KNOWLEDGE.to_dict()) == DEFAULT_KNOWLEDGE


class TestLoading:
    """Test loading tables from files and URLs."""

    def test_no_source_uses_defaults(self):
        assert load_knowledge_base(None) is DEFAULT_KNOWLEDGE
        assert load_knowledge_base("") is DEFAULT_KNOWLEDGE

    def test_file_source(self, tables_file):
        knowledge = load_knowledge_base(str(tables_file))

        assert knowledge.are_synonyms("golang", "go")
        assert "anywhere" in knowledge.remote_keywords
        assert knowledge.share_category("react", "vue")

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(OSError):
            load_knowledge_base(str(tmp_path / "missing.json"))

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_tables(str(path))

    def test_url_source(self, monkeypatch):
        """Verify http(s) sources are fetched with a timeout."""
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse({"hybrid_keywords": ["mixed"]})

        monkeypatch.setattr(requests, "get", fake_get)

        knowledge = load_knowledge_base("https://config.example.com/tables.json")

        assert calls == [("https://config.example.com/tables.json", 30)]
        assert knowledge.hybrid_keywords == ("mixed",)

    def test_url_http_error_propagates(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({}, status_code=404))

        with pytest.raises(requests.HTTPError):
            load_knowledge_base("https://config.example.com/missing.json")

    def test_export_tables(self, tmp_path):
        path = export_tables(str(tmp_path / "out" / "tables.json"))

        data = json.loads(open(path, encoding="utf-8").read())
        assert ["javascript", "js"] in data["synonyms"]
        assert load_knowledge_base(path) == DEFAULT_KNOWLEDGE
