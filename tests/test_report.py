"""Tests for report export."""

import csv
import io
import json
from pathlib import Path

import pytest

from talent_matcher.batch import MatchResult, ReportGenerator
from talent_matcher.core.models import MatchDetails, SkillMatch


@pytest.fixture
def results():
    excellent = MatchDetails(
        skills=SkillMatch(score=100.0, matched_skills=["python"]),
        overall_score=92.5,
    )
    low = MatchDetails(
        skills=SkillMatch(score=0.0, missing_skills=["figma", "sketch"]),
        overall_score=20.0,
    )
    return [
        MatchResult("cand-1", "job-1", details=excellent, entity_label="Anna", position_label="Backend"),
        MatchResult("cand-2", "job-1", details=low, entity_label="Tom", position_label="Backend"),
    ]


class TestReportGenerator:
    """Test report formats."""

    def test_json_report(self, tmp_path, results):
        path = ReportGenerator(output_dir=str(tmp_path)).generate_report(results, format="json")

        assert path.endswith(".json")
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        assert data["total_matches"] == 2
        assert data["summary"]["average_score"] == 56.25
        assert data["summary"]["by_rating"]["Excellent"] == 1
        assert data["matches"][0]["rating"] == "Excellent"
        assert data["matches"][0]["importance"] == "high"

    def test_csv_report(self, tmp_path, results):
        path = ReportGenerator(output_dir=str(tmp_path)).generate_report(results, format="csv")

        assert path.endswith(".csv")
        rows = list(csv.reader(io.StringIO(Path(path).read_text(encoding="utf-8"))))
        assert rows[0][0] == "Entity ID"
        assert len(rows) == 3
        assert rows[2][-1] == "figma; sketch"

    def test_markdown_report(self, tmp_path, results):
        path = ReportGenerator(output_dir=str(tmp_path)).generate_report(results, format="markdown")

        content = Path(path).read_text(encoding="utf-8")
        assert path.endswith(".md")
        assert content.startswith("# Match Report")
        assert "| 1 | Anna | Backend | 92% | Excellent |" in content
        assert "- **Low** (0%+): 1" in content

    def test_empty_report(self, tmp_path):
        content = ReportGenerator(output_dir=str(tmp_path)).render([], format="json")
        assert json.loads(content)["summary"]["average_score"] == 0.0

    def test_unknown_format(self, tmp_path, results):
        with pytest.raises(ValueError):
            ReportGenerator(output_dir=str(tmp_path)).generate_report(results, format="pdf")

    def test_creates_output_dir(self, tmp_path):
        target = tmp_path / "nested" / "reports"
        ReportGenerator(output_dir=str(target))
        assert target.is_dir()
