"""Tests for the command line interface."""

import json
import sys

import pytest

from talent_matcher.cli import load_records, main


def run_cli(monkeypatch, tmp_path, *args):
    """Run the CLI with an isolated config file."""
    argv = ["talent-matcher", "--config", str(tmp_path / "config.json"), *args]
    monkeypatch.setattr(sys, "argv", argv)
    monkeypatch.delenv("TALENT_MATCHER_TABLES", raising=False)
    main()


class TestCli:
    """Test the CLI commands end to end."""

    def test_match_json(self, monkeypatch, capsys, records_dir):
        run_cli(
            monkeypatch, records_dir, "match",
            "--entity", str(records_dir / "candidate.json"),
            "--position", str(records_dir / "job.json"),
            "--json",
        )

        data = json.loads(capsys.readouterr().out)
        assert data["overall_score"] == 100.0

    def test_match_summary(self, monkeypatch, capsys, records_dir):
        run_cli(
            monkeypatch, records_dir, "match",
            "--entity", str(records_dir / "candidate.json"),
            "--position", str(records_dir / "job.json"),
        )

        out = capsys.readouterr().out
        assert "Overall Match: 100.00%" in out
        assert "python, django" in out

    def test_rank_writes_report(self, monkeypatch, capsys, records_dir):
        report_dir = records_dir / "reports"

        run_cli(
            monkeypatch, records_dir, "rank",
            "--entities", str(records_dir / "candidates.json"),
            "--positions", str(records_dir / "job.json"),
            "--format", "json",
            "--output-dir", str(report_dir),
            "--sequential",
        )

        reports = list(report_dir.glob("match_report_*.json"))
        assert len(reports) == 1
        data = json.loads(reports[0].read_text(encoding="utf-8"))
        assert [m["entity_id"] for m in data["matches"]] == ["cand-1", "cand-2"]

    def test_rank_report_uses_configured_format(self, monkeypatch, records_dir):
        """Verify --report writes the format set in the config file."""
        config_path = records_dir / "config.json"
        config_path.write_text(json.dumps({"report": {"default_format": "csv"}}))
        report_dir = records_dir / "reports"

        run_cli(
            monkeypatch, records_dir, "rank",
            "--entities", str(records_dir / "candidates.json"),
            "--positions", str(records_dir / "job.json"),
            "--report",
            "--output-dir", str(report_dir),
            "--sequential",
        )

        assert len(list(report_dir.glob("match_report_*.csv"))) == 1

    def test_rank_without_report_writes_nothing(self, monkeypatch, records_dir):
        report_dir = records_dir / "reports"

        run_cli(
            monkeypatch, records_dir, "rank",
            "--entities", str(records_dir / "candidates.json"),
            "--positions", str(records_dir / "job.json"),
            "--output-dir", str(report_dir),
            "--sequential",
        )

        assert not list(report_dir.glob("match_report_*"))

    def test_tables_export(self, monkeypatch, capsys, tmp_path):
        target = tmp_path / "tables.json"

        run_cli(monkeypatch, tmp_path, "tables", "--export", str(target))

        assert "synonyms" in json.loads(target.read_text(encoding="utf-8"))

    def test_config_set(self, monkeypatch, tmp_path):
        run_cli(monkeypatch, tmp_path, "config", "--set", "batch.min_score", "40")

        saved = json.loads((tmp_path / "config.json").read_text())
        assert saved["batch"]["min_score"] == 40

    def test_config_set_rejects_invalid_weight(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, tmp_path, "config", "--set", "weights.skills", "-1")

        assert exc.value.code == 1
        assert not (tmp_path / "config.json").exists()

    def test_missing_file_exits_with_error(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, tmp_path, "match", "--entity", "nope.json", "--position", "nope.json")

        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_no_command_prints_help(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, tmp_path)
        assert exc.value.code == 1


def test_load_records(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps({"id": 1}))
    many = tmp_path / "many.json"
    many.write_text(json.dumps([{"id": 1}, {"id": 2}]))
    scalar = tmp_path / "scalar.json"
    scalar.write_text("42")

    assert load_records(str(single)) == [{"id": 1}]
    assert len(load_records(str(many))) == 2
    with pytest.raises(ValueError):
        load_records(str(scalar))
