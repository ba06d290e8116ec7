"""
Report Generator - Writes ranked match results to disk.

Supported formats:
- json: Full breakdown per pair plus summary
- csv: One row per pair, spreadsheet friendly
- markdown: Readable ranking table with rating distribution
"""

from datetime import datetime
from pathlib import Path
import csv
import io
import json
import logging

from .scorer import RATINGS, MatchResult, rating_for


class ReportGenerator:
    """Generates match reports in various formats."""

    FORMATS = {
        "json": "json",
        "csv": "csv",
        "markdown": "md",
    }

    def __init__(self, output_dir: str = "./reports"):
        """
        Args:
            output_dir: Directory for saving generated reports
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(self.__class__.__name__)

    def generate_report(self, results: list[MatchResult], format: str = "markdown") -> str:
        """
        Write a report of match results.

        Args:
            results: Results in the order they should be listed
            format: Output format (json, csv, markdown)

        Returns:
            Path to the generated report file
        """
        if format not in self.FORMATS:
            raise ValueError(f"Unknown report format: {format} (expected one of {', '.join(self.FORMATS)})")

        content = self.render(results, format)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.output_dir / f"match_report_{timestamp}.{self.FORMATS[format]}"

        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(content)

        self.logger.info(f"Generated report: {filepath}")
        return str(filepath)

    def render(self, results: list[MatchResult], format: str = "markdown") -> str:
        """Report content as a string."""
        if format == "json":
            return self._generate_json(results)
        if format == "csv":
            return self._generate_csv(results)
        return self._generate_markdown(results)

    def _generate_json(self, results: list[MatchResult]) -> str:
        data = {
            "generated_at": datetime.now().isoformat(),
            "total_matches": len(results),
            "summary": {
                "average_score": self._average(results),
                "by_rating": self._rating_counts(results),
            },
            "matches": [result.to_dict() for result in results],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _generate_csv(self, results: list[MatchResult]) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow([
            "Entity ID", "Entity", "Position ID", "Position",
            "Overall Score (%)", "Rating", "Importance",
            "Skills", "Location", "Experience", "Education", "Work Model",
            "Matched Skills", "Partially Matched Skills", "Missing Skills",
        ])

        for result in results:
            scores = result.details.category_scores()
            writer.writerow([
                result.entity_id,
                result.entity_label,
                result.position_id,
                result.position_label,
                f"{result.overall_score:.2f}",
                result.rating,
                result.importance,
                f"{scores['skills']:.1f}",
                f"{scores['location']:.1f}",
                f"{scores['experience']:.1f}",
                f"{scores['education']:.1f}",
                f"{scores['work_model']:.1f}",
                "; ".join(result.details.skills.matched_skills),
                "; ".join(result.details.skills.partially_matched_skills),
                "; ".join(result.details.skills.missing_skills),
            ])

        return output.getvalue()

    def _generate_markdown(self, results: list[MatchResult]) -> str:
        lines = [
            "# Match Report",
            "",
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            f"**Total Matches:** {len(results)}",
            f"**Average Score:** {self._average(results):.1f}%",
            "",
            "## Ranking",
            "",
            "| # | Entity | Position | Score | Rating | Skills | Location | Experience | Education | Work Model |",
            "|---|--------|----------|-------|--------|--------|----------|------------|-----------|------------|",
        ]

        for rank, result in enumerate(results, start=1):
            scores = result.details.category_scores()
            entity = result.entity_label or result.entity_id
            position = result.position_label or result.position_id
            lines.append(
                f"| {rank} | {entity} | {position} | {result.overall_score:.0f}% | "
                f"{result.rating} | {scores['skills']:.0f} | {scores['location']:.0f} | "
                f"{scores['experience']:.0f} | {scores['education']:.0f} | "
                f"{scores['work_model']:.0f} |"
            )

        lines.extend([
            "",
            "## Rating Distribution",
            "",
        ])

        counts = self._rating_counts(results)
        for threshold, label in RATINGS.items():
            lines.append(f"- **{label}** ({threshold}%+): {counts[label]}")

        return "\n".join(lines) + "\n"

    def _average(self, results: list[MatchResult]) -> float:
        if not results:
            return 0.0
        return round(sum(r.overall_score for r in results) / len(results), 2)

    def _rating_counts(self, results: list[MatchResult]) -> dict:
        counts = {label: 0 for label in RATINGS.values()}
        for result in results:
            counts[rating_for(result.overall_score)] += 1
        return counts
