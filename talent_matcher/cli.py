"""
Talent Matcher CLI - Command line interface for the matching engine.

Usage:
    python -m talent_matcher [command] [options]

Commands:
    match       Score one entity against one position
    rank        Score and rank many entities against many positions
    tables      Show or export the knowledge tables
    config      Manage configuration

Examples:
    python -m talent_matcher match --entity candidate.json --position job.json
    python -m talent_matcher rank --entities candidates.json --positions jobs.json --top 10
    python -m talent_matcher rank --entities pool.json --entity-type talent_pool \\
        --positions requirements.json --position-type requirement --format csv
    python -m talent_matcher tables --export ./tables.json
    python -m talent_matcher config --set weights.skills 0.6
"""

import argparse
import json
import logging
import sys

from talent_matcher.adapters import ADAPTERS
from talent_matcher.batch import ReportGenerator
from talent_matcher.utils import Config, export_tables


ENTITY_TYPES = ["candidate", "application", "talent_pool"]
POSITION_TYPES = ["job", "requirement"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Talent Matcher - Explainable compatibility scoring between people and positions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Match command
    match_parser = subparsers.add_parser("match", help="Score one entity against one position")
    match_parser.add_argument("--entity", "-e", required=True, help="Entity record file (JSON)")
    match_parser.add_argument("--position", "-p", required=True, help="Position record file (JSON)")
    match_parser.add_argument("--entity-type", choices=ENTITY_TYPES, default="candidate")
    match_parser.add_argument("--position-type", choices=POSITION_TYPES, default="job")
    match_parser.add_argument("--json", action="store_true", help="Print the full breakdown as JSON")

    # Rank command
    rank_parser = subparsers.add_parser("rank", help="Rank entities against positions")
    rank_parser.add_argument("--entities", "-e", required=True, help="Entity records file (JSON)")
    rank_parser.add_argument("--positions", "-p", required=True, help="Position records file (JSON)")
    rank_parser.add_argument("--entity-type", choices=ENTITY_TYPES, default="candidate")
    rank_parser.add_argument("--position-type", choices=POSITION_TYPES, default="job")
    rank_parser.add_argument("--top", "-t", type=int, default=10, help="Show top N matches")
    rank_parser.add_argument("--min-score", type=float, help="Drop matches below this score")
    rank_parser.add_argument("--format", "-f", choices=list(ReportGenerator.FORMATS), help="Write a report")
    rank_parser.add_argument("--report", "-r", action="store_true", help="Write a report in the configured format")
    rank_parser.add_argument("--output-dir", "-o", help="Report output directory")
    rank_parser.add_argument("--sequential", action="store_true", help="Score pairs without a thread pool")

    # Tables command
    tables_parser = subparsers.add_parser("tables", help="Show or export knowledge tables")
    tables_parser.add_argument("--show", action="store_true", help="Print the active tables")
    tables_parser.add_argument("--export", metavar="PATH", help="Write the active tables to a JSON file")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    try:
        config = Config(args.config)
        setup_logging("DEBUG" if args.verbose else config.get_log_level())

        if args.command == "match":
            cmd_match(args, config)
        elif args.command == "rank":
            cmd_rank(args, config)
        elif args.command == "tables":
            cmd_tables(args, config)
        elif args.command == "config":
            cmd_config(args, config)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def setup_logging(level: str) -> None:
    """Send log records to the console at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def load_records(path: str) -> list:
    """Read a JSON file holding one record or a list of records."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise ValueError(f"{path} must contain a JSON object or a list of objects")


def load_record(path: str):
    """Read the first record of a JSON file."""
    records = load_records(path)
    if not records:
        raise ValueError(f"{path} contains no records")
    return records[0]


def cmd_match(args, config: Config):
    """Execute match command."""
    entity = load_record(args.entity)
    position = load_record(args.position)

    matcher = config.build_matcher()
    details = matcher.calculate(entity, position, args.entity_type, args.position_type)

    if args.json:
        print(details.to_json(indent=2))
        return

    print(f"\n🎯 Overall Match: {details.overall_score:.2f}%\n")
    print("-" * 60)
    for name, score in details.category_scores().items():
        weight = getattr(matcher.weights, name)
        print(f"   {name.replace('_', ' ').title():<12} {score:6.1f}   (weight {weight:.2f})")
    print("-" * 60)

    skills = details.skills
    if skills.matched_skills:
        print(f"   ✅ Matched Skills: {', '.join(skills.matched_skills)}")
    if skills.partially_matched_skills:
        print(f"   ➖ Partially Matched: {', '.join(skills.partially_matched_skills)}")
    if skills.missing_skills:
        print(f"   ❌ Missing Skills: {', '.join(skills.missing_skills)}")

    print(
        f"   📅 Experience: {details.experience.actual_years:g} of "
        f"{details.experience.required_years:g} years"
    )
    print(
        f"   🎓 Education: {details.education.actual_level.label} "
        f"(required: {details.education.required_level.label})"
    )
    print(
        f"   💼 Work Model: {details.work_model.actual_model.value} "
        f"(offered: {details.work_model.required_model.value})"
    )


def cmd_rank(args, config: Config):
    """Execute rank command."""
    entities = load_records(args.entities)
    positions = load_records(args.positions)

    print(f"📊 Ranking {len(entities)} {args.entity_type}(s) against {len(positions)} {args.position_type}(s)...")

    batch = config.build_batch_matcher()
    if args.sequential:
        batch.parallel = False

    results = batch.score_all(
        entities,
        positions,
        entity_type=args.entity_type,
        position_type=args.position_type,
        min_score=args.min_score,
    )

    print(f"\n📈 Top {args.top} of {len(results)} matches:\n")
    print("-" * 80)

    for i, result in enumerate(results[:args.top], 1):
        entity = result.entity_label or result.entity_id
        position = result.position_label or result.position_id
        print(f"\n{i}. {entity} → {position}")
        print(f"   Overall: {result.overall_score:.2f}% ({result.rating}, importance {result.importance})")
        missing = result.details.skills.missing_skills
        if missing:
            print(f"   ❌ Missing Skills: {', '.join(missing[:5])}")

    report_format = args.format or (config.get_report_format() if args.report else None)
    if report_format:
        generator = ReportGenerator(output_dir=args.output_dir or config.get_output_dir())
        filepath = generator.generate_report(results, format=report_format)
        print(f"\n✅ Report generated: {filepath}")


def cmd_tables(args, config: Config):
    """Execute tables command."""
    knowledge = config.load_knowledge()
    source = config.get_tables_source() or "(built-in defaults)"

    if args.export:
        filepath = export_tables(args.export, knowledge)
        print(f"✅ Exported tables from {source} to {filepath}")

    elif args.show:
        print(f"\n📚 Knowledge tables from {source}\n")
        print(json.dumps(knowledge.to_dict(), indent=2, ensure_ascii=False))

    else:
        print(f"Tables source: {source}")
        print(f"   Synonym pairs: {len(knowledge.synonyms)}")
        print(f"   Skill categories: {len(knowledge.categories)}")
        print(f"   Regions: {len(knowledge.regions)}")
        print(f"   Record types: {', '.join(ADAPTERS)}")
        print("Use --show or --export PATH")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for numbers, booleans and null
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        # Reject invalid weights before they are saved
        config.get_weights()
        config.get_similarity_weights()
        config.save()
        print(f"✅ Set {key} = {value}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()
