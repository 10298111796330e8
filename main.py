"""CLI harness for the job-search aggregator.

Calls the library the same way a request handler does: load a resume, run
one aggregate search, print the JSON payload.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from jobsearch.core.config import Settings
from jobsearch.core.schemas import ResumeDocument
from jobsearch.profile.analyzer import analyze
from jobsearch.profile.keywords import generate_keywords
from jobsearch.service import JobSearchService, parse_skills


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Job-search aggregator - search Korean job boards for a resume",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- search subcommand ---
    search_parser = subparsers.add_parser("search", help="Run an aggregate job search")
    search_parser.add_argument(
        "--resume",
        required=True,
        help="Path to resume JSON file",
    )
    search_parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (default: built-in settings)",
    )
    search_parser.add_argument(
        "--skills",
        default=None,
        help="Comma-separated keywords overriding the resume-derived ones",
    )
    search_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- analyze subcommand ---
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print the candidate profile derived from a resume",
    )
    analyze_parser.add_argument(
        "--resume",
        required=True,
        help="Path to resume JSON file",
    )
    analyze_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_resume(path: str | Path) -> ResumeDocument:
    """Load a resume document from a JSON file."""
    path = Path(path)
    if not path.exists():
        msg = f"Resume file not found: {path}"
        raise FileNotFoundError(msg)
    try:
        raw: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Resume file is not valid JSON: {e}"
        raise ValueError(msg) from e
    return ResumeDocument.model_validate(raw)


def cmd_analyze(args: argparse.Namespace) -> None:
    """Handle analyze subcommand."""
    profile = analyze(load_resume(args.resume))
    print(f"Summary: {profile.summary}")
    print(f"  Years: {profile.years_of_experience} ({profile.career_level_display})")
    print(f"  Primary: {profile.tech_stack.primary}")
    print(f"  Secondary: {profile.tech_stack.secondary}")
    print(f"  Interest: {profile.tech_stack.interest}")
    print(f"  Roles: {profile.preferred_roles}")
    print(f"  Search keywords: {generate_keywords(profile)}")


async def run_search(settings: Settings, resume: ResumeDocument, skills: str | None) -> None:
    async with JobSearchService(settings) as service:
        payload = await service.search_for_resume(resume, skills=parse_skills(skills))
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "analyze":
        try:
            cmd_analyze(args)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return

    try:
        settings = Settings.from_yaml(args.config) if args.config else Settings().with_env_overrides()
        resume = load_resume(args.resume)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading input: {e}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run_search(settings, resume, args.skills))


if __name__ == "__main__":
    main()
