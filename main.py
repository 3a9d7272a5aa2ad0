"""Command-line entry point for the AI features.

Usage:
    python main.py parse cv.txt [-o cv.json]
    python main.py score cv.json
    python main.py match cv.json job.txt
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from config import settings
from core.exceptions import AppError, ConfigurationError, LLMError
from core.logger import logger, setup_logger
from models.cv_models import create_cv_data
from services.container import Container
from use_cases import AnalyzeCVInput, MatchJobInput, ParseCVTextInput


def _read_text(path: str) -> str:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return file_path.read_text(encoding="utf-8")


def _read_cv(path: str) -> dict:
    """Load a CV JSON file; missing sections get their empty defaults."""
    data = json.loads(_read_text(path))
    try:
        return create_cv_data(data).to_dict()
    except PydanticValidationError:
        # Malformed sections are reported field by field by the use-case
        return data


def run_parse(container: Container, args) -> None:
    output = container.parse_cv_text.execute(ParseCVTextInput(text=_read_text(args.file)))
    cv_json = json.dumps(output.cv_data, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(cv_json, encoding="utf-8")
        print(f"✅ Parsed CV saved to: {args.output}")
    else:
        print(cv_json)


def run_score(container: Container, args) -> None:
    score = container.analyze_cv.execute(AnalyzeCVInput(cv_data=_read_cv(args.file))).score
    print("=" * 80)
    print("CV SCORE")
    print("=" * 80)
    print(f"Overall: {score.overall}/100")
    print(f"  Completeness:      {score.breakdown.completeness}")
    print(f"  Quality:           {score.breakdown.quality}")
    print(f"  ATS compatibility: {score.breakdown.ats_compatibility}")
    print(f"  Impact:            {score.breakdown.impact}")
    if score.recommendations:
        print("\nRecommendations:")
        for recommendation in score.recommendations:
            print(f"  - {recommendation}")


def run_match(container: Container, args) -> None:
    match = container.match_job.execute(
        MatchJobInput(cv_data=_read_cv(args.cv_file), job_description=_read_text(args.job_file))
    ).match
    print("=" * 80)
    print("JOB MATCH")
    print("=" * 80)
    print(f"Score: {match.score}/100")
    print(f"Matched keywords: {', '.join(match.matched_keywords) or 'none'}")
    print(f"Missing keywords: {', '.join(match.missing_keywords) or 'none'}")
    if match.suggestions:
        print("\nSuggestions:")
        for suggestion in match.suggestions:
            print(f"  - {suggestion}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AI tools for CVs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Extract CV sections from a text file")
    parse_cmd.add_argument("file")
    parse_cmd.add_argument("-o", "--output", help="Write the parsed CV JSON to this file")
    parse_cmd.set_defaults(handler=run_parse)

    score_cmd = subparsers.add_parser("score", help="Score a CV JSON file")
    score_cmd.add_argument("file")
    score_cmd.set_defaults(handler=run_score)

    match_cmd = subparsers.add_parser("match", help="Match a CV JSON file against a job description")
    match_cmd.add_argument("cv_file")
    match_cmd.add_argument("job_file")
    match_cmd.set_defaults(handler=run_match)

    return parser


def main(argv=None, container: Container = None) -> int:
    """Main application function."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logger(log_level=settings.log_level)
    logger.info(f"Running command: {args.command}")

    try:
        if container is None:
            from agents.cv_ai_agent import CVAIAgent

            container = Container(cv_repository=None, auth_repository=None, ai_service=CVAIAgent())
        args.handler(container, args)
        return 0
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1
    except json.JSONDecodeError as e:
        print(f"❌ Invalid JSON file: {e}")
        return 1
    except AppError as e:
        logger.error(f"{e.code}: {e.message}")
        print(f"❌ {e.message}")
        for name, message in getattr(e, "fields", {}).items():
            print(f"   {name}: {message}")
        return 1
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"❌ Configuration error: {e}")
        return 1
    except LLMError as e:
        logger.error(f"AI service error: {e}")
        print(f"❌ AI service error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
