"""Command line front end: ``indispensability-check ANSWERS``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from indispensability_check.api import evaluate
from indispensability_check.config import load_config
from indispensability_check.models import ExportError, ValidationError
from indispensability_check.report import format_scores

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indispensability-check",
        description="Weigh the interests of a proposed animal experiment and print the narrative summary.",
    )
    parser.add_argument("answers", help="YAML or JSON file with the project answers")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--export", action="store_true", help="also write the report to a .txt file")
    parser.add_argument("--output-dir", help="directory for the exported report (overrides config)")
    parser.add_argument("--template", help="report template name (overrides config)")
    parser.add_argument("--scores-only", action="store_true", help="print only the score panel")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config and not Path(args.config).is_file():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = load_config(args.config)
        if args.output_dir:
            config.export.directory = args.output_dir
        if args.template:
            config.report.template = args.template
        evaluation = evaluate(args.answers, config=config, export=args.export)
    except ValidationError as exc:
        print(f"Invalid answers: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except (ExportError, FileNotFoundError, KeyError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.scores_only:
        print(format_scores(evaluation.result), end="")
    else:
        print(evaluation.report, end="")
    if evaluation.export_path is not None:
        print(f"Report written to {evaluation.export_path}", file=sys.stderr)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
