"""Build the curriculum for one language and write it out as JSON.

Run before the static site build so the generator can source challenges from a
single file. Any curriculum error fails the run with exit status 1.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from curriculum_builder.builder import CurriculumBuilder
from curriculum_builder.config import get_settings
from curriculum_builder.errors import CurriculumError
from curriculum_builder.languages import SUPPORTED_LANGUAGES
from curriculum_builder.logging_config import configure_logging

logger = logging.getLogger("build_curriculum")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Assemble the curriculum for one language.")
    parser.add_argument("--lang", default=settings.curriculum_locale, choices=SUPPORTED_LANGUAGES)
    parser.add_argument("--output", type=Path, default=None, help="Write the curriculum JSON here (stdout if omitted).")
    parser.add_argument(
        "--collect-errors",
        action="store_true",
        help="Report every failing challenge instead of stopping at the first one.",
    )
    parser.add_argument(
        "--show-upcoming-changes",
        action="store_true",
        default=None,
        help="Include blocks flagged isUpcomingChange (overrides SHOW_UPCOMING_CHANGES).",
    )
    return parser.parse_args(argv)


def write_curriculum(payload: object, output: Optional[Path]) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output is None:
        sys.stdout.write(text + "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote curriculum to %s", output)


async def run(args: argparse.Namespace) -> int:
    builder = CurriculumBuilder(show_upcoming_changes=args.show_upcoming_changes)
    try:
        if args.collect_errors:
            report = await builder.build_report(args.lang)
        else:
            curriculum = await builder.build(args.lang)
    except CurriculumError:
        logger.exception("Curriculum build for %s failed", args.lang)
        return 1

    if not args.collect_errors:
        write_curriculum(curriculum.to_json_payload(), args.output)
        return 0

    for error in report.errors:
        logger.error("%s%s", f"{error.path}: " if error.path else "", error)
    write_curriculum(report.curriculum.to_json_payload(), args.output)
    logger.info("Built %d challenges with %d errors", report.challenge_count, len(report.errors))
    return 0 if report.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
