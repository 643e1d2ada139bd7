"""Command line interface for DeskLayout."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from .config import load_settings
from .csv_loader import load_people, write_layout
from .logging_setup import setup_logging
from .models import UnsetPolicy
from .solver import DeskLayoutModel, adjacent_conflicts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dog aware desk layout for a single row of desks")
    parser.add_argument("--people", required=True, help="Path to people.csv")
    parser.add_argument("--unset-policy", choices=[p.value for p in UnsetPolicy],
                        help="How to seat people without a dog status (default from settings: buffer).")
    parser.add_argument("--out-layout", type=Path,
                        help="Write layout CSV: position,id,name,team,dog_status.")
    parser.add_argument("--log-level", help="Override the configured log level.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``desk-layout`` and ``python -m desk_layout.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    policy = UnsetPolicy(args.unset_policy) if args.unset_policy else settings.unset_policy

    try:
        setup_logging(args.log_level or settings.log_level)
        people = load_people(args.people)
        model = DeskLayoutModel(unset_policy=policy)
        model.build(people)
        blocks = model.blocks()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    layout = [person for block in blocks for person in block.members]
    for position, person in enumerate(layout, start=1):
        status = person.dog_status.value if person.dog_status else "-"
        print(f"{position},{person.name},{person.team_name},{status}")

    for block in blocks:
        names = "|".join(p.name for p in block.members)
        print(f"[TEAMS] {block.name} category={block.category.value} members={names}")

    for left, right in adjacent_conflicts(layout):
        logger.warning("{} and {} sit next to each other", left.name, right.name)

    if args.out_layout:
        write_layout(args.out_layout, layout)
        logger.info("Wrote {} desks to {}", len(layout), args.out_layout)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
