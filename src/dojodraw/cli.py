"""Command line interface for Dojo Draw.

Reads an entrant list, partitions it into groups and draws Kumite brackets,
printing the result and optionally writing printable PDFs.
"""

# Dojo Draw
# Copyright (C) 2025  Dojo Draw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dojodraw.bracket.builder import build_brackets
from dojodraw.constants import BYE_POLICY_CASCADE, BYE_POLICY_SHALLOW
from dojodraw.exceptions import DojoDrawException
from dojodraw.grouping.partitioner import PartitionResult, partition
from dojodraw.importers.entrants import read_entrants_file
from dojodraw.models.bracket import Bracket, Match
from dojodraw.models.entrant import Entrant
from dojodraw.models.event_config import (
    EventConfig,
    default_event_config,
    load_event_config,
    save_event_config,
)
from dojodraw.printing.html import (
    document_filename,
    generate_bracket_html,
    generate_groups_html,
    generate_kata_scoresheet_html,
    round_title,
)
from dojodraw.printing.pdf import write_pdf
from dojodraw.scoresheet.kata import build_kata_scoresheet
from dojodraw.testing.sample import sample_entrants
from dojodraw.utils import set_log_level, setup_logger

logger = setup_logger(__name__)

OPEN_SLOT = "---"


def _load_config(args: argparse.Namespace) -> EventConfig:
    if args.config:
        return load_event_config(args.config)
    return default_event_config()


def _load_entrants(args: argparse.Namespace) -> List[Entrant]:
    if args.sample:
        return sample_entrants()
    if not args.entrants:
        raise DojoDrawException("Give an entrant file or --sample")

    imported = read_entrants_file(args.entrants, strict=args.strict)
    for row_number, reason in imported.rejected:
        print(f"Row {row_number} skipped: {reason}")
    return imported.entrants


def _partition(args: argparse.Namespace, config: EventConfig) -> PartitionResult:
    entrants = _load_entrants(args)
    return partition(entrants, config.age_bands, config.weight_bands)


def _print_unclassified(result: PartitionResult) -> None:
    if result.unclassified:
        names = ", ".join(e.name for e in result.unclassified)
        print(f"\n{result.dropped_count} entrant(s) not in any group: {names}")


def _slot(entrant: Optional[Entrant]) -> str:
    return entrant.name if entrant else OPEN_SLOT


def _describe_match(match: Match) -> str:
    if match.is_bye:
        return f"{match.position}: {match.winner.name} (bye)"
    return f"{match.position}: {_slot(match.participant1)} vs {_slot(match.participant2)}"


def print_bracket(bracket: Bracket) -> None:
    """Print a bracket round by round."""
    print(
        f"\n{bracket.group.name} "
        f"({bracket.group.size} entrants, {bracket.round_count} rounds)"
    )
    if bracket.round_count == 0:
        print(f"  Walkover: {bracket.final.winner.name}")
        return
    for round_number in bracket.rounds:
        print(f"  {round_title(round_number, bracket.round_count)}")
        for match in bracket.matches_in_round(round_number):
            print(f"    {_describe_match(match)}")


def cmd_groups(args: argparse.Namespace) -> int:
    """List groups and their members."""
    config = _load_config(args)
    result = _partition(args, config)

    for group in result.groups:
        print(f"\n{group.name} ({group.size})")
        for entrant in group.entrants:
            print(f"  - {entrant.name} ({entrant.age}, {entrant.weight:g} kg)")
    _print_unclassified(result)

    if args.output_dir:
        html = generate_groups_html(result.groups, config.name, result.unclassified)
        write_pdf(html, Path(args.output_dir) / "groups.pdf")
    return 0


def cmd_brackets(args: argparse.Namespace) -> int:
    """Draw a bracket for every Kumite group."""
    config = _load_config(args)
    result = _partition(args, config)

    rng = random.Random(args.seed) if args.seed is not None else None
    bye_policy = args.bye_policy or config.bye_policy
    brackets = build_brackets(result.groups, rng=rng, bye_policy=bye_policy)

    for bracket in brackets:
        print_bracket(bracket)
    _print_unclassified(result)

    if args.output_dir:
        _write_documents(Path(args.output_dir), config, result, brackets)
    return 0


def _write_documents(
    output_dir: Path,
    config: EventConfig,
    result: PartitionResult,
    brackets: Sequence[Bracket],
) -> None:
    for bracket in brackets:
        write_pdf(
            generate_bracket_html(bracket, config.name),
            output_dir / document_filename(bracket.group, "bracket"),
        )
    for group in result.kata_groups:
        sheet = build_kata_scoresheet(group, config.kata_judges)
        write_pdf(
            generate_kata_scoresheet_html(sheet, config.name),
            output_dir / document_filename(group, "scoresheet"),
        )
    print(f"\nDocuments written to {output_dir}")


def cmd_init_config(args: argparse.Namespace) -> int:
    """Write the default event configuration."""
    path = save_event_config(default_event_config(), args.path)
    print(f"Default configuration written to {path}")
    return 0


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("entrants", nargs="?", help="Entrant list (.csv or .xlsx)")
    parser.add_argument(
        "--sample", action="store_true", help="Use the built-in sample roster"
    )
    parser.add_argument("--config", help="Load event configuration from JSON file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first invalid entrant instead of skipping it",
    )
    parser.add_argument("--output-dir", help="Write printable PDFs to this directory")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="dojo-draw",
        description="Group karate entrants and draw Kumite brackets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the groups for an entrant file
  dojo-draw groups entrants.csv

  # Reproducible draw with byes resolved to the final
  dojo-draw brackets entrants.xlsx --seed 7 --bye-policy cascade

  # Start from the stock bands and edit them
  dojo-draw init-config event.json
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    groups = subparsers.add_parser("groups", help="Partition entrants into groups")
    _add_input_arguments(groups)
    groups.set_defaults(func=cmd_groups)

    brackets = subparsers.add_parser("brackets", help="Draw Kumite brackets")
    _add_input_arguments(brackets)
    brackets.add_argument("--seed", type=int, help="Random seed for reproducibility")
    brackets.add_argument(
        "--bye-policy",
        choices=[BYE_POLICY_SHALLOW, BYE_POLICY_CASCADE],
        help="How far byes advance (default: from configuration)",
    )
    brackets.set_defaults(func=cmd_brackets)

    init_config = subparsers.add_parser(
        "init-config", help="Write the default event configuration"
    )
    init_config.add_argument("path", help="Destination JSON file")
    init_config.set_defaults(func=cmd_init_config)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except DojoDrawException as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
