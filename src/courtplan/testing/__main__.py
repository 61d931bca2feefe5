"""Testing CLI for Court Plan.

This module provides a command-line interface, with an interactive mode,
for generating sample sessions and checking session files and scores.
"""

# Court Plan
# Copyright (C) 2025  Court Plan developers
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
import json
import sys
from pathlib import Path
from typing import List, Optional

from dateutil import parser as date_parser
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from courtplan import __version__
from courtplan.constants import DEFAULT_SCORE_MODE, SCORE_TARGETS
from courtplan.exceptions import CourtPlanException
from courtplan.models.player import PlayerRoster
from courtplan.models.session import SessionConfig
from courtplan.testing.rrg import RandomRosterGenerator, RRGConfig
from courtplan.utils import setup_logger
from courtplan.utils.validation import clamp_score, validate_number_range
from courtplan.validation import (
    check_score,
    create_session_validator,
    group_validations_by_category,
)

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2

MAX_GENERATED_PLAYERS = 200


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


COMMANDS = {
    "generate": {
        "description": "Generate a random session and roster as JSON",
        "options": {
            "--players": "Number of players (default: 12)",
            "--seed": "Random seed",
            "--pair-probability": "Chance of adding players as a pair (default: 0.3)",
            "--output": "Write JSON to this file instead of stdout",
            "--validate": "Also validate the generated session",
        },
    },
    "validate": {
        "description": "Validate a session file holding config and players",
        "options": {
            "--file": "Session file (JSON)",
            "--now": "Reference time for the future-date check (ISO 8601)",
            "--export": "Write findings to this JSON file",
        },
    },
    "score": {
        "description": "Check whether a recorded score is legal",
        "options": {
            "--mode": f"Scoring mode (default: {DEFAULT_SCORE_MODE})",
        },
    },
    "help": {
        "description": "Show help for commands",
        "options": {},
    },
}


def print_banner():
    """Print the application banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}COURT PLAN TEST - CLI{Colors.ENDC} "
        f"(version {__version__})\n\n"
        f"Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} "
        "to leave interactive mode\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = WordCompleter(list(COMMANDS))
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def print_findings(results) -> None:
    """Print validation findings grouped by category."""
    grouped = group_validations_by_category(results)
    for category, findings in grouped.items():
        if not findings:
            continue
        print(f"\n{Colors.BOLD}{category.value}{Colors.ENDC}")
        for finding in findings:
            colour = Colors.FAIL if finding.is_error else Colors.WARNING
            label = finding.severity.value.upper()
            suffix = f" ({finding.field})" if finding.field else ""
            print(f"  {colour}[{label}]{Colors.ENDC} {finding.message}{suffix}")

    errors = sum(1 for r in results if r.is_error)
    warnings = sum(1 for r in results if r.is_warning)
    colour = Colors.FAIL if errors else Colors.OKGREEN
    print(f"\n{colour}{errors} error(s), {warnings} warning(s){Colors.ENDC}")


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate (RRG) command."""
    for check in (
        validate_number_range(args.players, 0, MAX_GENERATED_PLAYERS, "Players"),
        validate_number_range(args.pair_probability, 0.0, 1.0, "Pair probability"),
    ):
        if not check:
            print(f"{Colors.FAIL}Error: {check.error_message}{Colors.ENDC}")
            return EXIT_BAD_INPUT

    config = RRGConfig(
        num_players=args.players,
        seed=args.seed,
        pair_probability=args.pair_probability,
    )
    generator = RandomRosterGenerator(config)
    session_data = generator.generate_session()
    payload = generator.export_json_format(session_data)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(payload, encoding="utf-8")
        print(f"{Colors.OKGREEN}Session written to: {output_path}{Colors.ENDC}")
    else:
        print(payload)

    if args.validate:
        results = create_session_validator().validate(
            session_data["config"], session_data["roster"]
        )
        print_findings(results)

    return EXIT_OK


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validation command.

    Returns:
        0 when the session has no errors, 1 when it has errors, 2 when the
        file cannot be read
    """
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{Colors.FAIL}Error: File not found: {file_path}{Colors.ENDC}")
        return EXIT_BAD_INPUT

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            session_data = json.load(f)
        except json.JSONDecodeError as e:
            print(f"{Colors.FAIL}Error: {file_path} is not valid JSON: {e}{Colors.ENDC}")
            return EXIT_BAD_INPUT

    if not isinstance(session_data, dict):
        print(f"{Colors.FAIL}Error: {file_path} must hold a JSON object{Colors.ENDC}")
        return EXIT_BAD_INPUT

    try:
        config = SessionConfig.from_dict(session_data.get("config", {}))
        roster = PlayerRoster.from_list(session_data.get("players", []))
        now = date_parser.isoparse(args.now) if args.now else None
    except (CourtPlanException, ValueError) as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return EXIT_BAD_INPUT

    print(f"\n{Colors.BOLD}Validating session: {file_path}{Colors.ENDC}")
    results = create_session_validator().validate(config, roster, now)
    print_findings(results)

    if args.export:
        export_path = Path(args.export)
        export_data = {
            "valid": not any(r.is_error for r in results),
            "findings": [r.to_dict() for r in results],
        }
        export_path.write_text(json.dumps(export_data, indent=2), encoding="utf-8")
        print(f"\n{Colors.OKGREEN}Report exported to: {export_path}{Colors.ENDC}")

    return EXIT_INVALID if any(r.is_error for r in results) else EXIT_OK


def run_score_command(args: argparse.Namespace) -> int:
    """Run the score check command.

    Typed scores are cleaned the way the score entry form cleans them:
    rounded and clamped to the recordable range.
    """
    score1 = clamp_score(args.score1)
    score2 = clamp_score(args.score2)
    if score1 is None or score2 is None:
        print(f"{Colors.FAIL}Error: scores must be numbers{Colors.ENDC}")
        return EXIT_BAD_INPUT

    result = check_score(score1, score2, args.mode)
    if result:
        print(f"{Colors.OKGREEN}{score1}-{score2} is valid{Colors.ENDC}")
        return EXIT_OK
    print(f"{Colors.FAIL}{score1}-{score2}: {result.error}{Colors.ENDC}")
    return EXIT_INVALID


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("courtplan-test> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            parts = user_input.split()
            command = parts[0].lstrip("/")

            if command == "help":
                print_command_help(parts[1].lstrip("/"))
                continue

            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                args = parser.parse_args([command] + parts[1:])
                args.func(args)
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue
            except (CourtPlanException, OSError) as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                logger.exception("Command execution failed")

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return EXIT_OK


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="courtplan-test",
        description="Testing CLI for Court Plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  courtplan-test

  # Generate a session with 16 players
  courtplan-test generate --players 16 --seed 7 --output session.json

  # Validate a session file
  courtplan-test validate --file session.json

  # Check a score
  courtplan-test score 17 15 --mode first_to_15

  # Interactive prompt
  courtplan-test interactive
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help=COMMANDS["generate"]["description"])
    gen_parser.add_argument("--players", type=int, default=12)
    gen_parser.add_argument("--seed", type=int)
    gen_parser.add_argument("--pair-probability", type=float, default=0.3)
    gen_parser.add_argument("--output")
    gen_parser.add_argument("--validate", action="store_true")
    gen_parser.set_defaults(func=run_generate_command)

    val_parser = subparsers.add_parser("validate", help=COMMANDS["validate"]["description"])
    val_parser.add_argument("--file", required=True)
    val_parser.add_argument("--now")
    val_parser.add_argument("--export")
    val_parser.set_defaults(func=run_validate_command)

    score_parser = subparsers.add_parser("score", help=COMMANDS["score"]["description"])
    score_parser.add_argument("score1")
    score_parser.add_argument("score2")
    score_parser.add_argument(
        "--mode", choices=sorted(SCORE_TARGETS), default=DEFAULT_SCORE_MODE
    )
    score_parser.set_defaults(func=run_score_command)

    interactive_parser = subparsers.add_parser(
        "interactive", help="Start the interactive prompt"
    )
    interactive_parser.set_defaults(func=lambda args: run_interactive_mode())

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for courtplan-test CLI."""
    argv = sys.argv[1:] if argv is None else argv

    # If no arguments, start interactive mode
    if not argv or "--interactive" in argv or "-i" in argv:
        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
