import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from settings import DEFAULT_TEMPLATE_FILE, LOG_DIR, TELEMETRY_FILE
from engine.error_handler import CharacterGenError, log_error, setup_logging
from engine.utils.save_system import get_export_path, save_characters, save_character
from systems.character_generation import (
    CharacterGenerator,
    load_character_template,
    load_generator_config,
)
from telemetry.logger import telemetry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate random characters from a template")
    parser.add_argument(
        "--template",
        type=Path,
        default=DEFAULT_TEMPLATE_FILE,
        help="Character template JSON file"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Generator settings JSON file (created with defaults if missing)"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="How many characters to generate (default: 1)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output"
    )
    parser.add_argument(
        "--min",
        dest="min_personalities",
        type=int,
        default=None,
        help="Minimum number of personalities (overrides config)"
    )
    parser.add_argument(
        "--max",
        dest="max_personalities",
        type=int,
        default=None,
        help="Maximum number of personalities (overrides config)"
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Also write the result to this JSON file"
    )
    output.add_argument(
        "--slot",
        type=int,
        default=None,
        choices=range(1, 10),
        metavar="1-9",
        help="Also write the result to a numbered export slot"
    )
    parser.add_argument(
        "--telemetry",
        action="store_true",
        help=f"Record per-step generation events to {TELEMETRY_FILE.name}"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print per-step trace output"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(LOG_DIR, verbose=args.verbose)

    if args.count < 1:
        print("--count must be at least 1", file=sys.stderr)
        return 2

    try:
        template = load_character_template(args.template)
        config = load_generator_config(args.config)
        if args.telemetry:
            telemetry.init(TELEMETRY_FILE)

        generator = CharacterGenerator(
            template,
            seed=args.seed,
            config=config,
            telemetry=telemetry if args.telemetry else None,
        )
        characters = generator.generate_batch(
            args.count,
            min_personalities=args.min_personalities,
            max_personalities=args.max_personalities,
        )

        if args.count == 1:
            payload = characters[0].to_dict()
        else:
            payload = [c.to_dict() for c in characters]
        print(json.dumps(payload, indent=2, ensure_ascii=False))

        destination = args.output
        if args.slot is not None:
            destination = get_export_path(args.slot)
        if destination is not None:
            if args.count == 1:
                save_character(characters[0], destination)
            else:
                save_characters(characters, destination)
    except CharacterGenError as e:
        log_error(e, "main")
        print(e.user_message, file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
