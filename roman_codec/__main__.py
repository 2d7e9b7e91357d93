"""Command line entry point for the Roman numeral codec."""
import argparse
import sys
from typing import Callable, Optional

from .models.numeral import EXTENDED_UPPER_BOUND, NotationMode
from .numerals import RomanCodec
from .orchestrator import ConversionFlow, create_app_components


EXIT_COMMANDS = {"q", "quit", "exit", "n"}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="roman_codec",
        description="Convert integers to Roman numerals and back",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Integers to encode or numerals to decode (interactive if omitted)",
    )
    parser.add_argument(
        "--additive",
        action="store_true",
        help="Encode in additive notation (4 = IIII)",
    )
    parser.add_argument(
        "--upper-bound",
        type=int,
        default=None,
        help=f"Largest accepted number (default from settings, max {EXTENDED_UPPER_BOUND})",
    )
    parser.add_argument(
        "--historical",
        action="store_true",
        help="Accept historical aliases (O, F, P, G, Q, XIIX, IIXX) when decoding",
    )
    return parser


def run_interactive(
    flow: ConversionFlow,
    mode: NotationMode,
    read: Optional[Callable[[str], str]] = None,
) -> None:
    """Read values until the user exits."""
    read = read or input
    print("Enter an integer or a Roman numeral. Type 'q' to exit.")

    while True:
        try:
            raw = read("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if raw.lower() in EXIT_COMMANDS:
            return
        if not raw:
            continue

        result = flow.convert(raw, mode)
        print(flow.get_user_friendly_summary(result))


def main(argv: Optional[list[str]] = None) -> int:
    """Convert the given values, or start the interactive loop."""
    args = build_parser().parse_args(argv)

    try:
        codec = RomanCodec(
            upper_bound=args.upper_bound,
            allow_historical_aliases=True if args.historical else None,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    flow, _ = create_app_components(codec=codec)
    mode = NotationMode.ADDITIVE if args.additive else NotationMode.SUBTRACTIVE

    if not args.values:
        run_interactive(flow, mode)
        return 0

    exit_code = 0
    for value in args.values:
        result = flow.convert(value, mode)
        print(flow.get_user_friendly_summary(result))
        if not result.success:
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
