"""Main CLI entry point for binary_tutor."""

import argparse
import logging
import sys

from binary_tutor import __version__
from binary_tutor.cli.commands import convert, history, quiz, theme


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="binary_tutor",
        description="Convert between binary and decimal with step-by-step explanations",
        epilog="Use 'binary_tutor <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--storage",
        default=None,
        help="Path to the storage file (default: ~/.binary_tutor/storage.json)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # binary_tutor to-decimal <binary>
    to_decimal_parser = subparsers.add_parser(
        "to-decimal",
        help="Convert a binary number to decimal",
        description="Convert a binary number to decimal and explain each step",
    )
    to_decimal_parser.add_argument("number", help="Binary number, e.g. 1010")
    to_decimal_parser.add_argument(
        "--strip",
        action="store_true",
        help="Drop characters other than 0 and 1 before converting",
    )

    # binary_tutor to-binary <decimal>
    to_binary_parser = subparsers.add_parser(
        "to-binary",
        help="Convert a decimal number to binary",
        description="Convert a non-negative decimal number to binary and explain each step",
    )
    to_binary_parser.add_argument("number", help="Decimal number, e.g. 25")
    to_binary_parser.add_argument(
        "--strip",
        action="store_true",
        help="Drop characters other than 0-9 before converting",
    )

    # binary_tutor history
    history_parser = subparsers.add_parser(
        "history",
        help="Show or clear the conversion history",
        description="List the most recent conversions, newest first",
    )
    history_parser.add_argument(
        "--clear",
        action="store_true",
        help="Remove all recorded conversions",
    )

    # binary_tutor quiz
    quiz_parser = subparsers.add_parser(
        "quiz",
        help="Take the Test Zone quiz",
        description="Answer conversion questions and earn a completion certificate",
    )
    quiz_parser.add_argument("--name", help="Your name for the certificate")
    quiz_parser.add_argument(
        "--certificate",
        default=None,
        help="Also save the certificate to this text file",
    )

    # binary_tutor theme [light|dark]
    theme_parser = subparsers.add_parser(
        "theme",
        help="Show or set the GUI theme",
        description="Show the stored theme preference, or set it",
    )
    theme_parser.add_argument("mode", nargs="?", choices=["light", "dark"])

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "to-decimal":
        return convert.to_decimal_command(args)
    elif args.command == "to-binary":
        return convert.to_binary_command(args)
    elif args.command == "history":
        return history.history_command(args)
    elif args.command == "quiz":
        return quiz.quiz_command(args)
    elif args.command == "theme":
        return theme.theme_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
