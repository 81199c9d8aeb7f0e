"""CLI commands for converting between binary and decimal."""

from binary_tutor.cli.commands import config_from_args
from binary_tutor.exceptions import BinaryTutorException
from binary_tutor.models import Direction
from binary_tutor.presenters import ConsolePresenter
from binary_tutor.services import sanitize_binary, sanitize_decimal
from binary_tutor.utils import create_conversion_service


def to_decimal_command(args) -> int:
    """Execute the to-decimal subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = invalid input or storage failure)
    """
    return _convert(args, Direction.BINARY_TO_DECIMAL)


def to_binary_command(args) -> int:
    """Execute the to-binary subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = invalid input or storage failure)
    """
    return _convert(args, Direction.DECIMAL_TO_BINARY)


def _convert(args, direction: Direction) -> int:
    presenter = ConsolePresenter()
    config = config_from_args(args)

    raw = args.number.strip()
    if args.strip:
        if direction is Direction.BINARY_TO_DECIMAL:
            raw = sanitize_binary(raw)
        else:
            raw = sanitize_decimal(raw)

    try:
        service = create_conversion_service(config)
        result = service.convert(direction, raw)
    except BinaryTutorException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    presenter.show_conversion_result(result)
    return 0 if result.ok else 1
