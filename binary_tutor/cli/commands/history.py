"""CLI command for showing and clearing the conversion history."""

from binary_tutor.cli.commands import config_from_args
from binary_tutor.exceptions import BinaryTutorException
from binary_tutor.presenters import ConsolePresenter
from binary_tutor.utils import create_conversion_service


def history_command(args) -> int:
    """Execute the history subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    service = create_conversion_service(config_from_args(args))

    if args.clear:
        try:
            service.clear_history()
        except BinaryTutorException as e:
            presenter.show_error(f"Error: {e}")
            return 1
        presenter.show_success("Your conversion history has been removed.")
        return 0

    presenter.show_history(service.history)
    return 0
