"""CLI command for the stored theme preference."""

from binary_tutor.cli.commands import config_from_args
from binary_tutor.exceptions import BinaryTutorException
from binary_tutor.presenters import ConsolePresenter
from binary_tutor.utils import create_theme_service


def theme_command(args) -> int:
    """Execute the theme subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    service = create_theme_service(config_from_args(args))

    if args.mode is None:
        presenter.show_info(f"Theme: {service.get()}")
        return 0

    try:
        service.set(args.mode)
    except BinaryTutorException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    presenter.show_success(f"Theme set to {args.mode}")
    return 0
