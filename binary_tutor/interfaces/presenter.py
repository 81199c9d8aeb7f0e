"""Presenter protocol for output abstraction."""

from typing import Protocol

from binary_tutor.models import ConversionRecord, ConversionResult, Question


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    business logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_conversion_result(self, result: ConversionResult) -> None:
        """Display a conversion outcome with its explanation.

        Args:
            result: The conversion result to display
        """
        ...

    def show_history(self, records: tuple[ConversionRecord, ...]) -> None:
        """Display the conversion history, most recent first.

        Args:
            records: Snapshot of the history ledger
        """
        ...

    def show_quiz_question(self, number: int, total: int, question: Question) -> None:
        """Display a Test Zone question.

        Args:
            number: 1-based question number
            total: Number of questions in the quiz
            question: The question to display
        """
        ...

    def show_certificate(self, text: str) -> None:
        """Display a rendered completion certificate.

        Args:
            text: Certificate text
        """
        ...
