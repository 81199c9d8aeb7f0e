"""Null presenter for testing (no output)."""

from binary_tutor.models import ConversionRecord, ConversionResult, Question


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_conversion_result(self, result: ConversionResult) -> None:
        """Display a conversion outcome (no-op)."""
        pass

    def show_history(self, records: tuple[ConversionRecord, ...]) -> None:
        """Display the conversion history (no-op)."""
        pass

    def show_quiz_question(self, number: int, total: int, question: Question) -> None:
        """Display a Test Zone question (no-op)."""
        pass

    def show_certificate(self, text: str) -> None:
        """Display a certificate (no-op)."""
        pass
