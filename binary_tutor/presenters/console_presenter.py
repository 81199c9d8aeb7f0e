"""Console presenter for CLI output."""

import sys

from binary_tutor.models import ConversionRecord, ConversionResult, Question


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_conversion_result(self, result: ConversionResult) -> None:
        """Display a conversion outcome with its explanation."""
        if not result.ok:
            self.show_error(result.error_message)
            return

        print(f"{result.direction.target_name.capitalize()} value: {result.value}")
        print("\nExplanation:")
        for step in result.steps:
            print(f"  {step}")

    def show_history(self, records: tuple[ConversionRecord, ...]) -> None:
        """Display the conversion history, most recent first."""
        if not records:
            print("No conversions yet.")
            return

        print(f"\nConversion History ({len(records)} entries):")
        print("=" * 40)
        for i, record in enumerate(records, 1):
            print(f"{i:2d}. {record.direction.value}  {record.input} → {record.output}")

    def show_quiz_question(self, number: int, total: int, question: Question) -> None:
        """Display a Test Zone question with lettered options."""
        print(f"\nQuestion {number}/{total}: {question.question}")
        for letter, option in zip("abcd", question.options):
            print(f"  {letter}) {option}")

    def show_certificate(self, text: str) -> None:
        """Display a rendered completion certificate."""
        print()
        print(text, end="")
