"""Panel converting one direction (binary→decimal or decimal→binary)."""

from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from binary_tutor.exceptions import BinaryTutorException
from binary_tutor.interfaces import PresenterProtocol
from binary_tutor.models import ConversionResult, Direction
from binary_tutor.services import ConversionService, sanitize_binary, sanitize_decimal

_LABELS = {
    Direction.BINARY_TO_DECIMAL: ("Binary to Decimal", "Binary number", "e.g. 1010"),
    Direction.DECIMAL_TO_BINARY: ("Decimal to Binary", "Decimal number", "e.g. 25"),
}


class ConverterPanel(QWidget):
    """Input, result and explanation for a single conversion direction.

    The input is sanitized as the user types; any edit clears the previous
    result and explanation.
    """

    def __init__(
        self,
        direction: Direction,
        service: ConversionService,
        presenter: PresenterProtocol,
        parent=None,
    ):
        super().__init__(parent)
        self.direction = direction
        self.service = service
        self.presenter = presenter
        self._sanitize = (
            sanitize_binary if direction is Direction.BINARY_TO_DECIMAL else sanitize_decimal
        )
        self._setup_ui()

    def _setup_ui(self) -> None:
        title, input_label, placeholder = _LABELS[self.direction]
        layout = QVBoxLayout()

        heading = QLabel(title)
        heading.setObjectName("heading")
        layout.addWidget(heading)

        layout.addWidget(QLabel(input_label))
        input_row = QHBoxLayout()
        self.input_edit = QLineEdit()
        self.input_edit.setPlaceholderText(placeholder)
        self.input_edit.textEdited.connect(self._on_text_edited)
        self.input_edit.returnPressed.connect(self.convert)
        input_row.addWidget(self.input_edit)
        self.convert_button = QPushButton("Convert")
        self.convert_button.clicked.connect(self.convert)
        input_row.addWidget(self.convert_button)
        layout.addLayout(input_row)

        self.error_label = QLabel("")
        self.error_label.setObjectName("error")
        layout.addWidget(self.error_label)

        layout.addWidget(QLabel(f"{self.direction.target_name.capitalize()} result"))
        output_row = QHBoxLayout()
        self.output_edit = QLineEdit()
        self.output_edit.setReadOnly(True)
        output_row.addWidget(self.output_edit)
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self._copy_output)
        output_row.addWidget(self.copy_button)
        layout.addLayout(output_row)

        explanation_label = QLabel("Explanation")
        explanation_label.setObjectName("caption")
        layout.addWidget(explanation_label)
        self.explanation_list = QListWidget()
        self.explanation_list.setWordWrap(True)
        layout.addWidget(self.explanation_list)

        self.setLayout(layout)

    def _on_text_edited(self, text: str) -> None:
        cleaned = self._sanitize(text)
        if cleaned != text:
            self.input_edit.setText(cleaned)
        self._reset_output()

    def _reset_output(self) -> None:
        self.error_label.setText("")
        self.output_edit.clear()
        self.explanation_list.clear()

    def convert(self) -> ConversionResult | None:
        """Convert the current input and show the outcome.

        Returns:
            The conversion result, or None if the history could not be saved
        """
        self._reset_output()
        try:
            result = self.service.convert(self.direction, self.input_edit.text())
        except BinaryTutorException as e:
            self.presenter.show_error(str(e))
            return None

        if result.ok:
            self.output_edit.setText(result.value)
            self.explanation_list.addItems(list(result.steps))
            self.presenter.show_history(self.service.history)
        else:
            self.error_label.setText(result.error_message)
        self.presenter.show_conversion_result(result)
        return result

    def _copy_output(self) -> None:
        text = self.output_edit.text()
        if not text:
            return
        QApplication.clipboard().setText(text)
        self.presenter.show_success(f"Copied to clipboard: {text}")
