"""Panel listing the conversion history."""

from PyQt6.QtWidgets import QLabel, QListWidget, QPushButton, QVBoxLayout, QWidget

from binary_tutor.exceptions import BinaryTutorException
from binary_tutor.interfaces import PresenterProtocol
from binary_tutor.models import ConversionRecord
from binary_tutor.services import ConversionService


class HistoryPanel(QWidget):
    """Shows the most recent conversions, newest first, with a clear button."""

    def __init__(self, service: ConversionService, presenter: PresenterProtocol, parent=None):
        super().__init__(parent)
        self.service = service
        self.presenter = presenter
        self._setup_ui()
        self.refresh(service.history)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()

        heading = QLabel("Conversion History")
        heading.setObjectName("heading")
        layout.addWidget(heading)

        self.empty_label = QLabel("No conversions yet.")
        self.empty_label.setObjectName("caption")
        layout.addWidget(self.empty_label)

        self.history_list = QListWidget()
        layout.addWidget(self.history_list)

        self.clear_button = QPushButton("Clear History")
        self.clear_button.clicked.connect(self._on_clear)
        layout.addWidget(self.clear_button)

        self.setLayout(layout)

    def refresh(self, records: tuple[ConversionRecord, ...]) -> None:
        """Replace the displayed entries with ``records``."""
        self.history_list.clear()
        for record in records:
            self.history_list.addItem(str(record))
        self.empty_label.setVisible(not records)
        self.clear_button.setEnabled(bool(records))

    def _on_clear(self) -> None:
        try:
            self.service.clear_history()
        except BinaryTutorException as e:
            self.presenter.show_error(str(e))
            return
        self.refresh(self.service.history)
        self.presenter.show_success("Your conversion history has been removed.")
