"""Main window for Binary Tutor GUI."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from binary_tutor import __version__
from binary_tutor.config import BinaryTutorConfig
from binary_tutor.gui.presenters import GUIPresenter
from binary_tutor.gui.resources.styles import SPACING, Theme
from binary_tutor.gui.widgets import ConverterPanel, HistoryPanel, QuizTab
from binary_tutor.models import Direction
from binary_tutor.services import CertificateService, QuizSession
from binary_tutor.utils import create_conversion_service, create_store, create_theme_service

WINDOW_DEFAULT_WIDTH = 900
WINDOW_DEFAULT_HEIGHT = 700
STATUS_TIMEOUT_MS = 4000


def system_color_scheme() -> str | None:
    """Return "light" or "dark" from the OS color scheme, or None if unknown."""
    if QGuiApplication.instance() is None:
        return None
    scheme = QGuiApplication.styleHints().colorScheme()
    if scheme == Qt.ColorScheme.Dark:
        return "dark"
    if scheme == Qt.ColorScheme.Light:
        return "light"
    return None


class MainWindow(QMainWindow):
    """Main application window for Binary Tutor.

    This window provides a tabbed interface for:
    - Binary/decimal conversion with explanations
    - Conversion history
    - Test Zone quiz
    """

    def __init__(self, config: BinaryTutorConfig):
        """Initialize the main window.

        Args:
            config: Application configuration
        """
        super().__init__()
        self.config = config

        store = create_store(config)
        self.conversion_service = create_conversion_service(config, store)
        self.theme = Theme(
            create_theme_service(config, store), system_mode=system_color_scheme()
        )

        self.presenter = GUIPresenter(self)
        self._connect_presenter_signals()

        self._setup_ui()
        self._setup_shortcuts()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(f"Binary Tutor {__version__}")
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        central_widget = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.sm, SPACING.md, SPACING.sm)

        # Header: title and theme toggle
        header = QHBoxLayout()
        title = QLabel("Binary Tutor")
        title.setObjectName("heading")
        header.addWidget(title)
        header.addStretch()
        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.toggle_theme)
        header.addWidget(self.theme_button)
        layout.addLayout(header)

        self.tabs = QTabWidget()

        converter_tab = QWidget()
        converter_layout = QHBoxLayout()
        self.binary_panel = ConverterPanel(
            Direction.BINARY_TO_DECIMAL, self.conversion_service, self.presenter
        )
        self.decimal_panel = ConverterPanel(
            Direction.DECIMAL_TO_BINARY, self.conversion_service, self.presenter
        )
        converter_layout.addWidget(self.binary_panel)
        converter_layout.addWidget(self.decimal_panel)
        converter_tab.setLayout(converter_layout)
        self.tabs.addTab(converter_tab, "Converter")

        self.history_panel = HistoryPanel(self.conversion_service, self.presenter)
        self.tabs.addTab(self.history_panel, "History")

        self.quiz_tab = QuizTab(QuizSession(), CertificateService(), self.presenter)
        self.tabs.addTab(self.quiz_tab, "Test Zone")

        layout.addWidget(self.tabs)
        central_widget.setLayout(layout)
        self.setCentralWidget(central_widget)

        self._apply_theme()

    def _setup_shortcuts(self) -> None:
        """Set up global keyboard shortcuts."""
        for i in range(1, 4):
            shortcut = QShortcut(QKeySequence(f"Ctrl+{i}"), self)
            shortcut.activated.connect(lambda idx=i - 1: self.tabs.setCurrentIndex(idx))

        theme_shortcut = QShortcut(QKeySequence("Ctrl+T"), self)
        theme_shortcut.activated.connect(self.toggle_theme)

    def _connect_presenter_signals(self) -> None:
        self.presenter.info_signal.connect(self._show_status)
        self.presenter.success_signal.connect(self._show_status)
        self.presenter.warning_signal.connect(self._show_status)
        self.presenter.error_signal.connect(self._on_error_message)
        self.presenter.history_signal.connect(self._on_history_changed)

    def _show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def _on_error_message(self, message: str) -> None:
        self.statusBar().showMessage(f"Error: {message}", STATUS_TIMEOUT_MS)

    def _on_history_changed(self, records: tuple) -> None:
        self.history_panel.refresh(records)

    def toggle_theme(self) -> None:
        """Switch between light and dark mode."""
        self.theme.toggle()
        self._apply_theme()

    def _apply_theme(self) -> None:
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(self.theme.get_stylesheet())
        next_mode = "Dark" if self.theme.current_mode == "light" else "Light"
        self.theme_button.setText(f"{next_mode} mode")
