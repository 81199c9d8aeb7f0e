"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from binary_tutor.config import create_default_config
from binary_tutor.gui.main_window import MainWindow


def main():
    """Launch the Binary Tutor GUI application."""
    logging.basicConfig(level=logging.WARNING)

    app = QApplication(sys.argv)
    app.setApplicationName("Binary Tutor")
    app.setOrganizationName("BinaryTutor")

    window = MainWindow(create_default_config())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
