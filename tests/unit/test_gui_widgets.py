"""Tests for the converter and history widgets.

Requires PyQt6 to be importable. Tests are skipped if PyQt6 is unavailable.
Qt runs on the offscreen platform so no display is needed.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PyQt6.QtWidgets import QApplication

    # Create QApplication if not already running (needed for any widget)
    _app = QApplication.instance() or QApplication([])
    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

pytestmark = pytest.mark.skipif(not _HAS_QT, reason="PyQt6 not available")


class RecordingPresenter:
    """Presenter that records history and error calls for assertion."""

    def __init__(self):
        self.histories = []
        self.errors = []
        self.successes = []
        self.results = []

    def show_info(self, message):
        pass

    def show_success(self, message):
        self.successes.append(message)

    def show_warning(self, message):
        pass

    def show_error(self, message):
        self.errors.append(message)

    def show_conversion_result(self, result):
        self.results.append(result)

    def show_history(self, records):
        self.histories.append(records)

    def show_quiz_question(self, number, total, question):
        pass

    def show_certificate(self, text):
        pass


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def binary_panel(conversion_service, presenter):
    from binary_tutor.gui.widgets.converter_panel import ConverterPanel
    from binary_tutor.models import Direction

    return ConverterPanel(Direction.BINARY_TO_DECIMAL, conversion_service, presenter)


class TestConverterPanel:
    """Tests for ConverterPanel."""

    def test_convert_shows_value_and_steps(self, binary_panel, presenter):
        binary_panel.input_edit.setText("1010")
        result = binary_panel.convert()

        assert result.ok
        assert binary_panel.output_edit.text() == "10"
        assert binary_panel.explanation_list.count() == 4
        assert presenter.histories[-1][0].output == "10"

    def test_invalid_input_shows_error(self, binary_panel, conversion_service):
        binary_panel.input_edit.setText("")
        result = binary_panel.convert()

        assert not result.ok
        assert binary_panel.error_label.text() == "Please enter a binary number."
        assert binary_panel.output_edit.text() == ""
        assert binary_panel.explanation_list.count() == 0
        assert conversion_service.history == ()

    def test_editing_sanitizes_and_resets(self, binary_panel):
        binary_panel.input_edit.setText("11")
        binary_panel.convert()

        binary_panel._on_text_edited("1a01")

        assert binary_panel.input_edit.text() == "101"
        assert binary_panel.output_edit.text() == ""
        assert binary_panel.explanation_list.count() == 0


class TestHistoryPanel:
    """Tests for HistoryPanel."""

    @pytest.fixture
    def panel(self, conversion_service, presenter):
        from binary_tutor.gui.widgets.history_panel import HistoryPanel

        return HistoryPanel(conversion_service, presenter)

    def test_initially_empty(self, panel):
        assert panel.history_list.count() == 0
        assert not panel.clear_button.isEnabled()

    def test_refresh_lists_records(self, panel, conversion_service):
        conversion_service.to_decimal("1")
        conversion_service.to_binary("2")
        panel.refresh(conversion_service.history)

        assert panel.history_list.count() == 2
        assert panel.history_list.item(0).text() == "[D→B] 2 → 10"
        assert panel.clear_button.isEnabled()

    def test_clear(self, panel, conversion_service, presenter):
        conversion_service.to_decimal("1")
        panel.refresh(conversion_service.history)

        panel._on_clear()

        assert conversion_service.history == ()
        assert panel.history_list.count() == 0
        assert presenter.successes


class TestSystemColorScheme:
    """Tests for reading the OS color scheme."""

    def test_returns_known_mode_or_none(self):
        from binary_tutor.gui.main_window import system_color_scheme

        assert system_color_scheme() in ("light", "dark", None)
