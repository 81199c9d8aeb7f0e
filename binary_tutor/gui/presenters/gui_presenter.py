"""GUI presenter implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from binary_tutor.models import ConversionRecord, ConversionResult, Question


class GUIPresenter(QObject):
    """Presenter that forwards every call as a Qt signal.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.
    """

    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    conversion_result_signal = pyqtSignal(object)  # ConversionResult
    history_signal = pyqtSignal(object)  # tuple[ConversionRecord, ...]
    quiz_question_signal = pyqtSignal(int, int, object)  # number, total, Question
    certificate_signal = pyqtSignal(str)

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_conversion_result(self, result: ConversionResult) -> None:
        self.conversion_result_signal.emit(result)

    def show_history(self, records: tuple[ConversionRecord, ...]) -> None:
        self.history_signal.emit(records)

    def show_quiz_question(self, number: int, total: int, question: Question) -> None:
        self.quiz_question_signal.emit(number, total, question)

    def show_certificate(self, text: str) -> None:
        self.certificate_signal.emit(text)
