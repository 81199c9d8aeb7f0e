"""Test Zone tab: quiz questions and the completion certificate."""

from pathlib import Path

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from binary_tutor.exceptions import BinaryTutorException, ValidationError
from binary_tutor.interfaces import PresenterProtocol
from binary_tutor.services import CertificateService, QuizSession

ANSWER_REVEAL_MS = 2000

PAGE_START = 0
PAGE_QUESTION = 1
PAGE_CERTIFICATE = 2


class QuizTab(QWidget):
    """Runs a QuizSession and shows the certificate at the end."""

    def __init__(
        self,
        session: QuizSession,
        certificates: CertificateService,
        presenter: PresenterProtocol,
        parent=None,
    ):
        super().__init__(parent)
        self.session = session
        self.certificates = certificates
        self.presenter = presenter
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        self.pages = QStackedWidget()
        self.pages.addWidget(self._build_start_page())
        self.pages.addWidget(self._build_question_page())
        self.pages.addWidget(self._build_certificate_page())
        layout.addWidget(self.pages)
        self.setLayout(layout)

    def _build_start_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout()
        heading = QLabel("Test Zone")
        heading.setObjectName("heading")
        layout.addWidget(heading)
        caption = QLabel(
            f"Answer {self.session.total} questions to earn your certificate of achievement."
        )
        caption.setObjectName("caption")
        layout.addWidget(caption)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Your name")
        self.name_edit.returnPressed.connect(self._on_start)
        layout.addWidget(self.name_edit)

        start_button = QPushButton("Start Test")
        start_button.clicked.connect(self._on_start)
        layout.addWidget(start_button)
        layout.addStretch()
        page.setLayout(layout)
        return page

    def _build_question_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout()
        self.progress_label = QLabel("")
        self.progress_label.setObjectName("caption")
        layout.addWidget(self.progress_label)

        self.question_label = QLabel("")
        self.question_label.setObjectName("heading")
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        self.option_group = QButtonGroup(self)
        self.option_buttons: list[QRadioButton] = []
        for i in range(4):
            button = QRadioButton("")
            self.option_group.addButton(button, i)
            self.option_buttons.append(button)
            layout.addWidget(button)

        self.feedback_label = QLabel("")
        layout.addWidget(self.feedback_label)

        self.submit_button = QPushButton("Submit Answer")
        self.submit_button.clicked.connect(self._on_submit)
        layout.addWidget(self.submit_button)
        layout.addStretch()
        page.setLayout(layout)
        return page

    def _build_certificate_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout()
        self.certificate_view = QPlainTextEdit()
        self.certificate_view.setReadOnly(True)
        mono = QFont("monospace")
        mono.setStyleHint(QFont.StyleHint.Monospace)
        self.certificate_view.setFont(mono)
        layout.addWidget(self.certificate_view)

        buttons = QHBoxLayout()
        restart_button = QPushButton("Restart")
        restart_button.clicked.connect(self._on_restart)
        buttons.addWidget(restart_button)
        save_button = QPushButton("Save Certificate")
        save_button.clicked.connect(self._on_save)
        buttons.addWidget(save_button)
        layout.addLayout(buttons)
        page.setLayout(layout)
        return page

    def _on_start(self) -> None:
        try:
            self.session.start(self.name_edit.text())
        except ValidationError as e:
            self.presenter.show_warning(str(e))
            return
        self._show_current_question()
        self.pages.setCurrentIndex(PAGE_QUESTION)

    def _show_current_question(self) -> None:
        question = self.session.current_question
        if question is None:
            return
        self.progress_label.setText(f"Question {self.session.question_number} of {self.session.total}")
        self.question_label.setText(question.question)

        self.option_group.setExclusive(False)
        for button, option in zip(self.option_buttons, question.options):
            button.setText(option)
            button.setChecked(False)
            button.setVisible(True)
            button.setEnabled(True)
        for button in self.option_buttons[len(question.options) :]:
            button.setVisible(False)
        self.option_group.setExclusive(True)

        self.feedback_label.setText("")
        self.feedback_label.setObjectName("")
        self.submit_button.setEnabled(True)
        self.presenter.show_quiz_question(self.session.question_number, self.session.total, question)

    def _on_submit(self) -> None:
        question = self.session.current_question
        checked = self.option_group.checkedButton()
        selected = checked.text() if checked is not None else ""
        try:
            correct = self.session.submit_answer(selected)
        except ValidationError as e:
            self.presenter.show_warning(str(e))
            return

        self.submit_button.setEnabled(False)
        for button in self.option_buttons:
            button.setEnabled(False)
        if correct:
            self.feedback_label.setObjectName("success")
            self.feedback_label.setText("Correct!")
        else:
            self.feedback_label.setObjectName("error")
            self.feedback_label.setText(f"Wrong. The correct answer is {question.answer}.")
        self.feedback_label.style().polish(self.feedback_label)

        QTimer.singleShot(ANSWER_REVEAL_MS, self._advance)

    def _advance(self) -> None:
        if not self.session.finished:
            self._show_current_question()
            return
        text = self.certificates.render(self.session.result())
        self.certificate_view.setPlainText(text)
        self.presenter.show_certificate(text)
        self.pages.setCurrentIndex(PAGE_CERTIFICATE)

    def _on_restart(self) -> None:
        self.session.restart()
        self.name_edit.clear()
        self.certificate_view.clear()
        self.pages.setCurrentIndex(PAGE_START)

    def _on_save(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self, "Save Certificate", "certificate.txt", "Text files (*.txt)"
        )
        if not path:
            return
        try:
            saved = self.certificates.save(self.session.result(), Path(path))
        except BinaryTutorException as e:
            self.presenter.show_error(str(e))
            return
        self.presenter.show_success(f"Certificate saved to {saved}")
