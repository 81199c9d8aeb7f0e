"""Test Zone quiz session."""

import logging
from datetime import date

from binary_tutor.exceptions import ValidationError
from binary_tutor.models import Direction, Question, QuizResult

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        question="What is the decimal value of binary '1010'?",
        options=("8", "10", "12", "14"),
        answer="10",
        direction=Direction.BINARY_TO_DECIMAL,
        problem="1010",
    ),
    Question(
        question="What is the binary value of decimal '25'?",
        options=("11001", "10011", "11101", "11011"),
        answer="11001",
        direction=Direction.DECIMAL_TO_BINARY,
        problem="25",
    ),
    Question(
        question="What is the decimal value of binary '1111'?",
        options=("15", "16", "7", "31"),
        answer="15",
        direction=Direction.BINARY_TO_DECIMAL,
        problem="1111",
    ),
    Question(
        question="What is the binary value of decimal '18'?",
        options=("10001", "10100", "10010", "11000"),
        answer="10010",
        direction=Direction.DECIMAL_TO_BINARY,
        problem="18",
    ),
    Question(
        question="What is the decimal value of binary '10001'?",
        options=("9", "17", "16", "1"),
        answer="17",
        direction=Direction.BINARY_TO_DECIMAL,
        problem="10001",
    ),
)


class QuizSession:
    """Walks a participant through a fixed list of questions.

    A session starts once a participant name is given, scores each
    submitted answer and finishes after the last question.
    """

    def __init__(self, questions: tuple[Question, ...] = DEFAULT_QUESTIONS):
        """Initialize the quiz session.

        Args:
            questions: Questions to ask, in order

        Raises:
            ValidationError: If no questions are given
        """
        if not questions:
            raise ValidationError("A quiz needs at least one question")
        self._questions = tuple(questions)
        self._reset()

    def _reset(self) -> None:
        self._name = ""
        self._index = 0
        self._score = 0
        self._started = False
        self._finished = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> int:
        return self._score

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def started(self) -> bool:
        return self._started

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def question_number(self) -> int:
        """1-based number of the current question."""
        return self._index + 1

    @property
    def current_question(self) -> Question | None:
        """The question awaiting an answer, or None outside a running quiz."""
        if not self._started or self._finished:
            return None
        return self._questions[self._index]

    def start(self, name: str) -> None:
        """Begin the quiz for ``name``.

        Args:
            name: Participant name shown on the certificate

        Raises:
            ValidationError: If the name is blank
        """
        name = name.strip()
        if not name:
            raise ValidationError("Please enter your name to start the test.")
        self._reset()
        self._name = name
        self._started = True
        logger.info(f"Quiz started for {name} ({self.total} questions)")

    def submit_answer(self, option: str) -> bool:
        """Score ``option`` against the current question and move on.

        Args:
            option: The selected answer

        Returns:
            True if the answer was correct

        Raises:
            ValidationError: If no answer is selected or no question is pending
        """
        question = self.current_question
        if question is None:
            raise ValidationError("There is no question waiting for an answer.")
        if not option:
            raise ValidationError("Please select an answer before continuing.")

        correct = question.is_correct(option)
        if correct:
            self._score += 1

        if self._index < self.total - 1:
            self._index += 1
        else:
            self._finished = True
            logger.info(f"Quiz finished for {self._name}: {self._score}/{self.total}")
        return correct

    def restart(self) -> None:
        """Return to the not-started state, forgetting the participant."""
        self._reset()

    def result(self) -> QuizResult:
        """Final result of a finished quiz.

        Raises:
            ValidationError: If the quiz has not finished
        """
        if not self._finished:
            raise ValidationError("The quiz is not finished yet.")
        return QuizResult(
            name=self._name,
            score=self._score,
            total=self.total,
            issued_on=date.today(),
        )
