"""Data models for the Test Zone quiz."""

from dataclasses import dataclass
from datetime import date

from .conversion import Direction


@dataclass(frozen=True)
class Question:
    """A multiple-choice conversion question."""

    question: str
    options: tuple[str, ...]
    answer: str
    direction: Direction
    problem: str  # The number being converted

    def is_correct(self, option: str) -> bool:
        return option == self.answer


@dataclass(frozen=True)
class QuizResult:
    """Final outcome of a completed quiz."""

    name: str
    score: int
    total: int
    issued_on: date

    @property
    def percentage(self) -> int:
        """Score as a whole-number percentage."""
        if self.total == 0:
            return 0
        return round(self.score / self.total * 100)

    def passed(self, threshold: int) -> bool:
        """Check if the percentage reaches ``threshold``."""
        return self.percentage >= threshold

    def __str__(self) -> str:
        return f"QuizResult({self.name}: {self.score}/{self.total}, {self.percentage}%)"
