"""Data models for Binary Tutor."""

from .conversion import (
    ConversionErrorKind,
    ConversionRecord,
    ConversionResult,
    Direction,
)
from .quiz import Question, QuizResult

__all__ = [
    "Direction",
    "ConversionErrorKind",
    "ConversionRecord",
    "ConversionResult",
    "Question",
    "QuizResult",
]
