"""Business logic services for Binary Tutor."""

from .certificate_service import CertificateService
from .conversion_engine import (
    binary_to_decimal,
    convert,
    decimal_to_binary,
    sanitize_binary,
    sanitize_decimal,
)
from .conversion_service import ConversionService
from .history_service import HISTORY_LIMIT, HistoryLedger
from .quiz_service import DEFAULT_QUESTIONS, QuizSession
from .stores import JsonFileStore, MemoryStore
from .theme_service import ThemePreferenceService

__all__ = [
    "binary_to_decimal",
    "decimal_to_binary",
    "convert",
    "sanitize_binary",
    "sanitize_decimal",
    "ConversionService",
    "HistoryLedger",
    "HISTORY_LIMIT",
    "QuizSession",
    "DEFAULT_QUESTIONS",
    "CertificateService",
    "ThemePreferenceService",
    "JsonFileStore",
    "MemoryStore",
]
