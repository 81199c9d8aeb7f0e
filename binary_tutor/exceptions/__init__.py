"""Custom exceptions for Binary Tutor."""

from .base import BinaryTutorException
from .storage import StorageError
from .validation import ValidationError

__all__ = [
    "BinaryTutorException",
    "ValidationError",
    "StorageError",
]
