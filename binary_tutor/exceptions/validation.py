"""Validation-related exceptions."""

from .base import BinaryTutorException


class ValidationError(BinaryTutorException):
    """Raised when a value violates a model or session contract."""

    pass
