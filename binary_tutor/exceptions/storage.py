"""Persistence related exceptions."""

from .base import BinaryTutorException


class StorageError(BinaryTutorException):
    """Raised when the key-value store cannot be written."""

    pass
