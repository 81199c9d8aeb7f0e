"""Base exception classes for Binary Tutor."""


class BinaryTutorException(Exception):
    """Base exception for all Binary Tutor errors.

    All custom exceptions in the binary_tutor package should inherit
    from this base class for consistent error handling.
    """

    pass
