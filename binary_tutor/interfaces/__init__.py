"""Interface protocols for Binary Tutor."""

from .presenter import PresenterProtocol
from .storage import KeyValueStore

__all__ = ["KeyValueStore", "PresenterProtocol"]
