"""Configuration management for Binary Tutor."""

from .config import BinaryTutorConfig
from .defaults import create_default_config

__all__ = ["BinaryTutorConfig", "create_default_config"]
