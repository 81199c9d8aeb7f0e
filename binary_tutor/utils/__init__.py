"""Utility functions for Binary Tutor."""

from .service_factory import create_conversion_service, create_store, create_theme_service

__all__ = [
    "create_store",
    "create_conversion_service",
    "create_theme_service",
]
