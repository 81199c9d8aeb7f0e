"""Persisted light/dark theme preference."""

import logging
from typing import Literal, cast

from binary_tutor.exceptions import ValidationError
from binary_tutor.interfaces import KeyValueStore

logger = logging.getLogger(__name__)

ThemeMode = Literal["light", "dark"]
THEME_MODES: tuple[str, ...] = ("light", "dark")


class ThemePreferenceService:
    """Reads and writes the theme preference through the key-value store."""

    def __init__(self, store: KeyValueStore, key: str = "theme", default: str = "light"):
        if default not in THEME_MODES:
            raise ValidationError(f"Unknown theme: {default}")
        self._store = store
        self._key = key
        self._default = cast(ThemeMode, default)

    def get(self, fallback: str | None = None) -> ThemeMode:
        """Return the stored theme.

        Args:
            fallback: Mode to use when nothing valid is stored, e.g. the
                system color scheme. The configured default is used when
                this is None or not a known mode.
        """
        stored = self._store.get(self._key)
        if stored in THEME_MODES:
            return cast(ThemeMode, stored)
        if stored is not None:
            logger.warning(f"Ignoring unknown stored theme {stored!r}")
        if fallback in THEME_MODES:
            return cast(ThemeMode, fallback)
        return self._default

    def set(self, mode: str) -> None:
        """Persist ``mode``.

        Raises:
            ValidationError: If ``mode`` is not 'light' or 'dark'
        """
        if mode not in THEME_MODES:
            raise ValidationError(f"Unknown theme: {mode}. Choose 'light' or 'dark'.")
        self._store.set(self._key, mode)

    def toggle(self) -> ThemeMode:
        """Switch between light and dark and return the new mode."""
        new_mode: ThemeMode = "dark" if self.get() == "light" else "light"
        self.set(new_mode)
        return new_mode
