"""Theme management for the Binary Tutor GUI.

Two palettes are supported, light and dark. The chosen mode is stored
through ThemePreferenceService so the CLI and GUI share one preference.
"""

import re

from binary_tutor.services.theme_service import ThemeMode, ThemePreferenceService


class _Spacing:
    """Spacing constants (8px base)."""

    xxs = 4
    xs = 8
    sm = 12
    md = 16
    lg = 24


SPACING = _Spacing()


class Theme:
    """Color palettes and stylesheet generation for the application."""

    LIGHT_COLORS = {
        "primary": "#6366F1",  # Indigo 500
        "primary_hover": "#4F46E5",  # Indigo 600
        "error": "#EF4444",  # Red 500
        "success": "#10B981",  # Emerald 500
        "background": "#F9FAFB",  # Gray 50
        "surface": "#FFFFFF",
        "border": "#E5E7EB",  # Gray 200
        "text_primary": "#111827",  # Gray 900
        "text_secondary": "#6B7280",  # Gray 500
        "text_on_primary": "#FFFFFF",
    }

    DARK_COLORS = {
        "primary": "#6366F1",  # Indigo 500
        "primary_hover": "#818CF8",  # Indigo 400
        "error": "#EF4444",  # Red 500
        "success": "#10B981",  # Emerald 500
        "background": "#0F172A",  # Slate 900
        "surface": "#1E293B",  # Slate 800
        "border": "#475569",  # Slate 600
        "text_primary": "#F1F5F9",  # Slate 100
        "text_secondary": "#94A3B8",  # Slate 400
        "text_on_primary": "#FFFFFF",
    }

    STYLESHEET_TEMPLATE = """
QWidget {
    background-color: ${background};
    color: ${text_primary};
    font-size: 14px;
}
QLineEdit, QListWidget, QPlainTextEdit {
    background-color: ${surface};
    border: 1px solid ${border};
    border-radius: 6px;
    padding: 6px;
}
QLineEdit:focus {
    border-color: ${primary};
}
QPushButton {
    background-color: ${primary};
    color: ${text_on_primary};
    border: none;
    border-radius: 8px;
    padding: 8px 16px;
}
QPushButton:hover {
    background-color: ${primary_hover};
}
QLabel#caption {
    color: ${text_secondary};
    font-size: 12px;
}
QLabel#error {
    color: ${error};
}
QLabel#success {
    color: ${success};
}
QLabel#heading {
    font-size: 20px;
    font-weight: 700;
}
"""

    def __init__(self, preferences: ThemePreferenceService, system_mode: str | None = None):
        """Initialize theme manager.

        Args:
            preferences: Store-backed theme preference
            system_mode: OS color scheme, used until a theme has been chosen
        """
        self._preferences = preferences
        self._current_mode: ThemeMode = preferences.get(fallback=system_mode)

    @property
    def current_mode(self) -> ThemeMode:
        return self._current_mode

    def toggle(self) -> ThemeMode:
        """Switch light/dark, persist the choice and return the new mode."""
        new_mode: ThemeMode = "dark" if self._current_mode == "light" else "light"
        self._preferences.set(new_mode)
        self._current_mode = new_mode
        return self._current_mode

    @classmethod
    def get_colors(cls, mode: str) -> dict[str, str]:
        """Get color palette for a theme mode."""
        return cls.DARK_COLORS if mode == "dark" else cls.LIGHT_COLORS

    def get_stylesheet(self, mode: str | None = None) -> str:
        """Get the QSS stylesheet for ``mode`` (current mode if None)."""
        if mode is None:
            mode = self._current_mode
        return self._substitute_variables(self.STYLESHEET_TEMPLATE, self.get_colors(mode))

    @staticmethod
    def _substitute_variables(qss_content: str, variables: dict[str, str]) -> str:
        """Substitute ${name} placeholders with palette values."""

        def replace_var(match: re.Match) -> str:
            return variables.get(match.group(1), match.group(0))

        return re.sub(r"\$\{([a-z_]+)\}", replace_var, qss_content)
