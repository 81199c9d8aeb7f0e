"""Configuration classes for Binary Tutor."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class BinaryTutorConfig:
    """Immutable configuration for the converter, history and quiz.

    All configuration is frozen (immutable) so that services sharing
    one instance cannot change each other's settings.
    """

    # Storage settings
    storage_path: Path = field(
        default_factory=lambda: Path.home() / ".binary_tutor" / "storage.json"
    )
    history_key: str = "conversionHistory"
    theme_key: str = "theme"

    # History settings
    history_limit: int = 20

    # Appearance
    default_theme: str = "light"

    # Test Zone settings
    quiz_pass_percentage: int = 60

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.storage_path, str):
            object.__setattr__(self, "storage_path", Path(self.storage_path))
