"""Default configuration values for Binary Tutor."""

from .config import BinaryTutorConfig


def create_default_config(**overrides) -> BinaryTutorConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        BinaryTutorConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            storage_path="/tmp/binary_tutor.json",
            quiz_pass_percentage=80,
        )
    """
    return BinaryTutorConfig(**overrides)
