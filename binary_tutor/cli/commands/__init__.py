"""CLI subcommands."""

from binary_tutor.config import BinaryTutorConfig, create_default_config


def config_from_args(args) -> BinaryTutorConfig:
    """Build the configuration, honouring the global --storage option."""
    storage = getattr(args, "storage", None)
    if storage:
        return create_default_config(storage_path=storage)
    return create_default_config()
