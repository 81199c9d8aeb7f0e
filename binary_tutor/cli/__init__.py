"""Command-line interface for Binary Tutor."""
