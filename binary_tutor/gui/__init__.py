"""PyQt6 desktop interface for Binary Tutor."""
