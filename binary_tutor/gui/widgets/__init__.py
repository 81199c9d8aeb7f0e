"""Widgets for the Binary Tutor GUI."""

from .converter_panel import ConverterPanel
from .history_panel import HistoryPanel
from .quiz_tab import QuizTab

__all__ = ["ConverterPanel", "HistoryPanel", "QuizTab"]
