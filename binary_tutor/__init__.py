"""
Binary Tutor - Binary/Decimal Conversion Trainer

An educational tool that converts numbers between binary and decimal,
explains every step of the derivation, keeps a short conversion history,
and quizzes the learner in the Test Zone.
"""

__version__ = "1.0.0"
__author__ = "Binary Tutor Contributors"
