# core/errors.py
"""
Exception types raised by the quiz chart core.
"""


class QuizChartError(Exception):
    """Base class for all quiz chart errors."""


class InvalidArgument(QuizChartError, ValueError):
    """A value object or style was constructed from invalid input."""


class PreconditionViolation(QuizChartError, AssertionError):
    """An operation was called in a state or with values it does not accept."""
