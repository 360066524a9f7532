"""
Animated quiz result charts for PyQt6.

Provides an animated donut chart of correct vs. incorrect answers and a
ready-made results page around it. The geometry, animation and result model
live in quiz_chart.core and do not need a running QApplication.
"""
import logging

from .core.errors import QuizChartError, InvalidArgument, PreconditionViolation
from .core.quiz_result import QuizResult, format_duration
from .core.chart_style import ChartStyle, ResultPageStyle, load_style_from_env
from .core.arc_geometry import (
    ArcSpan, ShadowArc, ChartGeometry, compute_chart_geometry, normalize_fractions
)
from .core.animation import AnimationFrame, AnimationState, ChartAnimationDriver, ease_in_out
from .core.chart_renderer import ChartPrimitives, ChartRenderer, percentage_label
from .ui.animated_quiz_chart import AnimatedQuizChart
from .ui.results_page import ResultsPage

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "QuizChartError", "InvalidArgument", "PreconditionViolation",
    "QuizResult", "format_duration",
    "ChartStyle", "ResultPageStyle", "load_style_from_env",
    "ArcSpan", "ShadowArc", "ChartGeometry", "compute_chart_geometry", "normalize_fractions",
    "AnimationFrame", "AnimationState", "ChartAnimationDriver", "ease_in_out",
    "ChartPrimitives", "ChartRenderer", "percentage_label",
    "AnimatedQuizChart", "ResultsPage",
]
