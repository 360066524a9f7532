# ui/animated_quiz_chart.py
"""
Custom QWidget that animates a two-segment donut chart of quiz correctness.
The correct segment grows clockwise from 12 o'clock, the wrong segment follows it.
"""
import logging

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtGui import QPainter
from PyQt6.QtCore import QRectF, QSize, QTimer, QElapsedTimer, pyqtSignal

from ..core.animation import AnimationState, ChartAnimationDriver
from ..core.chart_renderer import ChartRenderer
from ..core.chart_style import ChartStyle
from ..core.quiz_result import QuizResult
from .chart_painter import paint_chart

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16  # ~60 fps


class AnimatedQuizChart(QWidget):
    """
    A widget that animates a donut chart from empty to the quiz score.

    The animation starts as soon as the widget is created. Changing the
    counts with set_counts() replaces the animation driver; it never restarts
    the old one.
    """
    animationFinished = pyqtSignal()

    def __init__(self, correct_answers_count: int, total_questions: int,
                 style: ChartStyle | None = None, parent=None, autostart=True):
        super().__init__(parent)
        self._style = style or ChartStyle()
        self._renderer = ChartRenderer(self._style)
        self._driver = None
        self._primitives = None
        self._correct_answers_count = 0
        self._total_questions = 0

        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_timer)

        self.setFixedSize(int(self._style.size), int(self._style.size))
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        self._bind(correct_answers_count, total_questions, autostart)

    # --- Properties ---
    @property
    def chart_style(self) -> ChartStyle:
        return self._style

    @property
    def driver(self) -> ChartAnimationDriver:
        return self._driver

    @property
    def primitives(self):
        return self._primitives

    @property
    def target_fractions(self) -> tuple[float, float]:
        return self._driver.targets

    def label_text(self) -> str | None:
        return self._primitives.label if self._primitives else None

    def is_animating(self) -> bool:
        return self._timer.isActive()

    def sizeHint(self):
        return QSize(int(self._style.size), int(self._style.size))

    # --- Animation ---
    def set_counts(self, correct_answers_count: int, total_questions: int, autostart=True):
        """Rebinds the chart to new counts with a fresh animation."""
        same_counts = (correct_answers_count, total_questions) == (
            self._correct_answers_count, self._total_questions)
        if same_counts and self._driver.state is not AnimationState.DISPOSED:
            return
        self._bind(correct_answers_count, total_questions, autostart)

    def _bind(self, correct_answers_count, total_questions, autostart):
        # Validates the counts the same way a QuizResult does.
        result = QuizResult(correct_answers_count, total_questions, 0)
        self._release_driver()
        self._correct_answers_count = correct_answers_count
        self._total_questions = total_questions

        self._finished = False
        self._driver = ChartAnimationDriver()
        self._driver.start(result.percentage_correct, self._style.animation_duration_ms)
        self._renderer.reset()
        self._primitives = self._renderer.render(self._driver.on_tick(0))
        if autostart:
            self._clock.start()
            self._timer.start()
        self.update()

    def advance(self, elapsed_ms: float) -> bool:
        """
        Moves the animation to `elapsed_ms` after its start.

        Returns True if the picture changed. Stops the frame timer once the
        animation is complete.
        """
        frame = self._driver.on_tick(elapsed_ms)
        if frame is None:
            return False

        changed = False
        primitives = self._renderer.render(frame)
        if primitives is not None:
            self._primitives = primitives
            changed = True
            self.update()

        if self._driver.is_complete and not self._finished:
            self._finished = True
            self._timer.stop()
            self.animationFinished.emit()
        return changed

    def finish(self):
        """Jumps straight to the final frame."""
        self.advance(self._driver.duration_ms)

    def _on_timer(self):
        self.advance(self._clock.elapsed())

    def _release_driver(self):
        self._timer.stop()
        if self._driver is not None:
            self._driver.dispose()

    def dispose(self):
        """Stops the frame timer and releases the animation driver."""
        self._release_driver()
        logger.debug("AnimatedQuizChart: disposed")

    def closeEvent(self, event):
        self.dispose()
        super().closeEvent(event)

    # --- Painting ---
    def paintEvent(self, event):
        if self._primitives is None:
            return
        painter = QPainter(self)
        try:
            paint_chart(painter, QRectF(self.rect()), self._primitives, self._style)
        finally:
            painter.end()
