# core/arc_geometry.py
"""
Arc geometry for the two-segment donut chart.

Angles are radians, 0 at 3 o'clock, increasing clockwise (screen
coordinates). The correct segment starts at 12 o'clock and the wrong segment
starts where the correct one ends. Everything here is pure: the same inputs
always give an equal ChartGeometry.
"""
import math
from typing import NamedTuple, Optional

from .chart_style import ChartStyle, SHADOW_ALPHA, SHADOW_BLUR_RADIUS
from .errors import PreconditionViolation

TWO_PI = 2 * math.pi
START_ANGLE = -math.pi / 2  # 12 o'clock

CAP_ROUND = "round"
CAP_FLAT = "flat"


class ArcSpan(NamedTuple):
    """One stroked arc on the chart circle."""
    start_angle: float
    sweep_angle: float
    stroke_width: float
    color: str
    cap: str = CAP_ROUND

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def is_full_circle(self) -> bool:
        return self.sweep_angle >= TWO_PI


class ShadowArc(NamedTuple):
    """Blurred low-alpha copy of an arc, drawn beneath it."""
    arc: ArcSpan
    alpha: int
    blur_radius: float


class ChartGeometry(NamedTuple):
    correct_fraction: float
    wrong_fraction: float
    background: ArcSpan
    correct: Optional[ArcSpan]
    wrong: Optional[ArcSpan]
    shadow: Optional[ShadowArc]

    def draw_order(self) -> list:
        """Background ring first, then shadow, correct and wrong arcs."""
        items = [self.background]
        if self.shadow is not None:
            items.append(self.shadow)
        if self.correct is not None:
            items.append(self.correct)
        if self.wrong is not None:
            items.append(self.wrong)
        return items


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(max(float(value), 0.0), 1.0)


def normalize_fractions(correct: float, wrong: float) -> tuple[float, float]:
    """
    Clamps both fractions to [0, 1] so they never overlap past a full turn.

    When the clamped sum exceeds 1 the wrong fraction is cut to 1 - correct;
    the correct fraction is never reduced.
    """
    correct = _clamp_unit(correct)
    wrong = _clamp_unit(wrong)
    if correct + wrong > 1.0:
        wrong = 1.0 - correct
    return correct, wrong


def check_fractions(correct: float, wrong: float) -> None:
    """Strict variant of normalize_fractions for callers that must not clamp."""
    for name, value in (("correct", correct), ("wrong", wrong)):
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise PreconditionViolation(f"{name} fraction must be between 0.0 and 1.0, got {value}")
    if correct + wrong > 1.0:
        raise PreconditionViolation(
            f"fractions must not exceed a full circle, got {correct} + {wrong}")


def compute_chart_geometry(correct: float, wrong: float, style: ChartStyle) -> ChartGeometry:
    """Maps two fractions to the background ring and the two segment arcs."""
    correct, wrong = normalize_fractions(correct, wrong)

    angle_correct = TWO_PI * correct
    angle_wrong = TWO_PI * wrong

    background = ArcSpan(START_ANGLE, TWO_PI, style.background_stroke_width,
                         style.background_color, CAP_FLAT)

    correct_arc = None
    if angle_correct > 0:
        correct_arc = ArcSpan(START_ANGLE, angle_correct, style.stroke_width, style.correct_color)

    wrong_arc = None
    if angle_wrong > 0:
        wrong_arc = ArcSpan(START_ANGLE + angle_correct, angle_wrong,
                            style.stroke_width, style.wrong_color)

    shadow = None
    if style.has_shadow and correct_arc is not None:
        shadow = ShadowArc(correct_arc._replace(color="#000000"), SHADOW_ALPHA, SHADOW_BLUR_RADIUS)

    return ChartGeometry(correct, wrong, background, correct_arc, wrong_arc, shadow)


def to_qt_angles(start_angle: float, sweep_angle: float) -> tuple[int, int]:
    """
    Converts clockwise radians into QPainter.drawArc() arguments.

    Qt measures in 1/16th of a degree, counter-clockwise, so both values flip
    sign. A non-zero sweep never rounds down to 0, which Qt would draw as
    nothing while the geometry says something is visible.
    """
    start_16th = round(-math.degrees(start_angle) * 16)
    span_16th = round(-math.degrees(sweep_angle) * 16)
    if span_16th == 0 and sweep_angle > 0:
        span_16th = -1
    return start_16th, span_16th
