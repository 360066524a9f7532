import math

import pytest

from quiz_chart.core.arc_geometry import (
    START_ANGLE, TWO_PI, CAP_FLAT, CAP_ROUND, ShadowArc,
    check_fractions, compute_chart_geometry, normalize_fractions, to_qt_angles,
)
from quiz_chart.core.chart_style import ChartStyle, SHADOW_ALPHA, SHADOW_BLUR_RADIUS
from quiz_chart.core.errors import PreconditionViolation


def test_arcs_for_seventy_thirty(style):
    geometry = compute_chart_geometry(0.7, 0.3, style)

    assert geometry.correct.start_angle == -math.pi / 2
    assert geometry.correct.sweep_angle == pytest.approx(0.7 * TWO_PI)
    assert geometry.wrong.start_angle == pytest.approx(-math.pi / 2 + 0.7 * TWO_PI)
    assert geometry.wrong.sweep_angle == pytest.approx(0.3 * TWO_PI)
    assert geometry.correct.sweep_angle + geometry.wrong.sweep_angle == pytest.approx(TWO_PI)
    assert geometry.wrong.start_angle == geometry.correct.end_angle


def test_wrong_fraction_is_reduced_when_sum_exceeds_one():
    correct, wrong = normalize_fractions(0.9, 0.5)
    assert correct == 0.9
    assert wrong == pytest.approx(0.1)
    assert correct + wrong == 1.0


@pytest.mark.parametrize("raw, expected", [
    ((-0.2, 0.4), (0.0, 0.4)),
    ((1.3, 0.2), (1.0, 0.0)),
    ((0.3, -1.0), (0.3, 0.0)),
    ((float("nan"), 0.5), (0.0, 0.5)),
])
def test_fractions_are_clamped(raw, expected):
    assert normalize_fractions(*raw) == expected


def test_zero_fraction_draws_nothing(style):
    geometry = compute_chart_geometry(0.0, 1.0, style)
    assert geometry.correct is None
    assert geometry.shadow is None
    assert geometry.wrong.start_angle == START_ANGLE
    assert geometry.wrong.sweep_angle == TWO_PI

    empty = compute_chart_geometry(0.0, 0.0, style)
    assert empty.correct is None
    assert empty.wrong is None
    assert empty.draw_order() == [empty.background]


def test_full_correct_is_a_full_circle(style):
    geometry = compute_chart_geometry(1.0, 0.0, style)
    assert geometry.correct.is_full_circle
    assert geometry.wrong is None


def test_background_ring_uses_its_own_style():
    style = ChartStyle(background_stroke_width=6.0, background_color="#CCCCCC")
    ring = compute_chart_geometry(0.5, 0.5, style).background
    assert ring.sweep_angle == TWO_PI
    assert ring.stroke_width == 6.0
    assert ring.color == "#CCCCCC"
    assert ring.cap == CAP_FLAT


def test_segments_use_round_caps(style):
    geometry = compute_chart_geometry(0.4, 0.6, style)
    assert geometry.correct.cap == CAP_ROUND
    assert geometry.wrong.cap == CAP_ROUND
    assert geometry.correct.color == style.correct_color
    assert geometry.wrong.color == style.wrong_color


def test_shadow_only_for_thick_strokes():
    thick = compute_chart_geometry(0.6, 0.4, ChartStyle(stroke_width=20.0))
    assert thick.shadow is not None
    assert thick.shadow.alpha == SHADOW_ALPHA
    assert thick.shadow.blur_radius == SHADOW_BLUR_RADIUS
    assert thick.shadow.arc.start_angle == thick.correct.start_angle
    assert thick.shadow.arc.sweep_angle == thick.correct.sweep_angle
    assert thick.shadow.arc.stroke_width == 20.0

    thin = compute_chart_geometry(0.6, 0.4, ChartStyle(stroke_width=15.0))
    assert thin.shadow is None


def test_draw_order(style):
    geometry = compute_chart_geometry(0.6, 0.4, style)
    order = geometry.draw_order()
    assert order[0] is geometry.background
    assert isinstance(order[1], ShadowArc)
    assert order[2:] == [geometry.correct, geometry.wrong]


def test_geometry_is_pure(style):
    first = compute_chart_geometry(0.35, 0.65, style)
    second = compute_chart_geometry(0.35, 0.65, style)
    assert first == second
    assert hash(first) == hash(second)


def test_check_fractions():
    check_fractions(0.7, 0.3)
    with pytest.raises(PreconditionViolation):
        check_fractions(1.2, 0.0)
    with pytest.raises(PreconditionViolation):
        check_fractions(0.6, 0.6)
    with pytest.raises(PreconditionViolation):
        check_fractions(float("nan"), 0.0)


def test_to_qt_angles():
    # 12 o'clock is +90 degrees in Qt; clockwise sweeps are negative
    assert to_qt_angles(START_ANGLE, math.pi / 2) == (90 * 16, -90 * 16)
    assert to_qt_angles(START_ANGLE, TWO_PI) == (90 * 16, -360 * 16)
    assert to_qt_angles(0.0, 1e-6) == (0, -1)
    assert to_qt_angles(0.0, 0.0) == (0, 0)
