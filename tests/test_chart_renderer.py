import pytest

from quiz_chart.core.animation import AnimationFrame, ChartAnimationDriver
from quiz_chart.core.chart_renderer import ChartRenderer, percentage_label
from quiz_chart.core.chart_style import ChartStyle
from quiz_chart.core.quiz_result import QuizResult


@pytest.mark.parametrize("fraction, expected", [
    (0.0, "0%"),
    (0.5, "50%"),
    (0.8, "80%"),
    (0.75, "75%"),
    (0.005, "1%"),    # half rounds away from zero
    (0.0049, "0%"),
    (0.125, "13%"),
    (29 / 200, "15%"),
    (0.145, "15%"),
    (0.285, "29%"),
    (1.0, "100%"),
    (float("nan"), "0%"),
])
def test_percentage_label(fraction, expected):
    assert percentage_label(fraction) == expected


def test_render_skips_identical_frames(style):
    renderer = ChartRenderer(style)
    frame = AnimationFrame(0.3, 0.2, 0.5)

    assert renderer.should_repaint(frame)
    first = renderer.render(frame)
    assert first is not None
    assert first.label == "30%"
    assert renderer.last is first

    assert not renderer.should_repaint(frame)
    assert renderer.render(AnimationFrame(0.3, 0.2, 0.5)) is None
    assert renderer.last is first

    second = renderer.render(AnimationFrame(0.31, 0.2, 0.5))
    assert second is not None
    assert second.label == "31%"


def test_style_change_forces_render(style):
    renderer = ChartRenderer(style)
    frame = AnimationFrame(0.5, 0.5, 1.0)
    renderer.render(frame)

    renderer.set_style(style.copy_with(correct_color="#4CAF50"))
    primitives = renderer.render(frame)
    assert primitives is not None
    assert primitives.geometry.correct.color == "#4CAF50"


def test_reset_forgets_last_render(style):
    renderer = ChartRenderer(style)
    frame = AnimationFrame(0.5, 0.5, 1.0)
    renderer.render(frame)
    renderer.reset()
    assert renderer.last is None
    assert renderer.render(frame) is not None


def test_label_hidden_when_disabled():
    renderer = ChartRenderer(ChartStyle(show_percentage=False))
    assert renderer.render(AnimationFrame(0.5, 0.5, 1.0)).label is None


def test_label_follows_animating_value(style):
    renderer = ChartRenderer(style)
    driver = ChartAnimationDriver()
    driver.start(0.8, 1000)
    labels = [renderer.build(driver.on_tick(ms)).label for ms in (0, 500, 1000)]
    assert labels[0] == "0%"
    assert labels[1] == "40%"
    assert labels[2] == "80%"


@pytest.mark.parametrize("correct, total, expected", [
    (5, 10, "50%"),
    (8, 10, "80%"),
    (0, 0, "0%"),
    (9, 12, "75%"),
])
def test_settled_label_for_results(style, correct, total, expected):
    result = QuizResult(correct, total, 0)
    driver = ChartAnimationDriver()
    driver.start(result.percentage_correct, style.animation_duration_ms)
    frame = driver.on_tick(style.animation_duration_ms)
    assert ChartRenderer(style).render(frame).label == expected
