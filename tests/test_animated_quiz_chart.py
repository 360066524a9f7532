import pytest
from PyQt6.QtGui import QImage, QPainter, QColor
from PyQt6.QtCore import QRectF

from quiz_chart.core.animation import AnimationState
from quiz_chart.core.chart_style import ChartStyle
from quiz_chart.core.errors import InvalidArgument
from quiz_chart.ui.animated_quiz_chart import AnimatedQuizChart
from quiz_chart.ui.chart_painter import paint_chart


@pytest.mark.parametrize("correct, total, expected", [
    (5, 10, "50%"),
    (8, 10, "80%"),
    (0, 0, "0%"),
    (9, 12, "75%"),
])
def test_label_settles_on_score(qapp, correct, total, expected):
    chart = AnimatedQuizChart(correct, total, autostart=False)
    assert chart.label_text() == "0%"
    chart.finish()
    assert chart.label_text() == expected
    assert chart.driver.is_complete
    chart.dispose()


def test_starts_animating_immediately(qapp):
    chart = AnimatedQuizChart(7, 10, style=ChartStyle(animation_duration_ms=1000))
    assert chart.is_animating()
    assert chart.driver.state is AnimationState.ANIMATING
    assert chart.target_fractions == (0.7, 1.0 - 0.7)
    chart.dispose()
    assert not chart.is_animating()
    assert chart.driver.state is AnimationState.DISPOSED


def test_advance_reports_changes_and_finishes(qapp):
    chart = AnimatedQuizChart(1, 2, style=ChartStyle(animation_duration_ms=1000))
    finished = []
    chart.animationFinished.connect(lambda: finished.append(True))

    assert chart.advance(500)
    assert chart.label_text() == "25%"
    assert not chart.advance(500)  # same frame, nothing to repaint
    assert chart.advance(1000)
    assert chart.label_text() == "50%"
    assert not chart.is_animating()
    assert finished == [True]

    chart.advance(2000)
    assert finished == [True]


def test_disposed_chart_ignores_ticks(qapp):
    chart = AnimatedQuizChart(3, 4, style=ChartStyle(animation_duration_ms=1000))
    chart.advance(100)
    label = chart.label_text()
    chart.dispose()
    assert chart.advance(1000) is False
    assert chart.label_text() == label


def test_set_counts_uses_a_new_driver(qapp):
    chart = AnimatedQuizChart(2, 10, autostart=False)
    old_driver = chart.driver
    chart.set_counts(6, 10, autostart=False)
    assert chart.driver is not old_driver
    assert old_driver.state is AnimationState.DISPOSED
    chart.finish()
    assert chart.label_text() == "60%"

    same_driver = chart.driver
    chart.set_counts(6, 10, autostart=False)
    assert chart.driver is same_driver
    chart.dispose()


def test_invalid_counts_are_rejected(qapp):
    with pytest.raises(InvalidArgument):
        AnimatedQuizChart(11, 10)


def test_hidden_label(qapp):
    chart = AnimatedQuizChart(5, 10, style=ChartStyle(show_percentage=False), autostart=False)
    chart.finish()
    assert chart.label_text() is None
    chart.dispose()


def test_widget_size_follows_style(qapp):
    chart = AnimatedQuizChart(5, 10, style=ChartStyle(size=220), autostart=False)
    assert chart.width() == 220
    assert chart.height() == 220
    chart.dispose()


def test_paint_chart_draws_segments(qapp):
    style = ChartStyle(size=200, correct_color="#00FF00", wrong_color="#FF0000", show_percentage=False)
    chart = AnimatedQuizChart(1, 2, style=style, autostart=False)
    chart.finish()

    image = QImage(200, 200, QImage.Format.Format_ARGB32)
    image.fill(QColor("#FFFFFF"))
    painter = QPainter(image)
    paint_chart(painter, QRectF(0, 0, 200, 200), chart.primitives, style)
    painter.end()

    # correct half runs clockwise from 12 o'clock through 3 o'clock
    right = image.pixelColor(200 - 10, 100)
    left = image.pixelColor(10, 100)
    assert right.green() > 200 and right.red() < 60
    assert left.red() > 200 and left.green() < 60
    chart.dispose()


def test_grab_renders_without_error(qapp):
    chart = AnimatedQuizChart(7, 10, autostart=False)
    chart.finish()
    pixmap = chart.grab()
    assert not pixmap.isNull()
    chart.dispose()


def test_close_stops_timer_and_disposes_driver(qapp):
    chart = AnimatedQuizChart(4, 10, style=ChartStyle(animation_duration_ms=1000))
    chart.show()
    assert chart.is_animating()

    chart.close()
    assert chart.driver.state is AnimationState.DISPOSED
    assert not chart.is_animating()
    assert chart.advance(1000) is False
