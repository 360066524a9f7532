# core/chart_renderer.py
"""
Combines animation frames with the arc geometry into drawable primitives.
"""
import math
from typing import NamedTuple, Optional

from .animation import AnimationFrame
from .arc_geometry import ChartGeometry, compute_chart_geometry
from .chart_style import ChartStyle


def percentage_label(fraction: float) -> str:
    """
    Formats a fraction as a whole percentage, e.g. 0.755 -> '76%'.

    Rounds half away from zero. NaN is shown as 0%.
    """
    if math.isnan(fraction):
        return "0%"
    scaled = fraction * 100
    # snap away binary noise first: 29/200 * 100 is 14.499999999999998
    rounded = math.floor(round(abs(scaled), 9) + 0.5)
    return f"{-rounded if scaled < 0 else rounded}%"


class ChartPrimitives(NamedTuple):
    geometry: ChartGeometry
    label: Optional[str]


class ChartRenderer:
    """
    Turns animation frames into ChartPrimitives for one chart.

    render() returns None when the frame would produce the same picture as
    the last one rendered, so callers can skip repainting.
    """

    def __init__(self, style: ChartStyle):
        self._style = style
        self._last_key = None
        self._last: Optional[ChartPrimitives] = None

    @property
    def style(self) -> ChartStyle:
        return self._style

    @property
    def last(self) -> Optional[ChartPrimitives]:
        return self._last

    def set_style(self, style: ChartStyle):
        if style != self._style:
            self._style = style
            self._last_key = None

    def should_repaint(self, frame: AnimationFrame) -> bool:
        return self._render_key(frame) != self._last_key

    def render(self, frame: AnimationFrame) -> Optional[ChartPrimitives]:
        key = self._render_key(frame)
        if key == self._last_key:
            return None
        self._last_key = key
        self._last = self.build(frame)
        return self._last

    def build(self, frame: AnimationFrame) -> ChartPrimitives:
        """Builds primitives for a frame without touching the cache."""
        geometry = compute_chart_geometry(frame.correct_fraction, frame.wrong_fraction, self._style)
        label = percentage_label(frame.correct_fraction) if self._style.show_percentage else None
        return ChartPrimitives(geometry, label)

    def reset(self):
        self._last_key = None
        self._last = None

    def _render_key(self, frame: AnimationFrame):
        return (frame.correct_fraction, frame.wrong_fraction, self._style)
