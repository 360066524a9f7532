# core/chart_style.py
# Default configuration and style objects for the chart and results page.

import os
import re
import dataclasses
from dataclasses import dataclass, fields

from dotenv import load_dotenv

from .errors import InvalidArgument

# --- Default Configuration & Constants ---
DEFAULT_CORRECT_COLOR = "#2196F3"      # material blue
DEFAULT_WRONG_COLOR = "#FFEB3B"        # material yellow
DEFAULT_TRACK_COLOR = "#9E9E9E"        # material grey
DEFAULT_LIGHT_TRACK_COLOR = "#E0E0E0"  # grey 300, used on the results page
DEFAULT_LABEL_COLOR = "#000000"
DEFAULT_PAGE_BACKGROUND = "#FFFFFF"
DEFAULT_CARD_COLOR = "#FFFFFF"

DEFAULT_STROKE_WIDTH = 20.0
DEFAULT_BACKGROUND_STROKE_WIDTH = 4.0
DEFAULT_CHART_SIZE = 180
DEFAULT_ANIMATION_DURATION_MS = 3000
DEFAULT_LABEL_FONT_SIZE = 24

# Soft shadow under the correct arc, only for thick strokes
SHADOW_STROKE_THRESHOLD = 15.0
SHADOW_ALPHA = 26
SHADOW_BLUR_RADIUS = 2.0

ENV_PREFIX = "QUIZ_CHART_"

_COLOR_RE = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def _check_color(name, value):
    if not isinstance(value, str) or not _COLOR_RE.match(value):
        raise InvalidArgument(f"{name} must be a '#RRGGBB' or '#AARRGGBB' string, got {value!r}")


def _check_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value > 0:
        raise InvalidArgument(f"{name} must be positive, got {value!r}")


@dataclass(frozen=True)
class ChartStyle:
    """
    Visual parameters for the animated donut chart.

    Widths and size are logical pixels. Colors are hex strings so the style
    stays independent of any Qt object.
    """
    stroke_width: float = DEFAULT_STROKE_WIDTH
    background_stroke_width: float = DEFAULT_BACKGROUND_STROKE_WIDTH
    correct_color: str = DEFAULT_CORRECT_COLOR
    wrong_color: str = DEFAULT_WRONG_COLOR
    background_color: str = DEFAULT_TRACK_COLOR
    size: int = DEFAULT_CHART_SIZE
    animation_duration_ms: int = DEFAULT_ANIMATION_DURATION_MS
    show_percentage: bool = True
    label_font_size: int = DEFAULT_LABEL_FONT_SIZE
    label_color: str = DEFAULT_LABEL_COLOR

    def __post_init__(self):
        _check_positive("stroke_width", self.stroke_width)
        _check_positive("background_stroke_width", self.background_stroke_width)
        _check_positive("size", self.size)
        _check_positive("label_font_size", self.label_font_size)
        if isinstance(self.animation_duration_ms, bool) or not isinstance(self.animation_duration_ms, int) \
                or self.animation_duration_ms < 0:
            raise InvalidArgument(
                f"animation_duration_ms must be a non-negative integer, got {self.animation_duration_ms!r}")
        for name in ("correct_color", "wrong_color", "background_color", "label_color"):
            _check_color(name, getattr(self, name))

    @property
    def has_shadow(self) -> bool:
        return self.stroke_width > SHADOW_STROKE_THRESHOLD

    def copy_with(self, **changes) -> "ChartStyle":
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ResultPageStyle:
    """Colors, fonts and spacing of the results page."""
    correct_color: str = DEFAULT_CORRECT_COLOR
    wrong_color: str = DEFAULT_WRONG_COLOR
    background_color: str = DEFAULT_PAGE_BACKGROUND
    chart_track_color: str = DEFAULT_LIGHT_TRACK_COLOR
    text_color: str = DEFAULT_LABEL_COLOR
    card_color: str = DEFAULT_CARD_COLOR
    title_font_size: int = 16
    value_font_size: int = 16
    legend_font_size: int = 14
    horizontal_padding: int = 20
    chart_size: int = DEFAULT_CHART_SIZE
    view_answers_text: str = "See the answers"

    def __post_init__(self):
        for name in ("correct_color", "wrong_color", "background_color",
                     "chart_track_color", "text_color", "card_color"):
            _check_color(name, getattr(self, name))
        for name in ("title_font_size", "value_font_size", "legend_font_size", "chart_size"):
            _check_positive(name, getattr(self, name))
        if self.horizontal_padding < 0:
            raise InvalidArgument(f"horizontal_padding cannot be negative, got {self.horizontal_padding}")

    def chart_style(self, **overrides) -> ChartStyle:
        """Builds the ChartStyle used by the page's embedded chart."""
        params = dict(
            correct_color=self.correct_color,
            wrong_color=self.wrong_color,
            background_color=self.chart_track_color,
            size=self.chart_size,
            label_color=self.text_color,
        )
        params.update(overrides)
        return ChartStyle(**params)


def _parse_env_value(name, raw, default):
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise InvalidArgument(f"{name}: expected a boolean, got {raw!r}")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            raise InvalidArgument(f"{name}: expected an integer, got {raw!r}") from None
    if isinstance(default, float):
        try:
            return float(raw)
        except ValueError:
            raise InvalidArgument(f"{name}: expected a number, got {raw!r}") from None
    return raw.strip()


def load_style_from_env(prefix=ENV_PREFIX, dotenv_path=None, base=None) -> ChartStyle:
    """
    Builds a ChartStyle from environment variables.

    A .env file is loaded first (existing variables win). Each field maps to
    PREFIX + FIELD_NAME in upper case, e.g. QUIZ_CHART_STROKE_WIDTH=25.
    Fields without a variable keep the value from `base` (or the defaults).
    """
    load_dotenv(dotenv_path=dotenv_path)
    base = base or ChartStyle()

    overrides = {}
    for field in fields(ChartStyle):
        var_name = prefix + field.name.upper()
        raw = os.getenv(var_name)
        if raw is None or raw == "":
            continue
        overrides[field.name] = _parse_env_value(var_name, raw, getattr(base, field.name))

    return base.copy_with(**overrides) if overrides else base
