# core/animation.py
"""
Animation driver for the chart segments.

The driver is a small state machine (uninitialized -> animating -> completed,
and disposed from any state). The host calls on_tick() once per frame with
the time elapsed since the animation started; the driver answers with the
eased fractions for both segments. Both segments share one eased progress
value, so they always reach their targets on the same frame.
"""
import enum
import logging
from typing import Callable, NamedTuple, Optional

from PyQt6.QtCore import QEasingCurve

from .errors import PreconditionViolation

logger = logging.getLogger(__name__)

_EASE_IN_OUT = QEasingCurve(QEasingCurve.Type.InOutCubic)


def ease_in_out(t: float) -> float:
    """Symmetric ease-in-out curve; exact identity at 0 and 1."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return _EASE_IN_OUT.valueForProgress(t)


def lerp(begin: float, end: float, t: float) -> float:
    return begin + (end - begin) * t


class AnimationFrame(NamedTuple):
    correct_fraction: float
    wrong_fraction: float
    progress: float  # eased progress, 0..1


class AnimationState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    ANIMATING = "animating"
    COMPLETED = "completed"
    DISPOSED = "disposed"


FrameListener = Callable[[AnimationFrame], None]


class ChartAnimationDriver:
    """
    Tweens both chart segments from 0 to their targets over a fixed duration.

    A driver is bound to one set of targets: start() may be called once, and
    a new target needs a new driver. dispose() may be called at any time;
    afterwards on_tick() returns None and no listener is called again.
    """

    def __init__(self, on_frame: Optional[FrameListener] = None, *,
                 curve: Callable[[float], float] = ease_in_out):
        self._curve = curve
        self._listeners: list[FrameListener] = []
        if on_frame is not None:
            self._listeners.append(on_frame)

        self._state = AnimationState.UNINITIALIZED
        self._duration_ms = 0
        self._target_correct = 0.0
        self._target_wrong = 0.0
        self._frame = AnimationFrame(0.0, 0.0, 0.0)

    # --- Properties ---
    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def targets(self) -> tuple[float, float]:
        return self._target_correct, self._target_wrong

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def current_frame(self) -> AnimationFrame:
        return self._frame

    @property
    def is_active(self) -> bool:
        return self._state is AnimationState.ANIMATING

    @property
    def is_complete(self) -> bool:
        return self._state is AnimationState.COMPLETED

    # --- Listeners ---
    def add_listener(self, listener: FrameListener):
        if self._state is AnimationState.DISPOSED:
            raise PreconditionViolation("cannot add a listener to a disposed animation driver")
        self._listeners.append(listener)

    def remove_listener(self, listener: FrameListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Lifecycle ---
    def start(self, target_correct: float, duration_ms: int, target_wrong: Optional[float] = None):
        """
        Binds the driver to its targets and begins animating.

        target_wrong defaults to 1 - target_correct and is computed here,
        once, not on every frame.
        """
        if self._state is not AnimationState.UNINITIALIZED:
            raise PreconditionViolation(
                f"animation driver cannot be started in state '{self._state.value}'")
        if duration_ms < 0:
            raise PreconditionViolation(f"duration_ms must be non-negative, got {duration_ms}")

        self._target_correct = float(target_correct)
        self._target_wrong = 1.0 - self._target_correct if target_wrong is None else float(target_wrong)
        self._duration_ms = duration_ms
        self._frame = AnimationFrame(0.0, 0.0, 0.0)
        self._state = AnimationState.ANIMATING
        logger.debug("ChartAnimationDriver: started (correct=%.3f, wrong=%.3f, %d ms)",
                     self._target_correct, self._target_wrong, duration_ms)

    def on_tick(self, elapsed_ms: float) -> Optional[AnimationFrame]:
        """Advances to `elapsed_ms` after start and returns the frame for it."""
        if self._state is AnimationState.DISPOSED:
            return None
        if self._state is AnimationState.UNINITIALIZED:
            raise PreconditionViolation("animation driver ticked before start()")

        if self._duration_ms <= 0:
            t = 1.0
        else:
            t = min(max(elapsed_ms / self._duration_ms, 0.0), 1.0)

        eased = self._curve(t)
        if t >= 1.0:
            self._frame = AnimationFrame(self._target_correct, self._target_wrong, 1.0)
            if self._state is AnimationState.ANIMATING:
                self._state = AnimationState.COMPLETED
                logger.debug("ChartAnimationDriver: completed")
        else:
            self._frame = AnimationFrame(lerp(0.0, self._target_correct, eased),
                                         lerp(0.0, self._target_wrong, eased),
                                         eased)

        for listener in list(self._listeners):
            if self._state is AnimationState.DISPOSED:
                break  # a listener disposed the driver
            listener(self._frame)
        return self._frame

    def dispose(self):
        """Stops the animation and drops all listeners. Safe to call twice."""
        if self._state is AnimationState.DISPOSED:
            return
        self._listeners.clear()
        self._state = AnimationState.DISPOSED
        logger.debug("ChartAnimationDriver: disposed")
