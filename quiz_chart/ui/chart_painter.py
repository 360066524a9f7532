# ui/chart_painter.py
"""
QPainter drawing of ChartPrimitives.
Arcs are drawn in geometry draw order with rounded caps; the ring has flat caps.
"""
from PyQt6.QtGui import QPainter, QColor, QPen, QFont, QBrush
from PyQt6.QtCore import Qt, QRectF

from ..core.arc_geometry import ArcSpan, ShadowArc, CAP_ROUND, to_qt_angles

LABEL_DISC_FACTOR = 0.75
LABEL_DISC_OPACITY = 0.2


def _arc_rect(rect: QRectF, stroke_width: float) -> QRectF:
    """Square rect centered in `rect` whose circle keeps the stroke inside the widget."""
    side = min(rect.width(), rect.height())
    inset = stroke_width / 2.0
    square = QRectF(0, 0, side, side)
    square.moveCenter(rect.center())
    square.adjust(inset, inset, -inset, -inset)
    return square


def _make_pen(color: QColor, width: float, cap: str) -> QPen:
    pen = QPen(color)
    pen.setWidthF(width)
    if cap == CAP_ROUND:
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    else:
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    return pen


def _draw_arc(painter: QPainter, arc_rect: QRectF, arc: ArcSpan, color: QColor, width: float):
    painter.setPen(_make_pen(color, width, arc.cap))
    if arc.is_full_circle:
        painter.drawEllipse(arc_rect)
        return
    start_16th, span_16th = to_qt_angles(arc.start_angle, arc.sweep_angle)
    painter.drawArc(arc_rect, start_16th, span_16th)


def _draw_shadow(painter: QPainter, arc_rect: QRectF, shadow: ShadowArc):
    # QPainter has no blur mask: a wider stroke at half alpha stands in for the
    # blurred fringe, then the arc itself at full shadow alpha.
    fringe = QColor(shadow.arc.color)
    fringe.setAlpha(shadow.alpha // 2)
    _draw_arc(painter, arc_rect, shadow.arc, fringe, shadow.arc.stroke_width + 2 * shadow.blur_radius)

    core = QColor(shadow.arc.color)
    core.setAlpha(shadow.alpha)
    _draw_arc(painter, arc_rect, shadow.arc, core, shadow.arc.stroke_width)


def paint_chart(painter: QPainter, rect: QRectF, primitives, style):
    """Paints the ring, segments and optional centre label into `rect`."""
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    geometry = primitives.geometry

    # All arcs share one circle, sized for the widest stroke.
    arc_rect = _arc_rect(rect, max(style.stroke_width, style.background_stroke_width))

    for item in geometry.draw_order():
        if isinstance(item, ShadowArc):
            _draw_shadow(painter, arc_rect, item)
        else:
            _draw_arc(painter, arc_rect, item, QColor(item.color), item.stroke_width)

    if primitives.label is None:
        return

    side = min(rect.width(), rect.height()) * LABEL_DISC_FACTOR
    disc = QRectF(0, 0, side, side)
    disc.moveCenter(rect.center())
    disc_color = QColor(style.background_color)
    disc_color.setAlphaF(LABEL_DISC_OPACITY)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QBrush(disc_color))
    painter.drawEllipse(disc)

    font = QFont()
    font.setPixelSize(max(8, int(style.label_font_size)))
    font.setWeight(QFont.Weight.DemiBold)
    painter.setFont(font)
    painter.setPen(QPen(QColor(style.label_color)))
    painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, primitives.label)
