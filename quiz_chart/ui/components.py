# ui/components.py
"""
Shared UI helper functions for the results page.
"""
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt6.QtGui import QFont
from PyQt6.QtCore import Qt

LEGEND_DOT_DIAMETER = 9


def _make_font(point_size, bold=False):
    font = QFont()
    font.setPointSize(point_size)
    if bold:
        font.setWeight(QFont.Weight.DemiBold)
    return font


def _legend_item(text, color, font_size, text_color):
    """A colored dot followed by a label, e.g. the 'Correct' legend entry."""
    container = QWidget()
    layout = QHBoxLayout(container)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(10)

    dot = QLabel()
    dot.setObjectName("legendDot")
    dot.setFixedSize(LEGEND_DOT_DIAMETER, LEGEND_DOT_DIAMETER)
    dot.setStyleSheet(f"background-color: {color}; border-radius: {LEGEND_DOT_DIAMETER // 2}px;")

    label = QLabel(text)
    label.setFont(_make_font(font_size, bold=True))
    label.setStyleSheet(f"color: {text_color};")

    layout.addWidget(dot)
    layout.addWidget(label)
    return container, label


def _stat_row(title, value, title_size, value_size, text_color):
    """Title on the left, value on the right. Returns (row, value_label)."""
    row = QWidget()
    layout = QHBoxLayout(row)
    layout.setContentsMargins(0, 0, 0, 0)

    title_label = QLabel(title)
    title_label.setFont(_make_font(title_size))
    title_label.setStyleSheet(f"color: {text_color};")

    value_label = QLabel(value)
    value_label.setFont(_make_font(value_size, bold=True))
    value_label.setStyleSheet(f"color: {text_color};")
    value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

    layout.addWidget(title_label)
    layout.addStretch(1)
    layout.addWidget(value_label)
    return row, value_label
