# ui/results_page.py
"""
Defines the results page: optional custom header, the animated chart,
a legend, the statistics card, the "view answers" button and an optional
custom footer.
"""
import logging
from typing import Callable, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFrame, QScrollArea
)
from PyQt6.QtCore import Qt

from ..core.chart_style import ResultPageStyle
from ..core.quiz_result import QuizResult
from .animated_quiz_chart import AnimatedQuizChart
from .components import _legend_item, _stat_row, _make_font

logger = logging.getLogger(__name__)

# Builders receive the validated result and return extra content (or None).
SectionBuilder = Callable[[QuizResult], Optional[QWidget]]

STAT_TOTAL = "Total Questions"
STAT_CORRECT = "Correct"
STAT_INCORRECT = "Incorrect"
STAT_TIME = "Time"


class ResultsPage(QWidget):
    """
    Pre-styled page showing a QuizResult around an AnimatedQuizChart.
    on_view_answers is called with no arguments when the button is clicked.
    """

    def __init__(self, quiz_result: QuizResult, on_view_answers: Callable[[], None],
                 header_builder: SectionBuilder | None = None,
                 footer_builder: SectionBuilder | None = None,
                 style: ResultPageStyle | None = None,
                 parent=None):
        super().__init__(parent)
        self.quiz_result = quiz_result
        self.on_view_answers = on_view_answers
        self.header_builder = header_builder
        self.footer_builder = footer_builder
        self.page_style = style or ResultPageStyle()

        self.chart = None
        self.header_widget = None
        self.footer_widget = None
        self.view_answers_button = None
        self.legend_labels = []
        self._stat_labels = {}
        self._content = None

        self._init_ui()

    def _init_ui(self):
        """Initializes the page UI."""
        page_layout = QVBoxLayout(self)
        page_layout.setContentsMargins(0, 0, 0, 0)
        self.setObjectName("resultsPage")
        self.setStyleSheet(f"#resultsPage {{ background-color: {self.page_style.background_color}; }}")

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        page_layout.addWidget(self.scroll_area)

        self._build_content()

    def _build_content(self):
        ps = self.page_style
        result = self.quiz_result

        if self.chart is not None:
            self.chart.dispose()

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(ps.horizontal_padding, 0, ps.horizontal_padding, 0)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # --- Custom Header ---
        self.header_widget = self.header_builder(result) if self.header_builder else None
        if self.header_widget is not None:
            layout.addWidget(self.header_widget)

        layout.addSpacing(45)

        # --- Chart ---
        self.chart = AnimatedQuizChart(result.correct_answers_count, result.total_questions,
                                       style=ps.chart_style())
        layout.addWidget(self.chart, alignment=Qt.AlignmentFlag.AlignHCenter)

        layout.addSpacing(45)

        # --- Legend ---
        legend_layout = QHBoxLayout()
        legend_layout.setSpacing(20)
        legend_layout.addStretch(1)
        correct_item, correct_label = _legend_item("Correct", ps.correct_color,
                                                   ps.legend_font_size, ps.text_color)
        wrong_item, wrong_label = _legend_item("Incorrect", ps.wrong_color,
                                               ps.legend_font_size, ps.text_color)
        legend_layout.addWidget(correct_item)
        legend_layout.addWidget(wrong_item)
        legend_layout.addStretch(1)
        layout.addLayout(legend_layout)
        self.legend_labels = [correct_label, wrong_label]

        layout.addSpacing(25)

        # --- Statistics Card ---
        card = QFrame()
        card.setObjectName("statsCard")
        card.setStyleSheet(f"#statsCard {{ background-color: {ps.card_color}; border-radius: 19px; }}")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(20, 20, 20, 20)
        card_layout.setSpacing(10)
        self._stat_labels = {}
        for title, value in self._stat_rows(result):
            row, value_label = _stat_row(title, value, ps.title_font_size,
                                         ps.value_font_size, ps.text_color)
            card_layout.addWidget(row)
            self._stat_labels[title] = value_label
        layout.addWidget(card)

        layout.addSpacing(80)

        # --- Primary Action Button ---
        self.view_answers_button = QPushButton(ps.view_answers_text)
        self.view_answers_button.setObjectName("viewAnswersButton")
        self.view_answers_button.setFont(_make_font(ps.title_font_size, bold=True))
        self.view_answers_button.setFixedHeight(50)
        self.view_answers_button.clicked.connect(self._on_view_answers_clicked)
        layout.addWidget(self.view_answers_button)

        layout.addSpacing(25)

        # --- Custom Footer ---
        self.footer_widget = self.footer_builder(result) if self.footer_builder else None
        if self.footer_widget is not None:
            layout.addWidget(self.footer_widget)

        layout.addStretch(1)

        old_content = self.scroll_area.takeWidget()
        if old_content is not None:
            old_content.deleteLater()
        self.scroll_area.setWidget(content)
        self._content = content

    @staticmethod
    def _stat_rows(result: QuizResult):
        return [
            (STAT_TOTAL, str(result.total_questions)),
            (STAT_CORRECT, str(result.correct_answers_count)),
            (STAT_INCORRECT, str(result.incorrect_answers_count)),
            (STAT_TIME, result.formatted_duration),
        ]

    def _on_view_answers_clicked(self):
        # clicked(bool) carries an argument; the callback takes none
        if self.on_view_answers is not None:
            self.on_view_answers()

    def stat_values(self) -> dict:
        """Currently displayed statistics, keyed by row title."""
        return {title: label.text() for title, label in self._stat_labels.items()}

    def display_result(self, quiz_result: QuizResult):
        """Rebuilds the page for another result, with a fresh chart animation."""
        logger.info("ResultsPage: displaying %s", quiz_result)
        self.quiz_result = quiz_result
        self._build_content()

    def closeEvent(self, event):
        if self.chart is not None:
            self.chart.dispose()
        super().closeEvent(event)
