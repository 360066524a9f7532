# main.py
# Demo application: an adjustable chart and the results page it leads to.

import sys
import os
import logging

# --- PyQt6 Imports ---
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel, QSlider,
    QPushButton, QStackedWidget, QGroupBox, QMessageBox
)
from PyQt6.QtCore import Qt

# --- Project Imports ---
from .core.chart_style import load_style_from_env, ResultPageStyle
from .core.errors import InvalidArgument
from .core.quiz_result import QuizResult
from .ui.animated_quiz_chart import AnimatedQuizChart
from .ui.results_page import ResultsPage

logger = logging.getLogger(__name__)

# --- Constants ---
QSS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "ui", "styles.qss")
DEMO_DURATION_SECONDS = 150
DEMO_SUBJECT = "Demo Quiz"
MAX_DEMO_QUESTIONS = 20

DEMO_PAGE_INDEX = 0
RESULTS_PAGE_INDEX = 1


def load_stylesheet(filepath):
    """Loads QSS data from a file."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.warning("Stylesheet file not found at '%s'. Using default styles.", filepath)
        return ""
    except OSError as e:
        logger.warning("Could not load stylesheet from '%s': %s", filepath, e)
        return ""


class DemoWindow(QMainWindow):
    """Chart with sliders for the counts, plus the results page."""

    def __init__(self, chart_style, page_style=None):
        super().__init__()
        self.setWindowTitle("Animated Quiz Chart Demo")
        self.chart_style = chart_style
        self.page_style = page_style or ResultPageStyle(
            correct_color=chart_style.correct_color,
            wrong_color=chart_style.wrong_color,
        )
        self.correct_answers = 7
        self.total_questions = 10

        self.stacked_widget = QStackedWidget()
        self.setCentralWidget(self.stacked_widget)

        self.demo_page = self._create_demo_page()
        self.results_page = None
        self.stacked_widget.addWidget(self.demo_page)

    def _create_demo_page(self):
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.chart = AnimatedQuizChart(self.correct_answers, self.total_questions,
                                       style=self.chart_style)
        layout.addWidget(self.chart, alignment=Qt.AlignmentFlag.AlignHCenter)

        controls = QGroupBox("Adjust Values:")
        controls_layout = QVBoxLayout(controls)

        self.correct_label = QLabel()
        self.correct_slider = QSlider(Qt.Orientation.Horizontal)
        self.correct_slider.setRange(0, self.total_questions)
        self.correct_slider.setValue(self.correct_answers)
        self.correct_slider.valueChanged.connect(self._on_correct_changed)

        self.total_label = QLabel()
        self.total_slider = QSlider(Qt.Orientation.Horizontal)
        self.total_slider.setRange(1, MAX_DEMO_QUESTIONS)
        self.total_slider.setValue(self.total_questions)
        self.total_slider.valueChanged.connect(self._on_total_changed)

        controls_layout.addWidget(self.correct_label)
        controls_layout.addWidget(self.correct_slider)
        controls_layout.addWidget(self.total_label)
        controls_layout.addWidget(self.total_slider)
        layout.addWidget(controls)

        show_button = QPushButton("Show Results")
        show_button.setFixedHeight(40)
        show_button.clicked.connect(self._show_results)
        layout.addWidget(show_button)

        self._update_labels()
        return page

    def _update_labels(self):
        self.correct_label.setText(f"Correct Answers: {self.correct_answers}")
        self.total_label.setText(f"Total Questions: {self.total_questions}")

    def _on_correct_changed(self, value):
        self.correct_answers = value
        self._update_labels()
        self.chart.set_counts(self.correct_answers, self.total_questions)

    def _on_total_changed(self, value):
        self.total_questions = value
        if self.correct_answers > self.total_questions:
            self.correct_answers = self.total_questions
        # setRange clamps the slider value and may emit valueChanged
        self.correct_slider.blockSignals(True)
        self.correct_slider.setRange(0, self.total_questions)
        self.correct_slider.setValue(self.correct_answers)
        self.correct_slider.blockSignals(False)
        self._update_labels()
        self.chart.set_counts(self.correct_answers, self.total_questions)

    def _show_results(self):
        quiz_result = QuizResult(self.correct_answers, self.total_questions,
                                 DEMO_DURATION_SECONDS, DEMO_SUBJECT)
        if self.results_page is None:
            self.results_page = ResultsPage(
                quiz_result,
                on_view_answers=self._view_answers,
                header_builder=self._build_header,
                style=self.page_style,
            )
            self.stacked_widget.addWidget(self.results_page)
        else:
            self.results_page.display_result(quiz_result)
        self.stacked_widget.setCurrentIndex(RESULTS_PAGE_INDEX)

    def _build_header(self, quiz_result):
        title = QLabel(f"{quiz_result.subject_name} Results")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = title.font()
        font.setPointSize(20)
        font.setBold(True)
        title.setFont(font)
        return title

    def _view_answers(self):
        QMessageBox.information(self, "Answers", "Answer review is not part of this demo.")
        self.stacked_widget.setCurrentIndex(DEMO_PAGE_INDEX)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    q_app = QApplication(sys.argv)

    try:
        chart_style = load_style_from_env()
    except InvalidArgument as e:
        QMessageBox.critical(None, "Configuration Error", f"Invalid chart configuration:\n{e}")
        return 1

    style_sheet_content = load_stylesheet(QSS_FILE)
    if style_sheet_content:
        q_app.setStyleSheet(style_sheet_content)

    window = DemoWindow(chart_style)
    window.resize(420, 720)
    window.show()

    exit_code = q_app.exec()
    logger.info("Demo closed")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
