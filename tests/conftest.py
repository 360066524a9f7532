"""Fixtures for the test suite."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from quiz_chart.core.chart_style import ChartStyle
from quiz_chart.core.quiz_result import QuizResult


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for every widget test."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def style() -> ChartStyle:
    return ChartStyle()


@pytest.fixture
def sample_result() -> QuizResult:
    return QuizResult(
        correct_answers_count=7,
        total_questions=10,
        duration_in_seconds=135,
        subject_name="Physics",
    )
