# core/quiz_result.py
"""
Quiz outcome value object.

Holds the raw counts of a finished quiz and derives the percentages the
chart animates towards. Instances are validated on construction and never
change afterwards; use copy_with() to get a modified result.
"""
import dataclasses
from dataclasses import dataclass

from .errors import InvalidArgument


def _require_int(name, value):
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")


def format_duration(seconds: int) -> str:
    """
    Formats a duration as zero-padded MM:SS.

    The minutes field keeps growing past 99 (e.g. 6000 -> '100:00').
    """
    _require_int("seconds", seconds)
    if seconds < 0:
        raise InvalidArgument(f"seconds cannot be negative, got {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


@dataclass(frozen=True)
class QuizResult:
    """
    The result of one quiz attempt.

    correct_answers_count must lie in [0, total_questions]. A quiz with no
    questions is valid and scores 0% correct, 100% wrong.

    Raises InvalidArgument if any count or the duration is out of range.
    """
    correct_answers_count: int
    total_questions: int
    duration_in_seconds: int
    subject_name: str = ""

    def __post_init__(self):
        _require_int("total_questions", self.total_questions)
        _require_int("correct_answers_count", self.correct_answers_count)
        _require_int("duration_in_seconds", self.duration_in_seconds)

        if self.total_questions < 0:
            raise InvalidArgument(
                f"total_questions must be non-negative, got {self.total_questions}")
        if self.correct_answers_count < 0:
            raise InvalidArgument(
                f"correct_answers_count cannot be negative, got {self.correct_answers_count}")
        if self.correct_answers_count > self.total_questions:
            raise InvalidArgument(
                f"correct_answers_count ({self.correct_answers_count}) cannot exceed "
                f"total_questions ({self.total_questions})")
        if self.duration_in_seconds < 0:
            raise InvalidArgument(
                f"duration_in_seconds cannot be negative, got {self.duration_in_seconds}")
        if not isinstance(self.subject_name, str):
            raise InvalidArgument(f"subject_name must be a string, got {self.subject_name!r}")

    # --- Derived values ---
    @property
    def percentage_correct(self) -> float:
        """Fraction of correct answers in [0, 1]; 0.0 for an empty quiz."""
        if self.total_questions > 0:
            return self.correct_answers_count / self.total_questions
        return 0.0

    @property
    def percentage_wrong(self) -> float:
        return 1.0 - self.percentage_correct

    @property
    def incorrect_answers_count(self) -> int:
        return self.total_questions - self.correct_answers_count

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_in_seconds)

    def copy_with(self, **changes) -> "QuizResult":
        """Returns a new, re-validated result with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Plain mapping of raw and derived fields for external consumers."""
        return {
            "correctAnswersCount": self.correct_answers_count,
            "totalQuestions": self.total_questions,
            "durationInSeconds": self.duration_in_seconds,
            "subjectName": self.subject_name,
            "percentageCorrect": self.percentage_correct,
            "percentageWrong": self.percentage_wrong,
            "incorrectAnswersCount": self.incorrect_answers_count,
            "formattedDuration": self.formatted_duration,
        }

    def __str__(self):
        return (f"QuizResult(subject: {self.subject_name}, "
                f"score: {self.percentage_correct * 100:.1f}%, "
                f"correct: {self.correct_answers_count}/{self.total_questions}, "
                f"time: {self.formatted_duration})")
