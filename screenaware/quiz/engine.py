"""Quiz session state machine: answer, navigate, submit, retake."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Sequence

from screenaware.quiz.questions import QUESTION_BANK
from screenaware.storage.local_storage import QUIZ_KEY, LocalStorage
from screenaware.types import QuizQuestion, QuizResult, utc_now_iso

LOGGER = logging.getLogger("screenaware.quiz")

EXCELLENT_PERCENT = 80.0
GOOD_PERCENT = 60.0


class QuizError(ValueError):
    """Raised for invalid quiz input such as an out-of-range option."""


class QuizStateError(QuizError):
    """Raised when an action is not allowed in the session's current state."""


class QuizState(Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


def score_answers(questions: Sequence[QuizQuestion], answers: Dict[int, int]) -> int:
    """Count answers matching ``correct_index``; unanswered questions score nothing."""
    return sum(
        1
        for idx, question in enumerate(questions)
        if answers.get(idx) == question.correct_index
    )


def score_message(percentage: float) -> str:
    if percentage >= EXCELLENT_PERCENT:
        return "Excellent! You have great knowledge about mobile usage habits."
    if percentage >= GOOD_PERCENT:
        return "Good job! You understand mobile usage well, but there's room for improvement."
    return "Keep learning! Understanding mobile usage patterns can help improve your digital wellbeing."


def share_text(result: QuizResult) -> str:
    return (
        f"I scored {result.score}/{result.total} on the Mobile Usage Quiz! "
        "Test your knowledge about healthy mobile habits."
    )


def load_result(storage: LocalStorage) -> Optional[QuizResult]:
    """Return the last saved result, or None when absent or malformed."""
    raw = storage.get_item(QUIZ_KEY)
    if raw is None:
        return None
    try:
        return QuizResult.from_dict(raw)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        LOGGER.warning("Stored %s is malformed (%s); ignoring it", QUIZ_KEY, exc)
        return None


class QuizSession:
    """One pass through a fixed question sequence.

    While in progress, answers can be changed freely and the current index
    moves within the question range (moves past either end are no-ops).
    ``submit`` is allowed with unanswered questions. A completed session only
    accepts ``retake``.
    """

    def __init__(
        self,
        questions: Sequence[QuizQuestion] = QUESTION_BANK,
        storage: Optional[LocalStorage] = None,
    ) -> None:
        if not questions:
            raise QuizError("A quiz needs at least one question")
        self.questions = tuple(questions)
        self.storage = storage
        self.state = QuizState.IN_PROGRESS
        self.current_index = 0
        self.answers: Dict[int, int] = {}
        self.result: Optional[QuizResult] = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuizQuestion:
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index == self.total - 1

    @property
    def progress_percent(self) -> float:
        return (self.current_index + 1) / self.total * 100.0

    @property
    def progress_text(self) -> str:
        return f"Question {self.current_index + 1} of {self.total}"

    def _require_in_progress(self, action: str) -> None:
        if self.state is not QuizState.IN_PROGRESS:
            raise QuizStateError(f"Cannot {action} a completed quiz; call retake() first")

    def select_answer(self, option_index: int) -> None:
        self._require_in_progress("answer")
        options = self.current_question.options
        if isinstance(option_index, bool) or not isinstance(option_index, int):
            raise QuizError(f"Option index must be an integer, got {option_index!r}")
        if not 0 <= option_index < len(options):
            raise QuizError(f"Option {option_index} is outside 0..{len(options) - 1}")
        self.answers[self.current_index] = option_index

    def advance(self) -> None:
        self._require_in_progress("navigate")
        if self.current_index < self.total - 1:
            self.current_index += 1

    def retreat(self) -> None:
        self._require_in_progress("navigate")
        if self.current_index > 0:
            self.current_index -= 1

    def submit(self) -> QuizResult:
        self._require_in_progress("submit")
        score = score_answers(self.questions, self.answers)
        result = QuizResult(
            score=score,
            total=self.total,
            percentage=score / self.total * 100.0,
            completed_at=utc_now_iso(),
            answers=[self.answers.get(idx) for idx in range(self.total)],
        )
        self.result = result
        self.state = QuizState.COMPLETED
        if self.storage is not None:
            self.storage.set_item(QUIZ_KEY, result.to_dict())
        LOGGER.info("Quiz submitted: %d/%d (%.0f%%)", result.score, result.total, result.percentage)
        return result

    def retake(self) -> None:
        """Start over; the saved result stays until the next submit."""
        self.state = QuizState.IN_PROGRESS
        self.current_index = 0
        self.answers = {}
        self.result = None
        LOGGER.debug("Quiz restarted")
