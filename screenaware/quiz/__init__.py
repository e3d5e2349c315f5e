"""Mobile usage quiz: question bank and scoring session."""

from screenaware.quiz.engine import QuizError, QuizSession, QuizState, QuizStateError, load_result
from screenaware.quiz.questions import QUESTION_BANK

__all__ = ["QUESTION_BANK", "QuizError", "QuizSession", "QuizState", "QuizStateError", "load_result"]
