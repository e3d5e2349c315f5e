"""Fixed question bank for the mobile usage quiz."""

from __future__ import annotations

from typing import Tuple

from screenaware.types import QuizQuestion

QUESTION_BANK: Tuple[QuizQuestion, ...] = (
    QuizQuestion(
        prompt="What is the recommended maximum daily screen time for adults for recreational use?",
        options=("1-2 hours", "3-4 hours", "5-6 hours", "No specific limit"),
        correct_index=0,
        explanation="Experts recommend limiting recreational screen time to 1-2 hours daily for adults.",
    ),
    QuizQuestion(
        prompt="Which of these is considered a positive use of mobile phones?",
        options=(
            "Online learning and educational apps",
            "Excessive social media scrolling",
            "Gaming for 6+ hours continuously",
            "Using phone while driving",
        ),
        correct_index=0,
        explanation="Online learning represents productive and educational use of mobile technology.",
    ),
    QuizQuestion(
        prompt="What percentage of smartphone users check their phone within 15 minutes of waking up?",
        options=("25%", "50%", "75%", "90%"),
        correct_index=2,
        explanation=(
            "Studies show approximately 75% of smartphone users check their devices "
            "within 15 minutes of waking up."
        ),
    ),
    QuizQuestion(
        prompt="Which health issue is NOT directly linked to excessive mobile phone use?",
        options=("Digital eye strain", "Text neck syndrome", "Sleep disruption", "Common cold"),
        correct_index=3,
        explanation=(
            "While mobile overuse affects eye health, posture, and sleep, "
            "it doesn't directly cause common cold."
        ),
    ),
    QuizQuestion(
        prompt="What is 'phubbing' in the context of mobile phone usage?",
        options=(
            "Snubbing someone in favor of your phone",
            "Taking too many selfies",
            "Using phone in bathroom",
            "Phone addiction",
        ),
        correct_index=0,
        explanation="Phubbing refers to snubbing others by paying attention to your phone instead of engaging with them.",
    ),
)
