#!/usr/bin/env python3
"""Interactive terminal quiz on mobile usage habits."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional, Sequence

from screenaware.config import add_settings_args, settings_or_exit
from screenaware.io_utils import setup_logging
from screenaware.quiz import QuizError, QuizSession
from screenaware.quiz.engine import score_message, share_text
from screenaware.storage import LocalStorage
from screenaware.types import QuizResult


LOGGER = logging.getLogger("scripts.take_quiz")

HELP_TEXT = "Enter an option number, 'n' next, 'p' previous, 's' submit"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Take the mobile usage quiz")
    add_settings_args(parser)
    return parser.parse_args(argv)


def run_quiz(
    session: QuizSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> QuizResult:
    """Drive ``session`` from line-based input until it is submitted."""
    write(HELP_TEXT)
    while True:
        question = session.current_question
        write("")
        write(session.progress_text)
        write(question.prompt)
        selected = session.answers.get(session.current_index)
        for idx, option in enumerate(question.options, start=1):
            marker = "*" if selected == idx - 1 else " "
            write(f" {marker} {idx}. {option}")

        command = read("> ").strip().lower()
        if command == "s":
            return session.submit()
        if command == "n":
            if session.is_last_question:
                write("Last question reached; enter 's' to submit.")
            session.advance()
        elif command == "p":
            session.retreat()
        elif command.isdigit():
            try:
                session.select_answer(int(command) - 1)
            except QuizError as exc:
                write(str(exc))
                continue
            if not session.is_last_question:
                session.advance()
        else:
            write(HELP_TEXT)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = settings_or_exit(args)
    setup_logging(settings.logging_level)

    session = QuizSession(storage=LocalStorage(settings.storage_path))
    result = run_quiz(session)
    print(f"\nScore: {result.score}/{result.total}")
    print(score_message(result.percentage))
    for idx, question in enumerate(session.questions):
        print(f"{idx + 1}. {question.explanation}")
    print(share_text(result))


if __name__ == "__main__":
    main()
