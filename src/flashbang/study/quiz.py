"""
Module: study.quiz

Purpose:
    Caller-owned quiz progress. A QuizProgress value holds the questions,
    the current index, the score and the answers so far; every operation
    returns a new value instead of mutating shared state.

Key Functions:
    - start_quiz(): Build a session and wrap it in a QuizProgress
    - replace_word(): Refresh a cached word list after an answer

Key Classes:
    - QuizProgress: Quiz state threaded through calls
    - AnswerResult: Outcome of one answer, including the memory update

Dependencies:
    - flashbang.session: Session building
    - flashbang.scheduler: Memory state updates
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from flashbang.core.models import MemoryState, Question, Word
from flashbang.scheduler import record_answer
from flashbang.session import SessionConfig, build_session

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerResult:
    """
    Outcome of answering one question.

    Attributes:
        question: The answered question
        answer: The option the learner picked
        is_correct: Whether it matched the correct option
        update: New memory state of the question's word
    """

    question: Question
    answer: str
    is_correct: bool
    update: MemoryState

    @property
    def word_id(self) -> str:
        return self.question.word.id

    @property
    def updated_word(self) -> Word:
        """The question's word with the new memory fields applied."""
        return self.question.word.with_memory(self.update)

    def to_record(self) -> dict[str, Any]:
        """Store update payload for ``word_id``."""
        return self.update.to_record()


@dataclass(frozen=True)
class QuizProgress:
    """
    State of a running quiz (immutable).

    Attributes:
        questions: Session questions in order
        index: Position of the current question
        score: Number of correct answers so far
        answers: Results so far, one per answered question

    Invariants:
        - 0 <= index < len(questions) unless questions is empty
        - len(answers) in (index, index + 1)
    """

    questions: Tuple[Question, ...]
    index: int = 0
    score: int = 0
    answers: Tuple[AnswerResult, ...] = ()

    def __post_init__(self) -> None:
        """Validate progress on construction."""
        if self.questions and not 0 <= self.index < len(self.questions):
            raise ValueError(f"index out of range: {self.index}")
        if len(self.answers) not in (self.index, self.index + 1) and self.questions:
            raise ValueError(
                f"answers ({len(self.answers)}) inconsistent with index {self.index}"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current(self) -> Optional[Question]:
        """Current question, or None for an empty quiz."""
        if not self.questions:
            return None
        return self.questions[self.index]

    @property
    def is_current_answered(self) -> bool:
        return len(self.answers) > self.index

    @property
    def is_last(self) -> bool:
        return self.index >= self.total - 1

    @property
    def is_finished(self) -> bool:
        """True once the last question has been answered."""
        return not self.questions or (self.is_last and self.is_current_answered)

    @property
    def progress_percent(self) -> float:
        """Share of questions already passed, 0-100."""
        if not self.questions:
            return 100.0
        return self.index / self.total * 100

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def submit(self, answer: str, now: Optional[datetime] = None) -> Tuple[QuizProgress, AnswerResult]:
        """
        Answer the current question.

        Args:
            answer: The option the learner picked
            now: Answer time (defaults to now, UTC)

        Returns:
            Tuple of (new progress, answer result). Persist
            ``result.to_record()`` under ``result.word_id``.

        Raises:
            ValueError: If the quiz is empty or the question was already answered
        """
        question = self.current
        if question is None:
            raise ValueError("Cannot submit an answer to an empty quiz")
        if self.is_current_answered:
            raise ValueError(f"Question {self.index + 1} already answered")

        is_correct = question.is_correct(answer)
        update = record_answer(question.word, is_correct, now)
        result = AnswerResult(
            question=question,
            answer=answer,
            is_correct=is_correct,
            update=update,
        )
        logger.debug(
            f"Question {self.index + 1}/{self.total}: "
            f"{'correct' if is_correct else 'incorrect'}"
        )
        progress = replace(
            self,
            score=self.score + (1 if is_correct else 0),
            answers=(*self.answers, result),
        )
        return progress, result

    def advance(self) -> QuizProgress:
        """
        Move to the next question.

        Stays on the last question; the caller ends the quiz there.
        """
        if self.is_last:
            return self
        return replace(self, index=self.index + 1)

    def reset(self) -> QuizProgress:
        """Empty quiz, as after leaving the quiz screen."""
        return QuizProgress(questions=())


def start_quiz(
    words: Sequence[Word],
    category_filter: Optional[str],
    config: SessionConfig,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> QuizProgress:
    """
    Build a session and start a quiz on it.

    Raises:
        InsufficientWordsError: If fewer than 4 distinct words are eligible
    """
    questions = build_session(words, category_filter, config, now=now, rng=rng)
    return QuizProgress(questions=tuple(questions))


def replace_word(words: Iterable[Word], updated: Word) -> List[Word]:
    """Return ``words`` with the entry sharing ``updated.id`` swapped in."""
    return [updated if w.id == updated.id else w for w in words]
