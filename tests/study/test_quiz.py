"""
Unit tests for quiz progress.

Covers submitting answers, scoring, advancing and the memory updates
handed back to the caller.
"""

import random
from datetime import timedelta

import pytest

from flashbang.core.models import Direction, Question, Word
from flashbang.session import InsufficientWordsError, SessionConfig
from flashbang.study import QuizProgress, replace_word, start_quiz


@pytest.fixture
def quiz(word_pool, now) -> QuizProgress:
    config = SessionConfig(count=4, direction=Direction.SOURCE_TO_TARGET)
    return start_quiz(word_pool, None, config, now, random.Random(3))


def wrong_option(question: Question) -> str:
    return next(o for o in question.options if o != question.correct_option)


class TestStartQuiz:
    """Tests for start_quiz()."""

    def test_start_when_enough_words_then_first_question(self, quiz):
        assert quiz.total == 4
        assert quiz.index == 0
        assert quiz.score == 0
        assert quiz.current is quiz.questions[0]
        assert quiz.progress_percent == 0

    def test_start_when_too_few_words_then_raises_error(self, word_pool, now):
        with pytest.raises(InsufficientWordsError):
            start_quiz(word_pool, "basics", SessionConfig(count=2), now)


class TestSubmit:
    """Tests for QuizProgress.submit()."""

    def test_submit_when_correct_then_score_and_memory_advance(self, quiz, now):
        # Arrange
        question = quiz.current

        # Act
        progress, result = quiz.submit(question.correct_option, now)

        # Assert
        assert result.is_correct is True
        assert progress.score == 1
        assert progress.index == 0
        assert progress.is_current_answered is True
        assert result.word_id == question.word.id
        assert result.update.interval == 1
        assert result.update.consecutive_correct == 1
        assert result.update.next_review == now + timedelta(days=1)

    def test_submit_when_wrong_then_score_kept_and_streak_reset(self, quiz, now):
        progress, result = quiz.submit(wrong_option(quiz.current), now)

        assert result.is_correct is False
        assert progress.score == 0
        assert result.update.consecutive_correct == 0
        assert result.update.ease_factor == pytest.approx(1.96)

    def test_submit_when_called_then_original_progress_unchanged(self, quiz, now):
        quiz.submit(quiz.current.correct_option, now)

        assert quiz.answers == ()
        assert quiz.score == 0

    def test_submit_when_already_answered_then_raises_error(self, quiz, now):
        progress, _ = quiz.submit(quiz.current.correct_option, now)

        with pytest.raises(ValueError, match="already answered"):
            progress.submit(progress.current.correct_option, now)

    def test_submit_when_empty_quiz_then_raises_error(self, now):
        with pytest.raises(ValueError, match="empty quiz"):
            QuizProgress(questions=()).submit("dog", now)

    def test_to_record_when_answered_then_store_payload(self, quiz, now):
        _, result = quiz.submit(quiz.current.correct_option, now)

        record = result.to_record()

        assert record["interval"] == 1
        assert record["consecutive_correct"] == 1
        assert record["next_review"] == (now + timedelta(days=1)).isoformat()


class TestAdvance:
    """Tests for advancing through a quiz."""

    def test_full_run_when_alternating_answers_then_half_score(self, quiz, now):
        # Arrange
        progress = quiz

        # Act
        for i in range(progress.total):
            answer = progress.current.correct_option if i % 2 == 0 else wrong_option(progress.current)
            progress, _ = progress.submit(answer, now)
            progress = progress.advance()

        # Assert
        assert progress.score == 2
        assert progress.is_finished is True
        assert len(progress.answers) == 4
        assert [a.is_correct for a in progress.answers] == [True, False, True, False]

    def test_advance_when_on_last_then_stays(self, quiz, now):
        progress = quiz
        for _ in range(3):
            progress = progress.advance()

        assert progress.index == 3
        assert progress.is_last is True
        assert progress.advance() is progress

    def test_progress_percent_when_midway_then_share_passed(self, quiz):
        progress = quiz.advance().advance()

        assert progress.progress_percent == 50

    def test_init_when_index_out_of_range_then_raises_error(self, quiz):
        with pytest.raises(ValueError, match="index out of range"):
            QuizProgress(questions=quiz.questions, index=4)

    def test_reset_when_called_then_empty_and_finished(self, quiz):
        progress = quiz.reset()

        assert progress.total == 0
        assert progress.current is None
        assert progress.is_finished is True


class TestReplaceWord:
    """Tests for refreshing cached words after an answer."""

    def test_replace_when_answered_then_updated_copy_swapped_in(self, quiz, word_pool, now):
        _, result = quiz.submit(quiz.current.correct_option, now)

        refreshed = replace_word(word_pool, result.updated_word)

        target = next(w for w in refreshed if w.id == result.word_id)
        assert target.memory == result.update
        assert len(refreshed) == len(word_pool)
        assert all(w is o for w, o in zip(refreshed, word_pool) if w.id != result.word_id)

    def test_replace_when_unknown_id_then_unchanged(self, word_pool):
        stranger = Word(id="zz", term="Fremd", translation="stranger")

        assert replace_word(word_pool, stranger) == word_pool
