"""Interview session tracking: batches, resume, rollover and statistics.

Progress for each (user, category) pair lives as one JSON document in a
key-value store. Storage failures never reach the caller: a failed read looks
like "no progress yet" and a failed write is logged and dropped, so the
returned objects may run ahead of what was persisted until the next
successful write.
"""
import json
import logging
import math
import random
import re
import sqlite3

from interview_coach.config import QUESTIONS_PER_SESSION
from interview_coach.models import QuestionProgress, SessionBatch, SessionStatistics
from interview_coach.question_bank import get_question_bank, shuffle_questions
from interview_coach.storage import KeyValueStore

logger = logging.getLogger(__name__)

PROGRESS_KEY_PREFIX = "interview_progress_"
STORAGE_ERRORS = (sqlite3.Error, OSError, ValueError)
DECODE_ERRORS = (*STORAGE_ERRORS, TypeError)


class NoActiveSessionError(RuntimeError):
    """Raised when a question is marked answered before any session exists."""


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class SessionTracker:
    def __init__(
        self,
        store: KeyValueStore,
        user_id: str,
        rng: random.Random | None = None,
        batch_size: int = QUESTIONS_PER_SESSION,
    ):
        self.store = store
        self.user_id = user_id
        self.rng = rng or random.Random()
        self.batch_size = batch_size

    def progress_key(self, category: str) -> str:
        sanitized = re.sub(r"\s+", "_", category)
        return f"{PROGRESS_KEY_PREFIX}{self.user_id}_{sanitized}"

    def load_progress(self, category: str) -> QuestionProgress | None:
        try:
            stored = self.store.get(self.progress_key(category))
            if not stored:
                return None
            data = json.loads(stored)
            if not isinstance(data, dict):
                raise ValueError(f"progress record is {type(data).__name__}, expected object")
            return QuestionProgress.from_dict(data)
        except DECODE_ERRORS:
            logger.exception("Error loading interview progress for %r", category)
            return None

    def save_progress(self, progress: QuestionProgress) -> None:
        progress.user_id = self.user_id
        progress.touch()
        try:
            self.store.set(self.progress_key(progress.category), json.dumps(progress.to_dict()))
        except STORAGE_ERRORS:
            logger.exception("Error saving interview progress for %r", progress.category)

    def get_next_questions(self, category: str) -> SessionBatch:
        """Resume the unfinished batch for ``category`` or draw a new one.

        A new batch comes from questions not yet asked. When fewer than
        ``batch_size`` of those remain, the asked set is cleared and the whole
        pool is drawn from again.
        """
        progress = self.load_progress(category)
        pool = get_question_bank(category)

        if progress is not None and progress.is_resumable:
            by_id = {q.id: q for q in pool}
            questions = [by_id[qid] for qid in progress.current_session_questions if qid in by_id]
            return SessionBatch(questions=questions, progress=progress, is_resuming_session=True)

        asked_ids = list(progress.asked_question_ids) if progress else []
        asked = set(asked_ids)
        available = [q for q in pool if q.id not in asked]

        if len(available) < self.batch_size:
            logger.info(
                "Question pool for %r exhausted (%d unseen), starting over", category, len(available)
            )
            asked_ids = []
            available = pool

        selected = shuffle_questions(available, self.rng)[: self.batch_size]
        new_progress = QuestionProgress(
            user_id=self.user_id,
            category=category,
            asked_question_ids=asked_ids,
            current_session_questions=[q.id for q in selected],
            current_question_index=0,
        )
        self.save_progress(new_progress)
        return SessionBatch(questions=selected, progress=new_progress, is_resuming_session=False)

    def mark_question_answered(self, category: str, question_id: str) -> QuestionProgress:
        """Record ``question_id`` as asked and advance the cursor by one.

        The id is not checked against the question at the cursor.
        """
        progress = self.load_progress(category)
        if progress is None:
            raise NoActiveSessionError(f"No active session found for {category!r}")

        if question_id not in progress.asked_question_ids:
            progress.asked_question_ids.append(question_id)
        progress.current_question_index += 1
        self.save_progress(progress)
        return progress

    def complete_session(self, category: str) -> None:
        """Retire every question of the current batch and clear it."""
        progress = self.load_progress(category)
        if progress is None:
            return

        for question_id in progress.current_session_questions:
            if question_id not in progress.asked_question_ids:
                progress.asked_question_ids.append(question_id)
        progress.current_session_questions = []
        progress.current_question_index = 0
        self.save_progress(progress)

    def reset_progress(self, category: str) -> None:
        self.save_progress(QuestionProgress(user_id=self.user_id, category=category))

    def get_statistics(self, category: str) -> SessionStatistics:
        progress = self.load_progress(category)
        total = len(get_question_bank(category))
        asked = len(progress.asked_question_ids) if progress else 0
        percentage = round_half_up(asked / total * 100) if total else 0
        return SessionStatistics(
            total_questions=total,
            asked_questions=asked,
            remaining_questions=total - asked,
            percentage_complete=percentage,
        )
