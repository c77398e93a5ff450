"""Data classes for the interview practice domain model."""
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    category: str
    difficulty: str
    tips: Optional[str] = None


@dataclass
class QuestionProgress:
    user_id: str
    category: str
    asked_question_ids: list[str] = field(default_factory=list)
    current_session_questions: list[str] = field(default_factory=list)
    current_question_index: int = 0
    last_updated: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def is_resumable(self) -> bool:
        """True while the current batch still has unanswered questions."""
        return bool(self.current_session_questions) and (
            self.current_question_index < len(self.current_session_questions)
        )

    def touch(self) -> None:
        self.last_updated = datetime.now().isoformat()

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "QuestionProgress":
        return cls(
            user_id=data.get("user_id", ""),
            category=data.get("category", ""),
            asked_question_ids=list(data.get("asked_question_ids") or []),
            current_session_questions=list(data.get("current_session_questions") or []),
            current_question_index=int(data.get("current_question_index") or 0),
            last_updated=data.get("last_updated") or datetime.now().isoformat(),
        )


@dataclass
class SessionBatch:
    questions: list[Question]
    progress: QuestionProgress
    is_resuming_session: bool


@dataclass
class SessionStatistics:
    total_questions: int
    asked_questions: int
    remaining_questions: int
    percentage_complete: int


@dataclass(frozen=True)
class RateLimitConfig:
    max_requests: int
    window_ms: int


@dataclass
class RateLimitInfo:
    remaining: int
    reset_time: int  # epoch milliseconds
