"""Interview question pools: the fixed general set and field templates."""
import json
import random
import re
from functools import lru_cache

from interview_coach.config import CONTENT_DIR, GENERAL_CATEGORY
from interview_coach.models import Question

DIFFICULTY_CYCLE = ("easy", "medium", "hard")


@lru_cache(maxsize=None)
def _general_questions() -> tuple[Question, ...]:
    data = json.loads((CONTENT_DIR / "general_questions.json").read_text(encoding="utf-8"))
    return tuple(
        Question(
            id=q["id"],
            text=q["text"],
            category=q["category"],
            difficulty=q["difficulty"],
            tips=q.get("tips"),
        )
        for q in data["questions"]
    )


@lru_cache(maxsize=None)
def _field_templates() -> tuple[str, dict[str, list[str]]]:
    data = json.loads((CONTENT_DIR / "field_templates.json").read_text(encoding="utf-8"))
    return data["default_field"], data["fields"]


def get_known_fields() -> list[str]:
    """Field names that have their own template list."""
    _, fields = _field_templates()
    return list(fields)


def field_id_prefix(field: str) -> str:
    return re.sub(r"\s", "_", field.lower())


@lru_cache(maxsize=None)
def _generated_questions(field: str) -> tuple[Question, ...]:
    default_field, fields = _field_templates()
    templates = fields.get(field) or fields[default_field]
    prefix = field_id_prefix(field)
    return tuple(
        Question(
            id=f"{prefix}_{index + 1:03d}",
            text=text,
            category="field-specific",
            difficulty=DIFFICULTY_CYCLE[index % 3],
            tips=f"Focus on specific examples from your experience in {field}.",
        )
        for index, text in enumerate(templates)
    )


def generate_field_questions(field: str) -> list[Question]:
    """Build questions for a field from its templates.

    The match on ``field`` is exact and case-sensitive. Unknown fields reuse
    the default template list but keep ids derived from their own name.
    """
    return list(_generated_questions(field))


def get_question_bank(category: str) -> list[Question]:
    if category == GENERAL_CATEGORY:
        return list(_general_questions())
    return generate_field_questions(category)


def shuffle_questions(questions: list, rng: random.Random | None = None) -> list:
    """Return a shuffled copy (Fisher-Yates via ``Random.shuffle``)."""
    shuffled = list(questions)
    (rng or random).shuffle(shuffled)
    return shuffled
