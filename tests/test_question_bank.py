import random

from interview_coach.question_bank import (
    get_question_bank, generate_field_questions, get_known_fields, shuffle_questions,
    field_id_prefix,
)


def test_general_pool_has_60_questions():
    pool = get_question_bank("general")
    assert len(pool) == 60
    assert pool[0].id == "gen_001"
    assert pool[-1].id == "gen_060"


def test_general_pool_ids_unique():
    ids = [q.id for q in get_question_bank("general")]
    assert len(ids) == len(set(ids))


def test_general_pool_difficulties_valid():
    assert {q.difficulty for q in get_question_bank("general")} <= {"easy", "medium", "hard"}


def test_known_fields():
    fields = get_known_fields()
    assert "Software Engineering" in fields
    assert "Marketing" in fields
    assert len(fields) == 5


def test_field_questions_generated_from_templates():
    questions = generate_field_questions("Marketing")
    assert len(questions) == 10
    assert questions[0].id == "marketing_001"
    assert questions[9].id == "marketing_010"
    assert questions[0].text == "Describe a successful campaign you've run."
    assert all(q.category == "field-specific" for q in questions)
    assert questions[0].tips == "Focus on specific examples from your experience in Marketing."


def test_field_difficulty_cycles_by_position():
    questions = generate_field_questions("Finance")
    expected = ["easy", "medium", "hard"] * 4
    assert [q.difficulty for q in questions] == expected[:10]


def test_field_ids_replace_whitespace():
    questions = generate_field_questions("Data Science")
    assert questions[0].id == "data_science_001"
    assert field_id_prefix("Design (UI/UX)") == "design_(ui/ux)"


def test_unknown_field_falls_back_to_default_templates():
    fallback = generate_field_questions("Underwater Basket Weaving")
    software = generate_field_questions("Software Engineering")
    assert [q.text for q in fallback] == [q.text for q in software]
    assert fallback[0].id == "underwater_basket_weaving_001"
    assert "Underwater Basket Weaving" in fallback[0].tips


def test_field_match_is_case_sensitive():
    lower = generate_field_questions("marketing")
    assert lower[0].text != generate_field_questions("Marketing")[0].text


def test_question_bank_returns_fresh_lists():
    pool = get_question_bank("general")
    pool.clear()
    assert len(get_question_bank("general")) == 60


def test_shuffle_is_permutation_and_leaves_input_alone():
    items = list(range(20))
    shuffled = shuffle_questions(items, random.Random(1))
    assert sorted(shuffled) == items
    assert items == list(range(20))


def test_shuffle_deterministic_with_seed():
    items = list(range(20))
    assert shuffle_questions(items, random.Random(7)) == shuffle_questions(items, random.Random(7))
