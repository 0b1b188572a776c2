import pytest

from mai_survey.constants import DIMENSION_BY_NAME, ITEM_COUNT


def make_answers(value=None, overrides=None):
    """Build a 52-slot answer vector filled with `value`, then apply {item_id: answer} overrides."""
    answers = [value] * ITEM_COUNT
    for item_id, answer in (overrides or {}).items():
        answers[item_id - 1] = answer
    return answers


@pytest.fixture
def all_true():
    return make_answers(1)


@pytest.fixture
def all_false():
    return make_answers(0)


@pytest.fixture
def planning_items():
    return list(DIMENSION_BY_NAME["Planning"].items)
