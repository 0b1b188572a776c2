# tests/test_scoring.py
import math

import pytest

from mai_survey.constants import DIMENSIONS, SCORE_LEVELS, Dimension
from mai_survey.scoring import classify, normalize, raw_score, score

from conftest import make_answers


# --- score ---

def test_all_true_scores_ten(all_true):
    result = score(all_true)
    for dim in DIMENSIONS:
        assert result.raw_scores[dim.name] == dim.size
        assert result.normalized_scores[dim.name] == 10.0
        assert classify(result.normalized_scores[dim.name]).label == "高水平"


def test_all_false_scores_zero(all_false):
    result = score(all_false)
    for dim in DIMENSIONS:
        assert result.raw_scores[dim.name] == 0
        assert result.normalized_scores[dim.name] == 0.0
        assert classify(result.normalized_scores[dim.name]).label == "低水平"


def test_planning_example(planning_items):
    answers = make_answers(0, dict(zip(planning_items, [1, 1, 0, 1, 0])))
    result = score(answers)
    assert result.raw_scores["Planning"] == 3
    assert result.normalized_scores["Planning"] == 6.0
    assert classify(6.0).label == "中高水平"


def test_unanswered_items_do_not_count():
    """None and a short vector are treated as not true, no error."""
    result = score(make_answers(None))
    assert set(result.normalized_scores.values()) == {0.0}

    short = score([1] * 10)
    # items 1..10 answered true; Planning holds items 4 and 8
    assert short.raw_scores["Planning"] == 2
    assert short.normalized_scores["Planning"] == 4.0


def test_only_exact_true_counts():
    answers = make_answers(None, {5: 1, 15: 2, 20: "1", 26: 0})
    assert score(answers).raw_scores["Knowledge about Cognition"] == 1


def test_results_follow_dimension_order(all_true):
    result = score(all_true)
    names = [dim.name for dim in DIMENSIONS]
    assert list(result.raw_scores) == names
    assert list(result.normalized_scores) == names


@pytest.mark.parametrize("raw,size,expected", [(1, 6, 1.7), (4, 6, 6.7), (5, 14, 3.6), (13, 14, 9.3), (0, 14, 0.0)])
def test_normalize_rounds_to_one_decimal(raw, size, expected):
    assert normalize(raw, size) == expected


def test_normalize_empty_dimension_is_zero():
    assert normalize(0, 0) == 0.0
    empty = Dimension("Empty", "空", "", ())
    assert score(make_answers(1), [empty]).normalized_scores == {"Empty": 0.0}


def test_raw_score_within_bounds():
    for pattern in (0, 1, None):
        answers = make_answers(pattern, {1: 1, 2: 0, 3: None})
        for dim in DIMENSIONS:
            raw = raw_score(answers, dim)
            assert 0 <= raw <= dim.size
            assert score(answers).normalized_scores[dim.name] == round(raw / dim.size * 10, 1)


# --- classify ---

@pytest.mark.parametrize(
    "value,label",
    [
        (10.0, "高水平"),
        (8.0, "高水平"),
        (7.9, "中高水平"),
        (6.0, "中高水平"),
        (5.9, "中等水平"),
        (4.0, "中等水平"),
        (3.9, "较低水平"),
        (2.0, "较低水平"),
        (1.9, "低水平"),
        (0.0, "低水平"),
    ],
)
def test_classify_boundaries(value, label):
    assert classify(value).label == label


@pytest.mark.parametrize("value", [7.95, -1.0, 11.0, math.nan])
def test_classify_falls_back_to_lowest_level(value):
    assert classify(value) is SCORE_LEVELS[-1]


def test_classify_is_monotonic():
    rank = {level.label: idx for idx, level in enumerate(SCORE_LEVELS)}
    values = [round(step / 10, 1) for step in range(0, 101)]
    ranks = [rank[classify(v).label] for v in values if not 7.9 < v < 8.0]
    # lower index means higher level, so ranks never increase as the score grows
    assert all(a >= b for a, b in zip(ranks, ranks[1:]))
