from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from .constants import ANSWER_TRUE, DIMENSIONS, SCORE_LEVELS, Dimension, Level

logger = logging.getLogger(__name__)

AnswerVector = Sequence[Optional[int]]


@dataclass(frozen=True)
class ScoreResult:
    raw_scores: Dict[str, int]
    normalized_scores: Dict[str, float]


def _answer_at(answers: AnswerVector, item_id: int) -> Optional[int]:
    idx = item_id - 1
    if 0 <= idx < len(answers):
        return answers[idx]
    return None


def raw_score(answers: AnswerVector, dimension: Dimension) -> int:
    """Count the items of `dimension` answered exactly true (1)."""
    return sum(1 for item_id in dimension.items if _answer_at(answers, item_id) == ANSWER_TRUE)


def normalize(raw: int, size: int) -> float:
    if size <= 0:
        return 0.0
    return round(raw / size * 10, 1)


def score(answers: AnswerVector, dimensions: Optional[Iterable[Dimension]] = None) -> ScoreResult:
    """
    Compute raw and 0-10 normalized scores for every dimension.

    Unanswered items (None) count as not true; incomplete vectors are scored as-is.
    """
    dims = list(dimensions) if dimensions is not None else DIMENSIONS
    raw: Dict[str, int] = {}
    normalized: Dict[str, float] = {}
    for dim in dims:
        raw[dim.name] = raw_score(answers, dim)
        normalized[dim.name] = normalize(raw[dim.name], dim.size)
    logger.debug("normalized scores: %s", normalized)
    return ScoreResult(raw_scores=raw, normalized_scores=normalized)


def classify(value: float) -> Level:
    """Return the first level whose inclusive range holds `value`, else the lowest level."""
    for level in SCORE_LEVELS:
        if level.min <= value <= level.max:
            return level
    return SCORE_LEVELS[-1]
