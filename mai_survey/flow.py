from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .constants import ANSWER_OPTIONS, ITEM_COUNT, ITEMS, QUESTIONS_PER_PAGE, Item
from .export import RespondentInfo
from .scoring import ScoreResult, score
from .utils.validation import parse_age, validate_respondent

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    QUESTIONS = "questions"
    INFO = "info"
    RESULTS = "results"


class FlowError(RuntimeError):
    pass


def _blank_answers() -> List[Optional[int]]:
    return [None] * ITEM_COUNT


def _blank_fields() -> Dict[str, str]:
    return {"name": "", "age": "", "school": "", "grade": ""}


@dataclass
class SurveyState:
    """Linear questions -> info -> results wizard for one respondent."""

    per_page: int = QUESTIONS_PER_PAGE
    phase: Phase = Phase.QUESTIONS
    page: int = 0
    answers: List[Optional[int]] = field(default_factory=_blank_answers)
    fields: Dict[str, str] = field(default_factory=_blank_fields)
    info: Optional[RespondentInfo] = None

    def __post_init__(self) -> None:
        self.per_page = max(1, min(int(self.per_page), ITEM_COUNT))

    @property
    def page_count(self) -> int:
        return (ITEM_COUNT + self.per_page - 1) // self.per_page

    @property
    def is_last_page(self) -> bool:
        return self.page == self.page_count - 1

    def page_range(self) -> Tuple[int, int]:
        """Zero-based [start, end) slice of ITEMS shown on the current page."""
        start = self.page * self.per_page
        return start, min(start + self.per_page, ITEM_COUNT)

    def page_items(self) -> List[Item]:
        start, end = self.page_range()
        return ITEMS[start:end]

    @property
    def answered_count(self) -> int:
        return sum(1 for value in self.answers if value is not None)

    @property
    def progress(self) -> float:
        return self.answered_count / ITEM_COUNT

    def answer(self, item_id: int, value: Optional[int]) -> None:
        if self.phase is not Phase.QUESTIONS:
            raise FlowError(f"cannot answer items in phase {self.phase.value}")
        if not 1 <= item_id <= ITEM_COUNT:
            raise FlowError(f"unknown item {item_id}")
        if value is not None and value not in ANSWER_OPTIONS:
            raise FlowError(f"invalid answer {value!r} for item {item_id}")
        self.answers[item_id - 1] = value

    def page_complete(self) -> bool:
        start, end = self.page_range()
        return all(value is not None for value in self.answers[start:end])

    def next_page(self) -> bool:
        """Advance one page, or into the info form from the last page. False if the page is incomplete."""
        if self.phase is not Phase.QUESTIONS:
            raise FlowError(f"next_page is only valid while answering, not in {self.phase.value}")
        if not self.page_complete():
            return False
        if self.is_last_page:
            self.phase = Phase.INFO
            logger.info("all %d items answered, moving to info form", ITEM_COUNT)
        else:
            self.page += 1
            logger.info("question page %d/%d", self.page + 1, self.page_count)
        return True

    def prev_page(self) -> None:
        if self.phase is Phase.INFO:
            self.phase = Phase.QUESTIONS
            self.page = self.page_count - 1
        elif self.phase is Phase.QUESTIONS:
            self.page = max(self.page - 1, 0)
        else:
            raise FlowError("cannot go back from results; restart instead")

    def submit(self, fields: Dict[str, str]) -> List[str]:
        """Validate and freeze the respondent info. Returns error messages; empty on success."""
        if self.phase is not Phase.INFO:
            raise FlowError(f"submit is only valid on the info form, not in {self.phase.value}")
        self.fields = {key: str(fields.get(key) or "").strip() for key in _blank_fields()}
        errors = validate_respondent(self.fields)
        if errors:
            return errors
        self.info = RespondentInfo(
            name=self.fields["name"],
            age=parse_age(self.fields["age"]),
            school=self.fields["school"],
            grade=self.fields["grade"],
        )
        self.phase = Phase.RESULTS
        logger.info("respondent info submitted, showing results")
        return []

    def result(self) -> ScoreResult:
        if self.phase is not Phase.RESULTS:
            raise FlowError("scores are only available once the survey is submitted")
        return score(self.answers)

    def restart(self) -> None:
        self.phase = Phase.QUESTIONS
        self.page = 0
        self.answers = _blank_answers()
        self.fields = _blank_fields()
        self.info = None
        logger.info("survey restarted")
