# [CHANGE] Single-row CSV export for a finished MAI session.
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from .constants import (
    DEFAULT_EXPORT_NAME,
    DIMENSIONS,
    ITEMS,
    RESPONDENT_FIELDS,
)
from .scoring import AnswerVector, classify


@dataclass(frozen=True)
class RespondentInfo:
    name: str
    age: Any
    school: str
    grade: str


@dataclass(frozen=True)
class ExportRecord:
    header: List[str]
    row: List[str]


COLS: List[str] = [
    *[label for _, label in RESPONDENT_FIELDS],
    *[f"Q{item.id}" for item in ITEMS],
    *[f"{dim.zh}原始得分" for dim in DIMENSIONS],
    *[f"{dim.zh}标准化得分" for dim in DIMENSIONS],
]


def format_value(value: Any) -> str:
    """Render a cell the way the results page shows it: blanks for None, no trailing `.0`."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def export_row(
    info: RespondentInfo,
    answers: AnswerVector,
    raw_scores: Mapping[str, int],
    normalized_scores: Mapping[str, float],
) -> ExportRecord:
    """Return header + data row aligned 1:1 with COLS."""
    answer_cells = [answers[idx] if idx < len(answers) else None for idx in range(len(ITEMS))]
    row = [
        info.name,
        info.age,
        info.school,
        info.grade,
        *answer_cells,
        *[raw_scores.get(dim.name) for dim in DIMENSIONS],
        *[normalized_scores.get(dim.name) for dim in DIMENSIONS],
    ]
    return ExportRecord(header=list(COLS), row=[format_value(v) for v in row])


def to_csv_text(record: ExportRecord) -> str:
    # Plain comma join; free-text fields are not quoted.
    return ",".join(record.header) + "\n" + ",".join(record.row)


def export_filename(info: Optional[RespondentInfo], default: str = DEFAULT_EXPORT_NAME) -> str:
    name = (info.name or "").strip() if info else ""
    return f"{name or default}.csv"


def score_table(raw_scores: Mapping[str, int], normalized_scores: Mapping[str, float]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for dim in DIMENSIONS:
        normalized = normalized_scores.get(dim.name, 0.0)
        level = classify(normalized)
        rows.append(
            {
                "维度": dim.zh,
                "原始得分": raw_scores.get(dim.name, 0),
                "标准化得分": normalized,
                "等级": level.label,
                "等级说明": level.remark,
                "解释": dim.desc,
            }
        )
    return pd.DataFrame(rows)
