# [CHANGE] Shared UI helpers for true/false item rendering.
from __future__ import annotations

import hashlib
import re
from typing import Iterable, List, Optional

import streamlit as st

from ..constants import ANSWER_LABELS, ANSWER_OPTIONS


_KEY_SANITIZER = re.compile(r"[^0-9a-zA-Z_]+")


def _sanitize_key(raw: str) -> str:
    cleaned = _KEY_SANITIZER.sub("_", raw).strip("_")
    if not cleaned:
        cleaned = "item"
    if cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    if len(cleaned) > 100:
        digest = hashlib.sha1(raw.encode("utf-8")).hexdigest()[:8]
        cleaned = f"{cleaned[:91]}_{digest}"
    return cleaned


def widget_key(item_id: int, key_prefix: str = "mai") -> str:
    return _sanitize_key(f"{key_prefix}_q{item_id}")


def render_true_false(
    item_id: int,
    label: str,
    *,
    current: Optional[int] = None,
    key_prefix: str = "mai",
    help_text: Optional[str] = None,
) -> Optional[int]:
    """
    Render a True/False radio group without a default selection.

    `current` restores a previous answer when the respondent pages back.
    Returns 1, 0, or None when unanswered.
    """
    option_list: List[int] = list(ANSWER_OPTIONS)
    labels = [ANSWER_LABELS[value] for value in option_list]
    index = option_list.index(current) if current in option_list else None
    selection = st.radio(
        label,
        labels,
        index=index,
        horizontal=True,
        key=widget_key(item_id, key_prefix),
        help=help_text,
    )
    if selection in labels:
        return option_list[labels.index(selection)]
    return None


def reset_widget_keys(item_ids: Iterable[int], key_prefix: str = "mai") -> None:
    for item_id in item_ids:
        st.session_state.pop(widget_key(item_id, key_prefix), None)
