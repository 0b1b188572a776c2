from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import streamlit as st

from ..constants import (
    APP_TITLE,
    DEFAULT_CONTACT,
    DEFAULT_EXPORT_NAME,
    ITEM_COUNT,
    QUESTIONS_PER_PAGE,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "MAI_"


def _secrets_dict() -> Dict[str, Any]:
    if hasattr(st, "secrets"):
        try:
            return st.secrets.to_dict()
        except (AttributeError, FileNotFoundError):
            pass
    return {}


def _env_str(key: str) -> Optional[str]:
    v = os.getenv(ENV_PREFIX + key.upper())
    if v is None:
        return None
    v = v.strip()
    return v or None


def _lookup(section: Dict[str, Any], key: str) -> Optional[Any]:
    value = section.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return _env_str(key)
    return value


def _as_int(value: Any, default: int, key: str) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("ignoring non-integer %s=%r, using %s", key, value, default)
        return default


@dataclass(frozen=True)
class Settings:
    app_title: str
    questions_per_page: int
    contact_name: str
    export_default_name: str
    log_level: str


def get_settings(secrets: Optional[Dict[str, Any]] = None) -> Settings:
    """
    Resolve app settings from `st.secrets` ([app] section), then MAI_* env vars, then defaults.

    Nothing here is required; a bare checkout runs with the defaults.
    """
    data = secrets if secrets is not None else _secrets_dict()
    section = dict(data.get("app", {}) or {})

    per_page = _as_int(_lookup(section, "questions_per_page"), QUESTIONS_PER_PAGE, "questions_per_page")
    per_page = max(1, min(per_page, ITEM_COUNT))

    return Settings(
        app_title=str(_lookup(section, "app_title") or APP_TITLE),
        questions_per_page=per_page,
        contact_name=str(_lookup(section, "contact_name") or DEFAULT_CONTACT),
        export_default_name=str(_lookup(section, "export_default_name") or DEFAULT_EXPORT_NAME),
        log_level=str(_lookup(section, "log_level") or "INFO").upper(),
    )
