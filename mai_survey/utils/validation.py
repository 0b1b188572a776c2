import re
from typing import Dict, List, Optional

from ..constants import RESPONDENT_AGE_MAX, RESPONDENT_AGE_MIN, RESPONDENT_FIELDS

_AGE = re.compile(r"^\d{1,3}$")


def parse_age(s: str) -> Optional[int]:
    s = (s or "").strip()
    if not _AGE.match(s):
        return None
    age = int(s)
    if RESPONDENT_AGE_MIN <= age <= RESPONDENT_AGE_MAX:
        return age
    return None


def validate_respondent(fields: Dict[str, str]) -> List[str]:
    """Return error messages for the identity form; empty when it can be submitted."""
    errors: List[str] = []
    for key, label in RESPONDENT_FIELDS:
        if not str(fields.get(key) or "").strip():
            errors.append(f"请填写{label}。")
    age_raw = str(fields.get("age") or "").strip()
    if age_raw and parse_age(age_raw) is None:
        errors.append(f"年龄请输入 {RESPONDENT_AGE_MIN} 到 {RESPONDENT_AGE_MAX} 之间的整数。")
    return errors
