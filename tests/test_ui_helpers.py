# tests/test_ui_helpers.py
from mai_survey.utils.ui_helpers import _sanitize_key, widget_key


def test_widget_keys_are_stable_and_unique():
    keys = {widget_key(item_id) for item_id in range(1, 53)}
    assert len(keys) == 52
    assert widget_key(7) == "mai_q7"
    assert widget_key(7, key_prefix="retake") == "retake_q7"


def test_sanitize_key():
    assert _sanitize_key("a b-c") == "a_b_c"
    assert _sanitize_key("9lives") == "_9lives"
    assert _sanitize_key("!!!") == "item"
    long_key = _sanitize_key("x" * 150)
    assert len(long_key) == 100
