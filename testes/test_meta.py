import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wxr_parser.extractors.meta import clean_meta_value, get_meta_value, meta_to_dict
from wxr_parser.models.wxr_document import PostMeta


def _meta(*pairs):
    return [PostMeta(key=k, value=v) for k, v in pairs]


def test_key_match_is_case_insensitive_and_trimmed():
    meta = _meta((" Redator ", "Maria"))
    assert get_meta_value(meta, "redator") == "Maria"


def test_null_and_blank_values_are_absent():
    meta = _meta(("autor", "NULL"), ("autor", "   "), ("autor", " Joana "))
    assert get_meta_value(meta, "autor") == "Joana"


def test_key_priority_beats_entry_order():
    meta = _meta(("author_name", "Late Key"), ("redator", "Preferred"))
    assert get_meta_value(meta, "redator", "author_name") == "Preferred"


def test_falls_back_to_next_key_when_first_has_no_usable_value():
    meta = _meta(("redator", "null"), ("autor", "Backup"))
    assert get_meta_value(meta, "redator", "autor") == "Backup"


def test_no_match_returns_empty_string():
    assert get_meta_value(_meta(("x", "y")), "redator") == ""
    assert get_meta_value([], "redator") == ""


def test_clean_meta_value():
    assert clean_meta_value("  value ") == "value"
    assert clean_meta_value("Null") == ""
    assert clean_meta_value("") == ""


def test_meta_to_dict_skips_blank_keys_and_keeps_last_duplicate():
    meta = _meta(("a", "1"), ("", "ignored"), ("a", "2"), ("b", " raw "))
    assert meta_to_dict(meta) == {"a": "2", "b": " raw "}
