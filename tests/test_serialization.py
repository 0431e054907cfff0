"""Tests for portfolio_api.db.serialization: the storage edge conversions."""

import re

from portfolio_api.db.serialization import (
    dump_list,
    dump_text,
    from_flag,
    load_list,
    to_flag,
    utc_now_iso,
)


class TestLists:
    def test_dump_none_is_empty_list(self):
        assert dump_list(None) == "[]"

    def test_dump_list_is_json(self):
        assert dump_list([{"degree": "PhD"}]) == '[{"degree": "PhD"}]'

    def test_dump_string_passes_through(self):
        assert dump_list('["already"]') == '["already"]'

    def test_load_round_trip(self):
        entries = [{"degree": "PhD", "year": "2019"}, {"degree": "MSc"}]
        assert load_list(dump_list(entries)) == entries

    def test_load_empty_values(self):
        assert load_list(None) == []
        assert load_list("") == []

    def test_load_malformed_text_falls_back(self):
        assert load_list("{not json") == []

    def test_load_non_list_falls_back(self):
        assert load_list('{"degree": "PhD"}') == []


class TestFlags:
    def test_to_flag(self):
        assert to_flag(True) == 1
        assert to_flag(False) == 0
        assert to_flag(None) == 0

    def test_from_flag(self):
        assert from_flag(1) is True
        assert from_flag(0) is False
        assert from_flag(None) is False
        assert from_flag("1") is True
        assert from_flag("0") is False


class TestText:
    def test_dump_text_keeps_strings(self):
        assert dump_text("a@x.com, b@x.com") == "a@x.com, b@x.com"
        assert dump_text(None) is None

    def test_dump_text_serializes_structures(self):
        assert dump_text(["a@x.com"]) == '["a@x.com"]'


def test_utc_now_iso_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())
