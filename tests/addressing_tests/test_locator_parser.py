"""
Tests for sfr/addressing/parser.py
"""

from __future__ import annotations

import pytest

from sfr.addressing import LocatorParser, ParsedLocator, parse_locator


class TestLocatorParserWithoutTags:

    def setup_method(self):
        self.parser = LocatorParser()

    @pytest.mark.parametrize("raw", [
        "bar.yaml",
        "  classpath:data/foo.json ",
        "\tthis:child.feature\n",
        "",
    ])
    def test_path_is_trimmed_input(self, raw):
        result = self.parser.parse(raw)

        assert result.path == raw.strip()
        assert result.tag_filter is None

    def test_returns_parsed_locator(self):
        assert self.parser.parse("a.json") == ParsedLocator(path="a.json", tag_filter=None)


class TestLocatorParserWithTags:

    def setup_method(self):
        self.parser = LocatorParser()

    def test_split_on_first_at(self):
        result = self.parser.parse("this:child.feature@smoke")

        assert result.path == "this:child.feature"
        assert result.tag_filter == "@smoke"

    def test_both_parts_trimmed(self):
        result = self.parser.parse("  child.feature   @smoke  ")

        assert result.path == "child.feature"
        assert result.tag_filter == "@smoke"

    def test_multiple_tags_kept_verbatim(self):
        result = self.parser.parse("child.feature@smoke @fast")

        assert result.tag_filter == "@smoke @fast"
        assert result.tag_filter.startswith("@")

    def test_split_is_exact(self):
        raw = "classpath:a/b.feature@x@y"
        result = self.parser.parse(raw)

        assert result.path + result.tag_filter == raw

    def test_at_in_file_name_is_treated_as_tag(self):
        # No escape mechanism: the first '@' always starts the tag filter
        result = self.parser.parse("data/user@home.json")

        assert result.path == "data/user"
        assert result.tag_filter == "@home.json"

    def test_module_shortcut(self):
        assert parse_locator("x.feature@a").tag_filter == "@a"
