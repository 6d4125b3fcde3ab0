"""Tests for wikilink extraction, forward resolution and backlinks."""

from types import SimpleNamespace

import pytest

from notes.logic import extract_wikilinks, find_backlinks, resolve_links


def _note(pk, title, content=""):
    return SimpleNamespace(pk=pk, title=title, content=content)


class TestExtractWikilinks:
    def test_extracts_in_order(self):
        assert extract_wikilinks("see [[Alpha]] and [[Beta]], again [[Alpha]]") == ["Alpha", "Beta", "Alpha"]

    def test_stops_at_first_closing_brackets(self):
        assert extract_wikilinks("[[One]] text ]] [[Two]]") == ["One", "Two"]

    @pytest.mark.parametrize("content", ["", None, "no links", "[[]]", "[single]"])
    def test_nothing_to_extract(self, content):
        assert extract_wikilinks(content) == []


class TestResolveLinks:
    def test_exact_title_match(self):
        source = _note(1, "Source", "Study [[A]] today")
        target = _note(2, "A")
        assert resolve_links(source, [source, target, _note(3, "B")]) == [target]

    def test_no_match_is_empty(self):
        source = _note(1, "Source", "Study [[A]] today")
        assert resolve_links(source, [source, _note(2, "B")]) == []

    def test_matching_is_case_sensitive_and_whole_title(self):
        source = _note(1, "Source", "[[a]] and [[Alg]]")
        assert resolve_links(source, [_note(2, "A"), _note(3, "Algebra")]) == []

    def test_duplicate_titles_all_returned_in_collection_order(self):
        source = _note(1, "Source", "[[Dup]]")
        first, second = _note(5, "Dup"), _note(2, "Dup")
        assert resolve_links(source, [first, source, second]) == [first, second]

    def test_self_reference_excluded(self):
        source = _note(1, "Loop", "[[Loop]]")
        assert resolve_links(source, [source]) == []


class TestFindBacklinks:
    def test_note_containing_wikilink_is_a_backlink(self):
        target = _note(1, "A")
        referrer = _note(2, "B", "builds on [[A]]")
        assert find_backlinks(target, [target, referrer, _note(3, "C", "mentions A")]) == [referrer]

    def test_literal_match_inside_code_block_counts(self):
        target = _note(1, "A")
        referrer = _note(2, "B", "```\nprint('[[A]]')\n```")
        assert find_backlinks(target, [target, referrer]) == [referrer]

    def test_no_referrers_is_empty(self):
        target = _note(1, "A")
        assert find_backlinks(target, [target, _note(2, "B", "[[a]]")]) == []
