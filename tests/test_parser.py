"""Tests for markdown note parsing."""

from kb_rules.core.parser import extract_tags, parse_document, render_html


def test_header_line_becomes_title_and_is_removed_from_body():
    doc = parse_document("#   Hello World  \nline one\nline two", "fallback")
    assert doc.title == "Hello World"
    assert doc.body == "line one\nline two"


def test_title_falls_back_to_file_name_without_header():
    text = "No header here\nsecond line"
    doc = parse_document(text, "notes")
    assert doc.title == "notes"
    assert doc.body == text


def test_second_level_header_is_not_a_title():
    text = "## Section\nbody"
    doc = parse_document(text, "page")
    assert doc.title == "page"
    assert doc.body == text


def test_empty_header_falls_back_but_still_drops_line():
    doc = parse_document("#    \nrest", "untitled-note")
    assert doc.title == "untitled-note"
    assert doc.body == "rest"


def test_empty_document():
    doc = parse_document("", "empty")
    assert doc.title == "empty"
    assert doc.body == ""
    assert doc.tags == []


def test_bullet_and_inline_tags_are_merged_in_order():
    assert extract_tags("- a - b\n#b #c") == ["a", "b", "c"]


def test_bullet_line_splits_on_every_dash():
    assert extract_tags("- well-known - topic") == ["well", "known", "topic"]


def test_indented_bullet_is_ignored():
    assert extract_tags("  - nested\n-nospace") == []


def test_trailing_dash_keeps_empty_tag():
    assert extract_tags("- solo-") == ["solo", ""]


def test_tags_are_case_sensitive_and_not_lowercased():
    assert extract_tags("#Tag #tag\n- Tag") == ["Tag", "tag"]


def test_inline_tags_read_the_header_line_too():
    doc = parse_document("# Title #intro\nbody", "x")
    assert doc.title == "Title #intro"
    assert doc.tags == ["intro"]


def test_inline_tag_stops_at_non_word_character():
    assert extract_tags("see #tag-name and #under_score!") == ["tag", "under_score"]


def test_carriage_returns_are_trimmed_from_title_and_tags():
    doc = parse_document("# Title\r\n- one - two\r\n", "x")
    assert doc.title == "Title"
    assert doc.tags == ["one", "two"]


def test_render_html_produces_markup():
    html = render_html("# Hello\n\nSome *text*")
    assert "<h1>Hello</h1>" in html
    assert "<em>text</em>" in html


def test_fact_shape_uses_html_content_key():
    fact = parse_document("# Hello\nBody #z", "a").to_fact()
    assert list(fact) == ["title", "body", "tags", "htmlContent"]
    assert fact["tags"] == ["z"]
