"""Tests for rule construction and deduplication."""

import json

from json_logic import jsonLogic

from kb_rules.core.rules import (
    RuleSet,
    build_body_rule,
    build_tag_rule,
    rule_key,
    rules_for_document,
)
from kb_rules.core.types import Document


def _doc(title="T", body="B", tags=None):
    return Document(title=title, body=body, tags=list(tags or []))


def test_tag_rule_shape():
    rule = build_tag_rule("x", _doc(title="Hello", body="text"))
    assert rule.to_dict() == {
        "conditions": {"in": ["x", {"var": "tags"}]},
        "event": {
            "type": "tagMatch",
            "params": {"message": "Matched tag: x", "title": "Hello", "body": "text"},
        },
    }


def test_body_rule_shape():
    rule = build_body_rule(_doc(title="Hello", body="text"))
    assert rule.to_dict() == {
        "conditions": {"==": [{"var": "body"}, "text"]},
        "event": {
            "type": "bodyMatch",
            "params": {"message": "Matched body content", "title": "Hello", "body": "text"},
        },
    }


def test_rules_for_document_orders_tags_then_body():
    rules = rules_for_document(_doc(tags=["b", "a"]))
    assert [r.event_type for r in rules] == ["tagMatch", "tagMatch", "bodyMatch"]
    assert [r.conditions for r in rules][:2] == [
        {"in": ["b", {"var": "tags"}]},
        {"in": ["a", {"var": "tags"}]},
    ]


def test_identical_documents_collapse():
    rule_set = RuleSet()
    assert rule_set.add_document(_doc(tags=["x"])) == 2
    assert rule_set.add_document(_doc(tags=["x"])) == 0
    assert len(rule_set) == 2


def test_shared_tag_with_different_title_is_kept_twice():
    rule_set = RuleSet()
    rule_set.add_document(_doc(title="one", body="same", tags=["z"]))
    rule_set.add_document(_doc(title="two", body="same", tags=["z"]))
    tag_rules = [r for r in rule_set if r.event_type == "tagMatch"]
    assert len(tag_rules) == 2
    # Body rules differ by title as well
    assert len(rule_set) == 4


def test_rule_key_is_stable_and_order_independent():
    rule = build_tag_rule("x", _doc())
    key = rule_key(rule)
    assert key == rule_key(build_tag_rule("x", _doc()))
    assert json.loads(key) == rule.to_dict()


def test_contains_and_insertion_order():
    first = build_tag_rule("a", _doc())
    second = build_body_rule(_doc())
    rule_set = RuleSet([first, second, first])
    assert first in rule_set
    assert build_tag_rule("missing", _doc()) not in rule_set
    assert rule_set.to_list() == [first.to_dict(), second.to_dict()]


def test_tag_rule_evaluates_on_tag_membership():
    conditions = build_tag_rule("x", _doc()).conditions
    assert jsonLogic(conditions, {"tags": ["w", "x"], "body": ""}) is True
    assert jsonLogic(conditions, {"tags": ["y"], "body": ""}) is False


def test_body_rule_evaluates_on_exact_body():
    conditions = build_body_rule(_doc(body="Body text #z")).conditions
    assert jsonLogic(conditions, {"tags": [], "body": "Body text #z"}) is True
    assert jsonLogic(conditions, {"tags": [], "body": "Body text"}) is False
