"""
Rule construction and deduplication.

Every non-excluded document yields one tag-match rule per tag and one
body-match rule. Rules are deduplicated on the whole rule object, event
payload included, so two documents sharing a tag only collapse to one
rule when their title and body are identical as well.
"""

from __future__ import annotations

import json
from typing import Iterable

from .types import Document, Rule


TAG_MATCH = "tagMatch"
BODY_MATCH = "bodyMatch"


def build_tag_rule(tag: str, document: Document) -> Rule:
    """Rule matching candidates whose ``tags`` array contains ``tag``."""
    return Rule(
        conditions={"in": [tag, {"var": "tags"}]},
        event_type=TAG_MATCH,
        message=f"Matched tag: {tag}",
        title=document.title,
        body=document.body,
    )


def build_body_rule(document: Document) -> Rule:
    """Rule matching candidates whose ``body`` equals the document body."""
    return Rule(
        conditions={"==": [{"var": "body"}, document.body]},
        event_type=BODY_MATCH,
        message="Matched body content",
        title=document.title,
        body=document.body,
    )


def rules_for_document(document: Document) -> list[Rule]:
    """Tag-match rules in tag order, followed by the body-match rule."""
    rules = [build_tag_rule(tag, document) for tag in document.tags]
    rules.append(build_body_rule(document))
    return rules


def rule_key(rule: Rule) -> str:
    """Canonical serialization used as the dedup key."""
    return json.dumps(rule.to_dict(), sort_keys=True, ensure_ascii=False, separators=(",", ":"))


class RuleSet:
    """Insertion-ordered set of rules keyed by their canonical serialization."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> bool:
        """Add a rule; returns False when an identical rule is already present."""
        key = rule_key(rule)
        if key in self._rules:
            return False
        self._rules[key] = rule
        return True

    def add_document(self, document: Document) -> int:
        """Add all rules for a document and return how many were new."""
        return sum(1 for rule in rules_for_document(document) if self.add(rule))

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules.values())

    def __contains__(self, rule: object) -> bool:
        return isinstance(rule, Rule) and rule_key(rule) in self._rules

    def to_list(self) -> list[dict]:
        return [rule.to_dict() for rule in self._rules.values()]
