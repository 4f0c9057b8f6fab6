"""
Core domain models and business logic.

This package contains the document parser, the data types and the
rule construction logic, independent of file system access.
"""

from .errors import KbRulesError, ReadError, WriteError
from .parser import extract_tags, parse_document, render_html
from .rules import RuleSet, build_body_rule, build_tag_rule, rule_key, rules_for_document
from .types import Document, Rule

__all__ = [
    "Document",
    "Rule",
    "RuleSet",
    "KbRulesError",
    "ReadError",
    "WriteError",
    "parse_document",
    "extract_tags",
    "render_html",
    "build_tag_rule",
    "build_body_rule",
    "rules_for_document",
    "rule_key",
]
