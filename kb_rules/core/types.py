"""
Core data types for the facts and rules generator.

This module defines the fundamental data structures used throughout the pipeline:
- Document: A parsed markdown source file
- Rule: A JsonLogic condition paired with the event it triggers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Document:
    """Represents one markdown source file after parsing.

    Attributes:
        title: First-line header text, or the file name without extension
        body: Document text, minus the header line when it was used as the title
        tags: Unique tags in first-seen order
        html_content: The markdown rendered to HTML
    """
    title: str
    body: str
    tags: list[str] = field(default_factory=list)
    html_content: str = ""

    def to_fact(self) -> dict[str, Any]:
        """Return the JSON shape written to the facts file."""
        return {
            "title": self.title,
            "body": self.body,
            "tags": list(self.tags),
            "htmlContent": self.html_content,
        }


@dataclass(frozen=True)
class Rule:
    """A generated rule for an external JsonLogic rule engine.

    Attributes:
        conditions: JsonLogic boolean expression
        event_type: "tagMatch" or "bodyMatch"
        message: Human readable description of the match
        title: Title of the document the rule was generated from
        body: Body of the document the rule was generated from
    """
    conditions: dict[str, Any]
    event_type: str
    message: str
    title: str
    body: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "conditions": self.conditions,
            "event": {
                "type": self.event_type,
                "params": {
                    "message": self.message,
                    "title": self.title,
                    "body": self.body,
                },
            },
        }
