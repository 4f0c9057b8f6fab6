"""
KB Rules - facts and JsonLogic rules from markdown notes.

This package reads a directory of markdown notes and writes two JSON
artifacts: a facts file with one entry per note, and a deduplicated
rules file with tag-match and body-match rules for a JsonLogic engine.

Main entry point is the CLI via `kb-rules run` command.

Example:
    $ kb-rules run -i markdown/ --facts-output facts.json --rules-output rules.json
"""

__all__ = [
    "__version__",
    "parse_document",
    "RuleSet",
    "generate_facts",
    "generate_rules",
    "run_pipeline",
]
__version__ = "0.1.0"

from .core.parser import parse_document
from .core.rules import RuleSet
from .runner import generate_facts, generate_rules, run_pipeline
