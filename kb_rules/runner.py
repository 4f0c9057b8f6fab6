"""
Pipeline orchestration for the facts and rules generator.

The run consists of two independent passes over the same markdown directory:
1. Facts pass: parse every document and write the non-excluded ones as facts
2. Rules pass: re-read the directory and write the deduplicated rule set

Each pass either writes its complete output or nothing at all. A failing
facts pass is logged and the rules pass still runs.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from .config import AppConfig
from .core.errors import KbRulesError
from .core.parser import parse_document
from .core.rules import RuleSet
from .core.types import Document
from .input.loader import document_name, list_documents, read_document
from .output.writer import write_json
from .utils.logging import log_event, setup_logging


@dataclass
class FactsResult:
    """Outcome of a facts pass.

    Attributes:
        output_path: Where the facts file was (or would have been) written
        facts: Fact objects in directory order; empty when the pass failed
        excluded: Paths of documents skipped because of the exclude tag
        error: Error message if the pass aborted, None otherwise
    """
    output_path: Path
    facts: list[dict[str, Any]] = field(default_factory=list)
    excluded: list[Path] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RulesResult:
    """Outcome of a rules pass.

    Attributes:
        output_path: Where the rules file was (or would have been) written
        rules: Unique rule objects in first-insertion order
        excluded: Paths of documents skipped because of the exclude tag
        error: Error message if the pass aborted, None otherwise
    """
    output_path: Path
    rules: list[dict[str, Any]] = field(default_factory=list)
    excluded: list[Path] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PassStats:
    """Documents read so far in one pass, used to close its progress bar."""
    processed: int = 0


@dataclass
class PipelineResult:
    facts: FactsResult
    rules: RulesResult

    @property
    def ok(self) -> bool:
        return self.facts.ok and self.rules.ok


async def load_documents(
    markdown_dir: Path,
    cfg: AppConfig,
    logger: logging.Logger | None = None,
    excluded: list[Path] | None = None,
    on_document: Callable[[], None] | None = None,
) -> list[Document]:
    """Read and parse every document, dropping those with the exclude tag.

    Documents are processed one at a time in directory listing order.

    Raises:
        ReadError: If the directory cannot be listed or a document cannot be read
    """
    paths = await list_documents(markdown_dir, cfg.input.extension)
    documents: list[Document] = []
    for path in paths:
        text = await read_document(path)
        document = parse_document(text, document_name(path, cfg.input.extension))
        if cfg.input.exclude_tag in document.tags:
            log_event(
                logger,
                "Document excluded",
                level=logging.DEBUG,
                event="document_excluded",
                path=str(path),
                tag=cfg.input.exclude_tag,
            )
            if excluded is not None:
                excluded.append(path)
        else:
            documents.append(document)
        if on_document is not None:
            on_document()
    return documents


async def generate_facts(
    markdown_dir: Path,
    output_file: Path,
    cfg: AppConfig | None = None,
    logger: logging.Logger | None = None,
    on_document: Callable[[], None] | None = None,
) -> FactsResult:
    """Write the facts file for ``markdown_dir``.

    Read and write failures are logged and reported through ``error``;
    the output file is left untouched in that case.
    """
    cfg = cfg or AppConfig()
    result = FactsResult(output_path=Path(output_file))
    try:
        documents = await load_documents(
            Path(markdown_dir), cfg, logger, excluded=result.excluded, on_document=on_document
        )
        facts = [document.to_fact() for document in documents]
        await write_json(result.output_path, facts, cfg.output.indent)
    except KbRulesError as exc:
        log_event(
            logger,
            f"Error generating facts JSON: {exc}",
            level=logging.ERROR,
            event="facts_failed",
            path=str(exc.path),
            error=exc.reason,
        )
        result.error = str(exc)
        return result

    result.facts = facts
    log_event(
        logger,
        f"Facts JSON generated at {result.output_path}",
        event="facts_generated",
        output=str(result.output_path),
        total=len(facts),
        excluded=len(result.excluded),
    )
    return result


async def generate_rules(
    markdown_dir: Path,
    output_file: Path,
    cfg: AppConfig | None = None,
    logger: logging.Logger | None = None,
    on_document: Callable[[], None] | None = None,
) -> RulesResult:
    """Write the deduplicated rules file for ``markdown_dir``.

    Documents are re-read rather than taken from a previous facts pass.
    """
    cfg = cfg or AppConfig()
    result = RulesResult(output_path=Path(output_file))
    try:
        documents = await load_documents(
            Path(markdown_dir), cfg, logger, excluded=result.excluded, on_document=on_document
        )
        rule_set = RuleSet()
        for document in documents:
            rule_set.add_document(document)
        rules = rule_set.to_list()
        await write_json(result.output_path, rules, cfg.output.indent)
    except KbRulesError as exc:
        log_event(
            logger,
            f"Error generating rules JSON: {exc}",
            level=logging.ERROR,
            event="rules_failed",
            path=str(exc.path),
            error=exc.reason,
        )
        result.error = str(exc)
        return result

    result.rules = rules
    log_event(
        logger,
        f"Rules JSON generated at {result.output_path}",
        event="rules_generated",
        output=str(result.output_path),
        total=len(rules),
        excluded=len(result.excluded),
    )
    return result


def run_pipeline(
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> PipelineResult:
    """Run the facts pass, then the rules pass.

    Args:
        cfg: Application configuration
        show_progress: Whether to display progress bars
        console: Rich console for output (creates default if None)

    Returns:
        Results of both passes
    """
    markdown_dir = Path(cfg.input.markdown_dir)
    facts_file = Path(cfg.output.facts_file)
    rules_file = Path(cfg.output.rules_file)
    logger = setup_logging(cfg.logging, facts_file.parent)

    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        input=str(markdown_dir),
        facts=str(facts_file),
        rules=str(rules_file),
    )

    if not show_progress:
        facts = asyncio.run(generate_facts(markdown_dir, facts_file, cfg, logger))
        rules = asyncio.run(generate_rules(markdown_dir, rules_file, cfg, logger))
    else:
        console = console or Console()
        progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        )
        with progress:
            facts_stats = PassStats()
            facts_task = progress.add_task("Facts", total=None)
            facts = asyncio.run(
                generate_facts(
                    markdown_dir,
                    facts_file,
                    cfg,
                    logger,
                    on_document=_track_progress(progress, facts_task, facts_stats),
                )
            )
            progress.update(facts_task, total=facts_stats.processed)

            rules_stats = PassStats()
            rules_task = progress.add_task("Rules", total=None)
            rules = asyncio.run(
                generate_rules(
                    markdown_dir,
                    rules_file,
                    cfg,
                    logger,
                    on_document=_track_progress(progress, rules_task, rules_stats),
                )
            )
            progress.update(rules_task, total=rules_stats.processed)

    result = PipelineResult(facts=facts, rules=rules)
    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        facts=len(facts.facts),
        rules=len(rules.rules),
        ok=result.ok,
    )
    return result


def _track_progress(progress: Progress, task_id, stats: PassStats) -> Callable[[], None]:
    """Build an ``on_document`` callback advancing ``task_id`` and counting into ``stats``."""

    def _advance() -> None:
        stats.processed += 1
        progress.advance(task_id, 1)

    return _advance
