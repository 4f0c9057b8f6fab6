"""Tests for YAML configuration loading."""

from pathlib import Path

from kb_rules.config import AppConfig, load_config


def test_defaults_match_fixed_paths():
    cfg = load_config(None)
    assert cfg.input.markdown_dir == "./markdown"
    assert cfg.input.extension == ".md"
    assert cfg.input.exclude_tag == "UNFINISHED"
    assert cfg.output.facts_file == "./facts.json"
    assert cfg.output.rules_file == "./rules.json"
    assert cfg.output.indent == 2


def test_yaml_overrides_are_merged(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "input:\n  markdown_dir: notes\nlogging:\n  level: DEBUG\nunknown: 1\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.input.markdown_dir == "notes"
    assert cfg.input.exclude_tag == "UNFINISHED"
    assert cfg.logging.level == "DEBUG"
    assert cfg.output == AppConfig().output


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AppConfig()


def test_loaded_configs_do_not_share_state():
    first = load_config(None)
    first.input.markdown_dir = "changed"
    assert load_config(None).input.markdown_dir == "./markdown"
