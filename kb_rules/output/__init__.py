"""Output serialization for generated artifacts."""

from .writer import dump_json, write_json

__all__ = ["dump_json", "write_json"]
