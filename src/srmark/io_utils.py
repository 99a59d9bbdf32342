"""JSON / JSONL helpers backed by orjson.

Settings payloads and inspector input/output go through here so every caller
shares one decoder configuration.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load a JSON document from ``path``."""
    return orjson.loads(path.read_bytes())


def dump_json(obj: Any, *, pretty: bool = True) -> str:
    """Serialize ``obj`` to a JSON string (sorted keys)."""
    opts = orjson.OPT_SORT_KEYS
    if pretty:
        opts |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts).decode("utf-8")


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Write ``obj`` as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json(obj, pretty=pretty) + "\n", encoding="utf-8")


def load_jsonl(path: Path) -> list[dict[str, Any]]:
    """Load a JSON Lines file (one JSON object per line). Blank lines skipped."""
    records: list[dict[str, Any]] = []
    for line in path.read_bytes().split(b"\n"):
        line = line.strip()
        if not line:
            continue
        record = orjson.loads(line)
        if not isinstance(record, dict):
            raise ValueError(f"JSONL record must be an object: {path}")
        records.append(record)
    return records
