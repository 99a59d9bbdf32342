"""Settings consumed by question parsing and formatting.

``SRSettings`` is a frozen snapshot. It loads from a JSON object with either
snake_case keys or the camelCase keys used by the plugin's ``data.json``.
Unknown keys are ignored and private ``_``-prefixed keys are dropped.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from srmark.io_utils import load_json

_CAMEL_ALIASES: dict[str, str] = {
    "convertFoldersToDecks": "convert_folders_to_decks",
    "cardCommentOnSameLine": "card_comment_on_same_line",
    "editLaterTag": "edit_later_tag",
    "baseEase": "base_ease",
}


@dataclass(frozen=True, slots=True)
class SRSettings:
    """Options that change how question spans are split and re-serialized."""

    convert_folders_to_decks: bool = False
    card_comment_on_same_line: bool = False
    edit_later_tag: str = "#edit-later"
    base_ease: int = 250

    def __post_init__(self) -> None:
        if not isinstance(self.convert_folders_to_decks, bool):
            raise ValueError("convert_folders_to_decks must be a bool")
        if not isinstance(self.card_comment_on_same_line, bool):
            raise ValueError("card_comment_on_same_line must be a bool")
        if not isinstance(self.edit_later_tag, str) or not self.edit_later_tag:
            raise ValueError("edit_later_tag must be a non-empty string")
        if isinstance(self.base_ease, bool) or not isinstance(self.base_ease, int):
            raise ValueError(f"base_ease must be an int, got {self.base_ease!r}")
        if self.base_ease <= 0:
            raise ValueError(f"base_ease must be > 0, got {self.base_ease}")

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> SRSettings:
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in payload.items():
            if not isinstance(key, str) or key.startswith("_"):
                continue
            name = _CAMEL_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_json_file(cls, path: Path) -> SRSettings:
        payload = load_json(path)
        if not isinstance(payload, dict):
            raise ValueError(f"Settings payload must be a JSON object: {path}")
        return cls.from_dict(payload)
