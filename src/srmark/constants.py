"""Compiled patterns and fixed markers for question spans.

Every pattern is a module-level constant; nothing here is mutated at runtime.
"""
from __future__ import annotations

import re

SR_HTML_COMMENT_BEGIN = "<!--SR:"
SR_HTML_COMMENT_END = "-->"

# Whole schedule comment; "." does not cross newlines, so one comment per line.
SCHEDULE_COMMENT_RE = re.compile(r"<!--SR:.+-->")

# "!2023-10-16,34,290" entries inside a multi-card comment
MULTI_SCHEDULE_ENTRY_RE = re.compile(r"!([\d-]+),(\d+),(\d+)")

# Pre-multi-card comment format: "<!--SR:2023-10-16,34,290-->"
LEGACY_SCHEDULE_RE = re.compile(r"<!--SR:([\d-]+),(\d+),(\d+)-->")

# "#flashcards/science" at the very start of the (left-trimmed) text
TAG_AT_START_OF_LINE_RE = re.compile(r"^#[^\s#]+")

# " ^d7cee0" at the very end of the text
BLOCK_ID_AT_END_OF_LINE_RE = re.compile(r"\s+\^[A-Za-z0-9-]+$")

CODE_BLOCK_FENCE = "```"

SCHEDULE_DATE_FORMAT = "%Y-%m-%d"
