"""Split a question span into its components and fingerprint the result.

A span is laid out as::

    [preWs][#topic/path postWs] question [ ^block-id] [ws <!--SR:...-->]

Whitespace rules:

- With no topic path, leading whitespace stays in ``actual_question``; in
  markdown it is the indent level of a nested list item.
- With a topic path, the whitespace before and after the tag is kept on the
  ``TopicPathWithWs`` so a rewrite reproduces it, and ``actual_question``
  has no leading whitespace.
- Trailing whitespace is always removed. The formatter supplies its own
  separator before the schedule comment.

Examples::

    Q1::A1
    #flashcards/science  Q2::A2
    #flashcards/science  Q2::A2 <!--SR:!2023-10-16,34,290-->
    #flashcards/science  Q2::A2 <!--SR:!2023-10-16,34,290--> ^d7cee0
    Q2::A2 ^d7cee0
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from srmark.card_schedule import remove_card_schedule_info
from srmark.constants import (
    BLOCK_ID_AT_END_OF_LINE_RE,
    CODE_BLOCK_FENCE,
    TAG_AT_START_OF_LINE_RE,
)
from srmark.hashing import cyrb53
from srmark.settings import SRSettings
from srmark.topic_path import TopicPathWithWs, get_topic_path_from_card_text

TextDirection: TypeAlias = Literal["ltr", "rtl"]

_TEXT_DIRECTIONS: frozenset[str] = frozenset({"ltr", "rtl"})


def _split_leading_ws(text: str) -> tuple[str, str]:
    stripped = text.lstrip()
    return text[: len(text) - len(stripped)], stripped


def extract_block_id(text: str) -> tuple[str, str | None]:
    """Cut a trailing ``^block-id`` off ``text``.

    Returns ``(text_without_id, block_id)``; ``block_id`` is None when absent.
    """
    m = BLOCK_ID_AT_END_OF_LINE_RE.search(text)
    if not m:
        return text, None
    block_id = m.group(0).strip()
    return text[: m.start()].rstrip(), block_id


def split_text(
    original: str, settings: SRSettings,
) -> tuple[TopicPathWithWs | None, str, str | None]:
    """Return ``(topic_path_with_ws, actual_question, block_id)`` for a span."""
    without_sr = remove_card_schedule_info(original)
    actual_question = without_sr.rstrip()
    topic_path_with_ws: TopicPathWithWs | None = None

    topic_path = get_topic_path_from_card_text(without_sr)
    if topic_path is not None and topic_path.has_path:
        pre_ws, after_pre = _split_leading_ws(without_sr)
        after_tag = TAG_AT_START_OF_LINE_RE.sub("", after_pre, count=1)
        post_ws, actual_question = _split_leading_ws(after_tag)
        # The tag is removed either way; only its whitespace is dropped here.
        if not settings.convert_folders_to_decks:
            topic_path_with_ws = TopicPathWithWs(topic_path, pre_ws, post_ws)
        actual_question = actual_question.rstrip()

    actual_question, block_id = extract_block_id(actual_question)
    return topic_path_with_ws, actual_question, block_id


@dataclass(frozen=True, slots=True)
class QuestionText:
    """Parsed components of one question span.

    ``text_hash`` covers the topic path (with whitespace) and the question
    only, so schedule updates and block-id edits keep a question's identity.
    """

    original: str
    topic_path_with_ws: TopicPathWithWs | None
    actual_question: str
    text_direction: TextDirection
    block_id: str | None
    text_hash: str = field(init=False)

    def __post_init__(self) -> None:
        if self.text_direction not in _TEXT_DIRECTIONS:
            raise ValueError(f"unknown text direction {self.text_direction!r}")
        object.__setattr__(self, "text_hash", cyrb53(self.format_topic_and_question()))

    @classmethod
    def create(
        cls, original: str, text_direction: TextDirection, settings: SRSettings,
    ) -> QuestionText:
        topic_path_with_ws, actual_question, block_id = split_text(original, settings)
        return cls(
            original=original,
            topic_path_with_ws=topic_path_with_ws,
            actual_question=actual_question,
            text_direction=text_direction,
            block_id=block_id,
        )

    def ends_with_code_block(self) -> bool:
        return self.actual_question.endswith(CODE_BLOCK_FENCE)

    def format_topic_and_question(self) -> str:
        result = ""
        if self.topic_path_with_ws is not None:
            result += self.topic_path_with_ws.format_with_ws()
        return result + self.actual_question
