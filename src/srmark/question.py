"""Question entity: formats itself back into note text and rewrites its span."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, TypeAlias

from srmark.card import Card
from srmark.card_schedule import CardScheduleInfo, format_schedule_comment
from srmark.question_text import QuestionText, TextDirection
from srmark.settings import SRSettings
from srmark.text_finder import find_and_replace
from srmark.topic_path import TopicPathList

if TYPE_CHECKING:
    from srmark.note import Note

log = logging.getLogger(__name__)

CardType: TypeAlias = Literal[
    "single_line_basic",
    "single_line_reversed",
    "multi_line_basic",
    "multi_line_reversed",
    "cloze",
]

_EXCERPT_CHARS = 100


@dataclass(frozen=True, slots=True)
class ParsedQuestionInfo:
    """What the note scanner found: card type, raw span and its line range."""

    card_type: CardType
    text: str
    first_line_num: int
    last_line_num: int

    def __post_init__(self) -> None:
        if self.first_line_num < 0:
            raise ValueError(f"first_line_num must be >= 0, got {self.first_line_num}")
        if self.last_line_num < self.first_line_num:
            raise ValueError(
                f"last_line_num must be >= first_line_num, got "
                f"{self.last_line_num} < {self.first_line_num}",
            )


@dataclass(slots=True)
class Question:
    parsed_question_info: ParsedQuestionInfo
    topic_path_list: TopicPathList
    question_text: QuestionText
    has_edit_later_tag: bool = False
    question_context: list[str] = field(default_factory=list)
    cards: list[Card] = field(default_factory=list)
    has_changed: bool = False
    note: Note | None = field(default=None, repr=False, compare=False)

    @property
    def question_type(self) -> CardType:
        return self.parsed_question_info.card_type

    @property
    def line_no(self) -> int:
        return self.parsed_question_info.first_line_num

    def set_card_list(self, cards: list[Card]) -> None:
        """Take ownership of ``cards`` and point each one back at this question."""
        self.cards = cards
        for card in cards:
            card.question = self

    def is_card_comments_on_same_line(self, settings: SRSettings) -> bool:
        # A trailing code fence must be closed on its own line.
        if self.question_text.ends_with_code_block():
            return False
        return settings.card_comment_on_same_line

    def get_html_comment_separator(self, settings: SRSettings) -> str:
        return " " if self.is_card_comments_on_same_line(settings) else "\n"

    def format_schedule_as_html_comment(self, settings: SRSettings) -> str:
        schedules: list[CardScheduleInfo] = []
        for card in self.cards:
            if card.schedule_info is not None:
                schedules.append(card.schedule_info)
            else:
                schedules.append(CardScheduleInfo.dummy_for_new_card(settings))
        return format_schedule_comment(schedules)

    def format_for_note(self, settings: SRSettings) -> str:
        """Render topic path, question, block id and schedule comment."""
        result = self.question_text.format_topic_and_question()
        block_id = self.question_text.block_id

        if not any(card.has_schedule for card in self.cards):
            # Without a comment the block id is always the last thing on the line.
            if block_id is not None:
                result += f" {block_id}"
            return result

        result = result.rstrip()
        schedule_html = self.format_schedule_as_html_comment(settings)
        if block_id is None:
            return result + self.get_html_comment_separator(settings) + schedule_html
        if self.is_card_comments_on_same_line(settings):
            return f"{result} {schedule_html} {block_id}"
        return f"{result} {block_id}\n{schedule_html}"

    def update_question_text(self, note_text: str, settings: SRSettings) -> str:
        """Replace this question's original span in ``note_text``.

        On success the question text is re-parsed from the replacement,
        keeping the existing text direction. When the span is not found the
        note text is returned untouched.
        """
        original = self.question_text.original
        replacement = self.format_for_note(settings)

        new_text = find_and_replace(note_text, original, replacement)
        if new_text is None:
            log.error(
                "update_question_text: text not found: %r in note: %r",
                original[:_EXCERPT_CHARS],
                note_text[:_EXCERPT_CHARS],
            )
            return note_text

        self.question_text = QuestionText.create(
            replacement, self.question_text.text_direction, settings,
        )
        return new_text

    async def write_question(self, settings: SRSettings) -> bool:
        """Write this question back to its note file.

        Returns False (and leaves the file alone) if the span was not found.
        """
        if self.note is None:
            raise ValueError("question is not attached to a note")
        before = self.question_text
        file_text = await self.note.file.read()
        new_text = self.update_question_text(file_text, settings)
        if self.question_text is before:
            return False
        await self.note.file.write(new_text)
        self.has_changed = False
        return True

    def format_topic_path_list(self) -> str:
        return self.topic_path_list.format("|")

    @classmethod
    def create(
        cls,
        settings: SRSettings,
        parsed_question_info: ParsedQuestionInfo,
        note_topic_path_list: TopicPathList,
        text_direction: TextDirection,
        context: list[str],
    ) -> Question:
        """Build a question from scanner output; cards are attached afterwards."""
        question_text = QuestionText.create(
            parsed_question_info.text, text_direction, settings,
        )
        topic_path_list = note_topic_path_list
        if question_text.topic_path_with_ws is not None:
            topic_path_list = TopicPathList((question_text.topic_path_with_ws.topic_path,))

        return cls(
            parsed_question_info=parsed_question_info,
            topic_path_list=topic_path_list,
            question_text=question_text,
            has_edit_later_tag=settings.edit_later_tag in parsed_question_info.text,
            question_context=list(context),
        )
