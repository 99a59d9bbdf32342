"""Per-card schedule entries and the ``<!--SR:...-->`` comment that carries them.

Computing the next review is not done here; this module only reads, writes
and strips the serialized form.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from srmark.constants import (
    LEGACY_SCHEDULE_RE,
    MULTI_SCHEDULE_ENTRY_RE,
    SCHEDULE_COMMENT_RE,
    SCHEDULE_DATE_FORMAT,
    SR_HTML_COMMENT_BEGIN,
    SR_HTML_COMMENT_END,
)
from srmark.settings import SRSettings

DUMMY_DUE_DATE = date(2000, 1, 1)
NEW_CARD_INTERVAL = 1


@dataclass(frozen=True, slots=True)
class CardScheduleInfo:
    """Review state of one card: next due date, interval (days), ease (percent)."""

    due_date: date
    interval: int
    ease: int

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError(f"interval must be >= 0, got {self.interval}")
        if self.ease <= 0:
            raise ValueError(f"ease must be > 0, got {self.ease}")

    @property
    def formatted_due_date(self) -> str:
        return self.due_date.strftime(SCHEDULE_DATE_FORMAT)

    def format_schedule(self) -> str:
        return f"!{self.formatted_due_date},{self.interval},{self.ease}"

    def is_dummy_schedule_for_new_card(self) -> bool:
        return self.due_date == DUMMY_DUE_DATE

    def is_due(self, today: date) -> bool:
        return self.due_date <= today

    @staticmethod
    def from_due_date_str(due_date_str: str, interval: int, ease: int) -> CardScheduleInfo:
        due = datetime.strptime(due_date_str, SCHEDULE_DATE_FORMAT).date()
        return CardScheduleInfo(due_date=due, interval=interval, ease=ease)

    @staticmethod
    def dummy_for_new_card(settings: SRSettings) -> CardScheduleInfo:
        """Placeholder entry that keeps a multi-card comment well formed."""
        return CardScheduleInfo(
            due_date=DUMMY_DUE_DATE,
            interval=NEW_CARD_INTERVAL,
            ease=settings.base_ease,
        )


def format_schedule_comment(schedules: list[CardScheduleInfo]) -> str:
    """Join entries between the fixed comment markers."""
    body = "".join(s.format_schedule() for s in schedules)
    return f"{SR_HTML_COMMENT_BEGIN}{body}{SR_HTML_COMMENT_END}"


def remove_card_schedule_info(text: str) -> str:
    """Delete every schedule comment; surrounding whitespace is left alone."""
    return SCHEDULE_COMMENT_RE.sub("", text)


def parse_card_schedule_info(text: str) -> list[CardScheduleInfo | None]:
    """Read the schedule entries of a question span, in card order.

    A dummy entry (new card placeholder) reads back as ``None``. Entries with
    an unparseable date are also ``None`` so the card positions stay aligned.
    """
    comment = SCHEDULE_COMMENT_RE.search(text)
    if comment is None:
        return []
    raw = MULTI_SCHEDULE_ENTRY_RE.findall(comment.group(0))
    if not raw:
        raw = LEGACY_SCHEDULE_RE.findall(comment.group(0))

    out: list[CardScheduleInfo | None] = []
    for due_str, interval_str, ease_str in raw:
        try:
            info = CardScheduleInfo.from_due_date_str(
                due_str, int(interval_str), int(ease_str),
            )
        except ValueError:
            out.append(None)
            continue
        out.append(None if info.is_dummy_schedule_for_new_card() else info)
    return out
