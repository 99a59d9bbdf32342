"""A reviewable card derived from a question."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from srmark.card_schedule import CardScheduleInfo

if TYPE_CHECKING:
    from srmark.question import Question


@dataclass(slots=True)
class Card:
    """One card of a question (one per cloze deletion or direction).

    ``question`` is a back-reference set by ``Question.set_card_list``; it is
    excluded from repr/eq to keep the cycle out of both.
    """

    card_idx: int
    front: str
    back: str
    schedule_info: CardScheduleInfo | None = None
    question: Question | None = field(default=None, repr=False, compare=False)

    @property
    def has_schedule(self) -> bool:
        return self.schedule_info is not None

    @property
    def is_new(self) -> bool:
        return not self.has_schedule

    def is_due(self, today: date) -> bool:
        return self.schedule_info is not None and self.schedule_info.is_due(today)
