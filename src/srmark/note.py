"""A note file and the questions scanned from it."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from srmark.question import Question
from srmark.settings import SRSettings
from srmark.topic_path import TopicPathList

log = logging.getLogger(__name__)


class NoteFile(Protocol):
    """Async access to a note's full text."""

    async def read(self) -> str: ...

    async def write(self, text: str) -> None: ...


@dataclass(frozen=True, slots=True)
class PathNoteFile:
    """``NoteFile`` on the local filesystem; line endings pass through unchanged."""

    path: Path

    def _read(self) -> str:
        with self.path.open(encoding="utf-8", newline="") as f:
            return f.read()

    def _write(self, text: str) -> None:
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)

    async def read(self) -> str:
        return await asyncio.to_thread(self._read)

    async def write(self, text: str) -> None:
        await asyncio.to_thread(self._write, text)


@dataclass(slots=True)
class Note:
    file: NoteFile
    topic_path_list: TopicPathList = field(default_factory=TopicPathList)
    questions: list[Question] = field(default_factory=list)

    def set_question_list(self, questions: list[Question]) -> None:
        self.questions = questions
        for question in questions:
            question.note = self

    @property
    def has_changed(self) -> bool:
        return any(q.has_changed for q in self.questions)

    async def write_note_file(self, settings: SRSettings) -> int:
        """Rewrite every changed question in one read/write cycle.

        Rewrites are applied in order, each on the previous one's output.
        Returns the number of questions written; the file is only written
        when that number is non-zero.
        """
        changed = [q for q in self.questions if q.has_changed]
        if not changed:
            return 0

        text = await self.file.read()
        written: list[Question] = []
        for question in changed:
            before = question.question_text
            text = question.update_question_text(text, settings)
            if question.question_text is not before:
                written.append(question)
        if not written:
            return 0

        await self.file.write(text)
        for question in written:
            question.has_changed = False
        log.debug("wrote %d of %d changed questions", len(written), len(changed))
        return len(written)
