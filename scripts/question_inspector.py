#!/usr/bin/env python3
"""Parse question spans and show how they split and re-serialize.

Input is a JSONL file with one span per line::

    {"text": "#flashcards/science  Q2::A2 <!--SR:!2023-10-16,34,290-->"}

Optional keys per record: ``text_direction`` ("ltr"/"rtl", default "ltr"),
``card_type`` (default "single_line_basic"), ``first_line_num``.

With ``--note`` the spans are located in that note; ``--apply`` also writes
the canonical form of every span back to the note.

Usage::

    python3 scripts/question_inspector.py --spans spans.jsonl [--settings data.json]
    python3 scripts/question_inspector.py --spans spans.jsonl --note note.md --apply
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from srmark.card import Card
from srmark.card_schedule import parse_card_schedule_info
from srmark.io_utils import dump_json, load_jsonl, save_json
from srmark.note import Note, PathNoteFile
from srmark.question import ParsedQuestionInfo, Question
from srmark.settings import SRSettings
from srmark.topic_path import TopicPathList

log = logging.getLogger("question_inspector")


def build_question(record: dict[str, Any], settings: SRSettings) -> Question:
    """Build a question (with one card per schedule entry) from a JSONL record."""
    text = record.get("text")
    if not isinstance(text, str):
        raise ValueError(f"record has no 'text' string: {record!r}")
    first_line = int(record.get("first_line_num", 0))
    info = ParsedQuestionInfo(
        card_type=record.get("card_type", "single_line_basic"),
        text=text,
        first_line_num=first_line,
        last_line_num=first_line + text.count("\n"),
    )
    question = Question.create(
        settings,
        info,
        TopicPathList(),
        record.get("text_direction", "ltr"),
        [],
    )
    schedules = parse_card_schedule_info(text) or [None]
    question.set_card_list([
        Card(card_idx=i, front=question.question_text.actual_question, back="", schedule_info=s)
        for i, s in enumerate(schedules)
    ])
    return question


def describe_question(question: Question, settings: SRSettings) -> dict[str, Any]:
    qt = question.question_text
    tp = qt.topic_path_with_ws
    formatted = question.format_for_note(settings)
    return {
        "original": qt.original,
        "topic_path": tp.topic_path.format() if tp is not None else None,
        "pre_topic_path_ws": tp.pre_ws if tp is not None else None,
        "post_topic_path_ws": tp.post_ws if tp is not None else None,
        "actual_question": qt.actual_question,
        "block_id": qt.block_id,
        "text_direction": qt.text_direction,
        "text_hash": qt.text_hash,
        "ends_with_code_block": qt.ends_with_code_block(),
        "has_edit_later_tag": question.has_edit_later_tag,
        "schedules": [
            c.schedule_info.format_schedule() if c.schedule_info is not None else None
            for c in question.cards
        ],
        "formatted": formatted,
        "unchanged": formatted == qt.original.rstrip(),
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Question span inspector")
    parser.add_argument("--spans", type=Path, required=True)
    parser.add_argument("--settings", type=Path, default=None)
    parser.add_argument("--note", type=Path, default=None)
    parser.add_argument("--apply", action="store_true")
    parser.add_argument("--report-out", type=Path, default=None)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if args.apply and args.note is None:
        parser.error("--apply requires --note")

    settings = SRSettings.from_json_file(args.settings) if args.settings else SRSettings()
    questions = [build_question(r, settings) for r in load_jsonl(args.spans)]
    report: dict[str, Any] = {
        "questions": [describe_question(q, settings) for q in questions],
    }

    if args.note is not None:
        note = Note(file=PathNoteFile(args.note))
        note.set_question_list(questions)
        note_text = asyncio.run(note.file.read())
        report["found_in_note"] = [q.question_text.original in note_text for q in questions]
        if args.apply:
            for q in questions:
                q.has_changed = True
            report["written"] = asyncio.run(note.write_note_file(settings))
            log.info("rewrote %d question(s) in %s", report["written"], args.note)

    if args.report_out is not None:
        save_json(report, args.report_out)
    print(dump_json(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
