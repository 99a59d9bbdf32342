"""Lossless parsing and re-serialization of spaced-repetition questions in markdown notes."""

from srmark.card import Card
from srmark.card_schedule import (
    CardScheduleInfo,
    format_schedule_comment,
    parse_card_schedule_info,
    remove_card_schedule_info,
)
from srmark.hashing import cyrb53
from srmark.note import Note, NoteFile, PathNoteFile
from srmark.question import CardType, ParsedQuestionInfo, Question
from srmark.question_text import QuestionText, TextDirection, extract_block_id, split_text
from srmark.settings import SRSettings
from srmark.text_finder import find_and_replace
from srmark.topic_path import (
    TopicPath,
    TopicPathList,
    TopicPathWithWs,
    get_topic_path_from_card_text,
)

__all__ = [
    "Card",
    "CardScheduleInfo",
    "CardType",
    "Note",
    "NoteFile",
    "ParsedQuestionInfo",
    "PathNoteFile",
    "Question",
    "QuestionText",
    "SRSettings",
    "TextDirection",
    "TopicPath",
    "TopicPathList",
    "TopicPathWithWs",
    "cyrb53",
    "extract_block_id",
    "find_and_replace",
    "format_schedule_comment",
    "get_topic_path_from_card_text",
    "parse_card_schedule_info",
    "remove_card_schedule_info",
    "split_text",
]
