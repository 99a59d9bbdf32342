"""Tests for srmark.question_text."""
import dataclasses

import pytest

from srmark.hashing import cyrb53
from srmark.question_text import QuestionText, extract_block_id, split_text
from srmark.settings import SRSettings

SETTINGS = SRSettings()


class TestSplitText:
    def test_question_only(self) -> None:
        tp, question, block_id = split_text("Q1::A1", SETTINGS)
        assert tp is None
        assert question == "Q1::A1"
        assert block_id is None

    def test_topic_path(self) -> None:
        tp, question, block_id = split_text("#flashcards/science  Q2::A2", SETTINGS)
        assert tp is not None
        assert tp.topic_path.path == ("flashcards", "science")
        assert tp.pre_ws == ""
        assert tp.post_ws == "  "
        assert question == "Q2::A2"
        assert block_id is None

    def test_all_components(self) -> None:
        text = "  #flashcards/science  Q2::A2 <!--SR:!2023-10-16,34,290--> ^d7cee0"
        tp, question, block_id = split_text(text, SETTINGS)
        assert tp is not None
        assert tp.pre_ws == "  "
        assert tp.post_ws == "  "
        assert question == "Q2::A2"
        assert block_id == "^d7cee0"

    def test_schedule_on_next_line(self) -> None:
        tp, question, block_id = split_text(
            "Q2::A2 ^d7cee0\n<!--SR:!2023-10-16,34,290-->", SETTINGS,
        )
        assert tp is None
        assert question == "Q2::A2"
        assert block_id == "^d7cee0"

    def test_leading_whitespace_kept_without_topic_path(self) -> None:
        tp, question, _ = split_text("    Q1::A1", SETTINGS)
        assert tp is None
        assert question == "    Q1::A1"

    def test_trailing_whitespace_removed(self) -> None:
        _, question, _ = split_text("Q1::A1   \n\n", SETTINGS)
        assert question == "Q1::A1"

    def test_convert_folders_to_decks_drops_topic_path_but_strips_tag(self) -> None:
        settings = SRSettings(convert_folders_to_decks=True)
        tp, question, _ = split_text("  #flashcards/science  Q2::A2", settings)
        assert tp is None
        assert question == "Q2::A2"

    def test_multiline_question(self) -> None:
        text = "#deck Question line\n?\nAnswer ^block-1\n<!--SR:!2023-10-16,34,290-->"
        tp, question, block_id = split_text(text, SETTINGS)
        assert tp is not None
        assert question == "Question line\n?\nAnswer"
        assert block_id == "^block-1"


class TestExtractBlockId:
    def test_present(self) -> None:
        assert extract_block_id("Q2::A2 ^d7cee0") == ("Q2::A2", "^d7cee0")

    def test_dashes_allowed(self) -> None:
        assert extract_block_id("Q ^quote-of-the-day") == ("Q", "^quote-of-the-day")

    def test_invalid_characters_not_matched(self) -> None:
        assert extract_block_id("Q ^abc_def") == ("Q ^abc_def", None)

    def test_requires_preceding_whitespace(self) -> None:
        assert extract_block_id("Q^abc") == ("Q^abc", None)

    def test_not_at_end(self) -> None:
        assert extract_block_id("Q ^abc more") == ("Q ^abc more", None)


class TestQuestionText:
    def test_hash_covers_topic_and_question(self) -> None:
        qt = QuestionText.create("#flashcards/science  Q2::A2", "ltr", SETTINGS)
        assert qt.format_topic_and_question() == "#flashcards/science  Q2::A2"
        assert qt.text_hash == cyrb53("#flashcards/science  Q2::A2")

    def test_hash_ignores_schedule_and_block_id(self) -> None:
        plain = QuestionText.create("Q2::A2", "ltr", SETTINGS)
        decorated = QuestionText.create(
            "Q2::A2 <!--SR:!2023-10-16,34,290--> ^d7cee0", "ltr", SETTINGS,
        )
        other_id = QuestionText.create("Q2::A2 ^other", "ltr", SETTINGS)
        assert plain.text_hash == decorated.text_hash == other_id.text_hash

    def test_hash_sensitive_to_question_and_whitespace(self) -> None:
        base = QuestionText.create("#deck  Q2::A2", "ltr", SETTINGS)
        assert base.text_hash != QuestionText.create("#deck  Q2::A3", "ltr", SETTINGS).text_hash
        assert base.text_hash != QuestionText.create("#deck Q2::A2", "ltr", SETTINGS).text_hash
        assert base.text_hash != QuestionText.create(" #deck  Q2::A2", "ltr", SETTINGS).text_hash
        assert base.text_hash != QuestionText.create("#deck2  Q2::A2", "ltr", SETTINGS).text_hash

    def test_replace_recomputes_hash(self) -> None:
        qt = QuestionText.create("Q1::A1", "ltr", SETTINGS)
        edited = dataclasses.replace(qt, actual_question="Q1::A2")
        assert edited.text_hash == cyrb53("Q1::A2")
        assert qt.text_hash == cyrb53("Q1::A1")

    def test_frozen(self) -> None:
        qt = QuestionText.create("Q1::A1", "ltr", SETTINGS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            qt.actual_question = "x"  # type: ignore[misc]

    def test_ends_with_code_block(self) -> None:
        qt = QuestionText.create("Q\n?\n```\nprint(1)\n```", "ltr", SETTINGS)
        assert qt.ends_with_code_block()
        assert not QuestionText.create("Q1::A1", "ltr", SETTINGS).ends_with_code_block()

    def test_unknown_direction(self) -> None:
        with pytest.raises(ValueError):
            QuestionText.create("Q1::A1", "up", SETTINGS)  # type: ignore[arg-type]
