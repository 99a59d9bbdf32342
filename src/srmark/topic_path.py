"""Hierarchical topic paths carried as ``#tag/sub/tag`` at the start of a question."""
from __future__ import annotations

from dataclasses import dataclass

from srmark.constants import TAG_AT_START_OF_LINE_RE


@dataclass(frozen=True, slots=True)
class TopicPath:
    """A tag split into path segments, e.g. ``("flashcards", "science")``."""

    path: tuple[str, ...]

    def __post_init__(self) -> None:
        for segment in self.path:
            if not segment:
                raise ValueError(f"topic path segments cannot be empty: {self.path!r}")

    @property
    def has_path(self) -> bool:
        return len(self.path) > 0

    @property
    def is_empty_path(self) -> bool:
        return not self.has_path

    def format(self, sep: str = "/") -> str:
        return sep.join(self.path)

    @staticmethod
    def from_tag(tag: str) -> TopicPath:
        """Build from ``#a/b/c``; a missing ``#`` or blank segments are tolerated."""
        body = tag[1:] if tag.startswith("#") else tag
        return TopicPath(tuple(seg for seg in body.split("/") if seg))


def get_topic_path_from_card_text(card_text: str) -> TopicPath | None:
    """Return the topic path tagged at the start of ``card_text``, if any."""
    m = TAG_AT_START_OF_LINE_RE.match(card_text.lstrip())
    if not m:
        return None
    return TopicPath.from_tag(m.group(0))


@dataclass(frozen=True, slots=True)
class TopicPathList:
    """Ordered topic paths that apply to a question or note."""

    items: tuple[TopicPath, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    def format(self, sep: str = "|") -> str:
        return sep.join(tp.format() for tp in self.items)


@dataclass(frozen=True, slots=True)
class TopicPathWithWs:
    """A question's topic path together with the whitespace around it in the source."""

    topic_path: TopicPath
    pre_ws: str
    post_ws: str

    def format_with_ws(self) -> str:
        return f"{self.pre_ws}#{self.topic_path.format()}{self.post_ws}"
