# logos/context/body.py
"""
StringPublicationBody - an in-memory publication body with two cursors.

The line cursor walks retained lines; the word cursor walks words across line
boundaries as one flat stream. The cursors are independent, so a consumer can
rescan words after scanning lines (or the other way round) without resetting
the other one.

Example:
    body = StringPublicationBody.from_string("This is the body.\\nOf the paragraph")
    while body.has_next_word():
        print(body.next_word())
"""

from __future__ import annotations

import io
from typing import Iterable, TextIO, Tuple

from .tokenizer import TokenizedText, tokenize_lines


class CursorExhaustedError(IndexError):
    """Raised when a cursor is advanced past the end of the body."""


class StringPublicationBody:
    """Publication body backed by already tokenized text held in memory."""

    def __init__(self, tokenized: TokenizedText) -> None:
        self._text = tokenized
        self._line = 0
        # word cursor: (line index, word index)
        self._word_line = 0
        self._word_idx = 0

    # construction ----------------------------------------------------------
    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "StringPublicationBody":
        return cls(tokenize_lines(lines))

    @classmethod
    def from_string(cls, text: str) -> "StringPublicationBody":
        # newlines only, as when reading a file
        return cls.from_reader(io.StringIO(text, newline=None))

    @classmethod
    def from_reader(cls, stream: TextIO) -> "StringPublicationBody":
        """Read every line of a text stream (file object, StringIO...)."""
        return cls.from_lines(stream)

    # content ---------------------------------------------------------------
    @property
    def tokenized(self) -> TokenizedText:
        return self._text

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._text.lines

    @property
    def line_count(self) -> int:
        return self._text.line_count

    @property
    def word_count(self) -> int:
        return self._text.word_count

    def text(self) -> str:
        """Retained lines joined with newlines."""
        return "\n".join(self._text.lines)

    # line cursor -----------------------------------------------------------
    @property
    def line_position(self) -> int:
        return self._line

    def has_next_line(self) -> bool:
        return self._line < self._text.line_count

    def next_line(self) -> str:
        if not self.has_next_line():
            raise CursorExhaustedError(
                f"no line left (position {self._line} of {self._text.line_count})"
            )
        line = self._text.lines[self._line]
        self._line += 1
        return line

    def reset_line_cursor(self) -> None:
        self._line = 0

    # word cursor -----------------------------------------------------------
    @property
    def word_position(self) -> Tuple[int, int]:
        return self._word_line, self._word_idx

    def has_next_word(self) -> bool:
        words = self._text.words
        if self._word_line >= len(words):
            return False
        if self._word_idx < len(words[self._word_line]):
            return True
        # every retained line holds at least one word
        return self._word_line + 1 < len(words)

    def next_word(self) -> str:
        if not self.has_next_word():
            raise CursorExhaustedError(
                f"no word left (position {self._word_line}:{self._word_idx})"
            )
        current = self._text.words[self._word_line]
        word = current[self._word_idx]
        if self._word_idx + 1 >= len(current):
            self._word_line += 1
            self._word_idx = 0
        else:
            self._word_idx += 1
        return word

    def reset_word_cursor(self) -> None:
        self._word_line = 0
        self._word_idx = 0

    # both ------------------------------------------------------------------
    def reset(self) -> None:
        """Reset the line and word cursors together."""
        self.reset_line_cursor()
        self.reset_word_cursor()

    def __repr__(self) -> str:
        return (
            f"StringPublicationBody(lines={self.line_count}, words={self.word_count}, "
            f"line_pos={self._line}, word_pos={self.word_position})"
        )

