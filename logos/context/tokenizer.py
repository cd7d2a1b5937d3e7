# logos/context/tokenizer.py
# splits raw text into lines and words, dropping punctuation and blank lines

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)


def _is_separator(ch: str) -> bool:
    """Whitespace, punctuation (P*) and symbols (S*) all break words."""
    if ch.isspace():
        return True
    cat = unicodedata.category(ch)
    return cat[0] in ("P", "S")


def split_words(line: str) -> List[str]:
    """
    Return the words that make up `line`, with punctuation and spaces removed.
    Runs of separators collapse, so no empty token is ever produced.
    """
    if not line:
        return []
    out: List[str] = []
    buf: List[str] = []
    for ch in line:
        if _is_separator(ch):
            if buf:
                out.append("".join(buf))
                buf = []
            continue
        buf.append(ch)
    if buf:
        out.append("".join(buf))
    return out


@dataclass(frozen=True)
class TokenizedText:
    """
    Index-aligned lines and their words.
    Every retained line has at least one word.
    """
    lines: Tuple[str, ...] = ()
    words: Tuple[Tuple[str, ...], ...] = ()

    def __post_init__(self) -> None:
        if len(self.lines) != len(self.words):
            raise ValueError(
                f"lines and words must be aligned ({len(self.lines)} != {len(self.words)})"
            )
        for i, toks in enumerate(self.words):
            if not toks:
                raise ValueError(f"line {i} has no words")

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def word_count(self) -> int:
        return sum(len(toks) for toks in self.words)

    def __len__(self) -> int:
        return len(self.lines)


def tokenize_lines(lines: Iterable[str]) -> TokenizedText:
    """
    Build TokenizedText from a stream of lines.
    Lines without any word (blank or punctuation only) are dropped here and
    nowhere else.
    """
    kept_lines: List[str] = []
    kept_words: List[Tuple[str, ...]] = []
    dropped = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        toks = split_words(line)
        if not toks:
            dropped += 1
            continue
        kept_lines.append(line)
        kept_words.append(tuple(toks))
    logger.debug("tokenized %d lines (%d dropped)", len(kept_lines), dropped)
    return TokenizedText(lines=tuple(kept_lines), words=tuple(kept_words))
