# logos/core/protocols.py
"""
Protocol interfaces for the Logos core.

Metric functions and the Markov matrix builder depend on these Protocols rather
than on StringPublicationBody, so any backing store (in-memory string,
streamed file, generated text) can be analysed.
Keep this file stable.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Typed structures used across components ------------------------------------

# encoded from-ngram -> encoded to-ngram -> weight
MarkovRows = Dict[str, Dict[str, float]]


class MatrixExport(TypedDict):
    """
    JSON document written by model_store.save_matrix.

    Example:
      {"version": 1, "ngram_size": 1, "rows": {"1.A": {"1.B": 1.0}}}
    """
    version: int
    ngram_size: Optional[int]
    rows: MarkovRows


# Protocols ------------------------------------------------------------------

@runtime_checkable
class PublicationBody(Protocol):
    """Text traversable line by line and word by word with independent cursors."""

    def has_next_line(self) -> bool:
        ...

    def next_line(self) -> str:
        """Return the current line and advance. Raises IndexError when exhausted."""
        ...

    def has_next_word(self) -> bool:
        ...

    def next_word(self) -> str:
        """Return the current word and advance. Raises IndexError when exhausted."""
        ...

    def reset_line_cursor(self) -> None:
        ...

    def reset_word_cursor(self) -> None:
        ...


@runtime_checkable
class WordListProtocol(Protocol):
    """Membership lookup used by metrics.words_in."""

    def contains(self, word: str) -> bool:
        ...
