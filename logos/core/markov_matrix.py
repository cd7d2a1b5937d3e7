# markov_matrix.py
# first-order Markov model over n-grams: transition counts, then row-normalized probabilities.

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .ngram import NGram, NGramDecodeError
from .protocols import MarkovRows, PublicationBody

logger = logging.getLogger(__name__)

Weight = float
Successors = List[Tuple[NGram, Weight]]


def _check_size(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"n-gram size must be a positive int, got {n!r}")
    return n


class MarkovMatrix:
    """
    Transition table between consecutive n-grams, keyed by encoded n-gram:
      from_key -> {to_key -> weight}

    Weights are raw counts while a matrix is being accumulated and
    conditional probabilities once normalized() has been applied. A pair that
    was never observed reads as 0.0.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, Dict[str, Weight]] = {}

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def set_probability(self, from_: NGram, to: NGram, value: Weight) -> None:
        row = self._rows.get(from_.encode())
        if row is None:
            row = self._rows[from_.encode()] = {}
        row[to.encode()] = float(value)

    def get_probability(self, from_: NGram, to: NGram) -> Weight:
        row = self._rows.get(from_.encode())
        if row is None:
            return 0.0
        return row.get(to.encode(), 0.0)

    def increment(self, from_: NGram, to: NGram, amount: Weight = 1.0) -> None:
        self.set_probability(from_, to, self.get_probability(from_, to) + amount)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------
    def row(self, from_: NGram) -> Dict[NGram, Weight]:
        """Outgoing weights of `from_` keyed by decoded n-gram (empty if unseen)."""
        return {NGram.decode(k): v for k, v in self._rows.get(from_.encode(), {}).items()}

    def rows(self) -> Iterator[Tuple[NGram, Dict[NGram, Weight]]]:
        for key in sorted(self._rows):
            yield NGram.decode(key), {NGram.decode(k): v for k, v in self._rows[key].items()}

    def row_total(self, from_: NGram) -> Weight:
        return sum(self._rows.get(from_.encode(), {}).values())

    def top_next(self, from_: NGram, topn: int = 5) -> Successors:
        """
        Most likely successors of `from_` as (ngram, weight), highest first.
        Ties are broken by encoded key so the order is deterministic.
        """
        if topn < 0:
            raise ValueError(f"topn must be >= 0, got {topn}")
        row = self._rows.get(from_.encode())
        if not row:
            return []
        ranked = sorted(row.items(), key=lambda kv: (-kv[1], kv[0]))
        return [(NGram.decode(k), w) for k, w in ranked[:topn]]

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------
    def normalized(self) -> "MarkovMatrix":
        """
        Return a new matrix in which every row is divided by its total, so
        each observed row sums to 1.0. This matrix is left unchanged.
        """
        res = MarkovMatrix()
        for key, row in self._rows.items():
            total = sum(row.values())
            if total <= 0:
                continue
            res._rows[key] = {k: v / total for k, v in row.items()}
        return res

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_words(cls, words: Iterable[str], n: int) -> "MarkovMatrix":
        """
        Slide a window of n + 1 words over the stream: the first n words are
        the "from" n-gram, the last n the "to" n-gram. Streams shorter than
        n + 1 words give an empty matrix.
        """
        _check_size(n)
        counts = cls()
        window: deque = deque()
        seen = 0
        for w in words:
            seen += 1
            window.append(w)
            if len(window) == n + 1:
                items = tuple(window)
                counts.increment(NGram(n, items[:n]), NGram(n, items[1:]))
                window.popleft()
        logger.debug("markov n=%d: %d words, %d rows", n, seen, len(counts))
        return counts.normalized()

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, from_: object) -> bool:
        return isinstance(from_, NGram) and from_.encode() in self._rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkovMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"MarkovMatrix(rows={len(self._rows)})"

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_dict(self) -> MarkovRows:
        return {k: dict(v) for k, v in self._rows.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, float]]) -> "MarkovMatrix":
        """Inverse of to_dict. Raises NGramDecodeError on a malformed key."""
        m = cls()
        for key, row in data.items():
            NGram.decode(key)
            if not isinstance(row, Mapping):
                raise NGramDecodeError(f"row {key!r} is not a mapping")
            inner: Dict[str, Weight] = {}
            for k, v in row.items():
                NGram.decode(k)
                inner[k] = float(v)
            m._rows[key] = inner
        return m


def construct_markov_matrix(body: PublicationBody, n: int) -> MarkovMatrix:
    """Normalized transition matrix over a full word traversal of `body`."""
    _check_size(n)
    body.reset_word_cursor()

    def _stream() -> Iterator[str]:
        while body.has_next_word():
            yield body.next_word()

    return MarkovMatrix.from_words(_stream(), n)


def ngram_size_of(matrix: MarkovMatrix) -> Optional[int]:
    """Size of the n-grams stored in `matrix`, or None when it is empty."""
    for key in matrix.to_dict():
        return NGram.decode(key).size
    return None
