# logos/core/metrics.py
"""
Measures of publication quality.

Every metric resets the cursor it walks before scanning, so results never
depend on what a previous metric left behind. Metrics must run one after
another on a shared body, never interleaved.

Averages over an empty body (zero lines or zero words) are math.nan rather
than an exception: callers should read nan as "no data".
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Optional

from logos.context.tokenizer import split_words

from .markov_matrix import MarkovMatrix, construct_markov_matrix
from .protocols import PublicationBody, WordListProtocol


def _words(body: PublicationBody) -> Iterator[str]:
    body.reset_word_cursor()
    while body.has_next_word():
        yield body.next_word()


def _lines(body: PublicationBody) -> Iterator[str]:
    body.reset_line_cursor()
    while body.has_next_line():
        yield body.next_line()


def word_count(body: PublicationBody) -> int:
    return sum(1 for _ in _words(body))


def line_count(body: PublicationBody) -> int:
    return sum(1 for _ in _lines(body))


def average_words_per_line(body: PublicationBody) -> float:
    """Mean number of words per line, re-splitting each line's text."""
    total = 0
    count = 0
    for line in _lines(body):
        total += len(split_words(line))
        count += 1
    if count == 0:
        return math.nan
    return total / count


def average_word_length(body: PublicationBody) -> float:
    """Mean length of a word in characters."""
    total = 0
    count = 0
    for w in _words(body):
        total += len(w)
        count += 1
    if count == 0:
        return math.nan
    return total / count


def words_longer_than(body: PublicationBody, threshold: int) -> int:
    return sum(1 for w in _words(body) if len(w) > threshold)


def words_in(body: PublicationBody, word_list: WordListProtocol) -> int:
    return sum(1 for w in _words(body) if word_list.contains(w))


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass
class PublicationReport:
    """All metrics for one body, plus its Markov matrix."""
    line_count: int
    word_count: int
    average_words_per_line: float
    average_word_length: float
    long_word_threshold: int
    words_longer_than: int
    words_in_list: Optional[int]
    ngram_size: int
    markov: MarkovMatrix = field(repr=False, default_factory=MarkovMatrix)

    def metrics(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "markov"}

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; nan averages become None."""
        d = self.metrics()
        for k in ("average_words_per_line", "average_word_length"):
            if math.isnan(d[k]):
                d[k] = None
        d["markov_rows"] = len(self.markov)
        d["markov"] = self.markov.to_dict()
        return d

    def top_transitions(self, topn: int = 5) -> List[tuple]:
        """(from, to, weight) triples with the highest weights across all rows."""
        if topn < 0:
            raise ValueError(f"topn must be >= 0, got {topn}")
        triples = []
        for src, row in self.markov.rows():
            for dst, w in row.items():
                triples.append((src, dst, w))
        triples.sort(key=lambda t: (-t[2], t[0].encode(), t[1].encode()))
        return triples[:topn]


def analyze(
    body: PublicationBody,
    ngram_size: int = 1,
    long_word_threshold: int = 6,
    word_list: Optional[WordListProtocol] = None,
) -> PublicationReport:
    """Run every metric and build the Markov matrix, one scan at a time."""
    return PublicationReport(
        line_count=line_count(body),
        word_count=word_count(body),
        average_words_per_line=average_words_per_line(body),
        average_word_length=average_word_length(body),
        long_word_threshold=long_word_threshold,
        words_longer_than=words_longer_than(body, long_word_threshold),
        words_in_list=words_in(body, word_list) if word_list is not None else None,
        ngram_size=ngram_size,
        markov=construct_markov_matrix(body, ngram_size),
    )


__all__ = [
    "word_count",
    "line_count",
    "average_words_per_line",
    "average_word_length",
    "words_longer_than",
    "words_in",
    "analyze",
    "PublicationReport",
]
