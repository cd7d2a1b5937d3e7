# logos/core/ngram.py
# fixed-size word tuples and their canonical string keys

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

Word = str

# punctuation never survives split_words, so it cannot occur inside a token
NGRAM_DELIMITER = "."


class NGramDecodeError(ValueError):
    """Raised when a string is not a valid encoded n-gram."""


@dataclass(frozen=True)
class NGram:
    """
    An ordered sequence of exactly `size` words.

    Two n-grams are equal iff they have the same size and the same words in
    the same order. encode() gives the key used by MarkovMatrix, e.g.
    NGram(2, ("the", "body")).encode() == "2.the.body".
    """
    size: int
    words: Tuple[Word, ...]

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise ValueError(f"n-gram size must be a positive int, got {self.size!r}")
        words = tuple(self.words)
        if len(words) != self.size:
            raise ValueError(f"expected {self.size} words, got {len(words)}")
        for w in words:
            if not w or NGRAM_DELIMITER in w:
                raise ValueError(f"invalid n-gram word {w!r}")
        # frozen: bypass __setattr__ to normalise the sequence to a tuple
        object.__setattr__(self, "words", words)

    @classmethod
    def of(cls, *words: Word) -> "NGram":
        return cls(len(words), words)

    def encode(self) -> str:
        return NGRAM_DELIMITER.join((str(self.size),) + self.words)

    @classmethod
    def decode(cls, key: str) -> "NGram":
        parts = key.split(NGRAM_DELIMITER)
        head, words = parts[0], parts[1:]
        if not head.isdigit():
            raise NGramDecodeError(f"missing n-gram size in {key!r}")
        try:
            return cls(int(head), tuple(words))
        except ValueError as e:
            raise NGramDecodeError(f"malformed n-gram key {key!r}: {e}") from e

    def shift(self, word: Word) -> "NGram":
        """The next n-gram of a sliding window: drop the oldest word, append `word`."""
        return NGram(self.size, self.words[1:] + (word,))

    def __str__(self) -> str:
        return " ".join(self.words)


def encode_ngram(words: Sequence[Word]) -> str:
    return NGram(len(words), tuple(words)).encode()


def decode_ngram(key: str) -> NGram:
    return NGram.decode(key)
