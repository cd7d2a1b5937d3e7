# logos/core/word_list.py
# keyword lookup used by metrics.words_in

from __future__ import annotations

from typing import Iterable, Iterator

from logos.context.tokenizer import split_words


class WordList:
    """
    Immutable set of words for exact, case-sensitive membership tests.
    "Data" and "data" are different entries; no normalisation is applied.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(words)

    @classmethod
    def from_text(cls, text: str) -> "WordList":
        """Every word found in `text` (one per line, comma separated, ...)."""
        words = []
        for line in text.splitlines():
            words.extend(split_words(line))
        return cls(words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"
