# logos/publication.py
# a scored, authored text wrapping a traversable body

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from logos.context.body import StringPublicationBody
from logos.core.metrics import PublicationReport, analyze
from logos.core.protocols import PublicationBody, WordListProtocol


@dataclass(frozen=True)
class Publication:
    score: float
    author: str
    text: PublicationBody

    @classmethod
    def from_text(cls, text: str, score: float = 0.0, author: str = "") -> "Publication":
        return cls(score=float(score), author=author, text=StringPublicationBody.from_string(text))

    def analyze(
        self,
        ngram_size: int = 1,
        long_word_threshold: int = 6,
        word_list: Optional[WordListProtocol] = None,
    ) -> PublicationReport:
        """Metrics and Markov matrix for this publication's body."""
        return analyze(
            self.text,
            ngram_size=ngram_size,
            long_word_threshold=long_word_threshold,
            word_list=word_list,
        )
