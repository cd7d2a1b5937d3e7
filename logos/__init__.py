"""
logos - measures of publication quality and n-gram Markov models over its words.

    from logos import Publication
    report = Publication.from_text(text, score=4.5, author="ada").analyze(ngram_size=2)
"""

from .context import StringPublicationBody, CursorExhaustedError, split_words, tokenize_lines
from .core import MarkovMatrix, NGram, WordList, construct_markov_matrix, analyze
from .publication import Publication

__all__ = [
    "StringPublicationBody",
    "CursorExhaustedError",
    "split_words",
    "tokenize_lines",
    "MarkovMatrix",
    "NGram",
    "WordList",
    "construct_markov_matrix",
    "analyze",
    "Publication",
]

__version__ = "0.1.0"
