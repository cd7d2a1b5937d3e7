"""
logos.core

The analysis engine.
Contains:
 - the publication body interface (PublicationBody)
 - n-grams and their canonical string keys (NGram)
 - the n-gram transition model (MarkovMatrix, construct_markov_matrix)
 - keyword lookup (WordList)
 - measures of publication quality (metrics)
"""

from .protocols import PublicationBody, MatrixExport, MarkovRows
from .ngram import NGram, NGramDecodeError, encode_ngram, decode_ngram
from .markov_matrix import MarkovMatrix, construct_markov_matrix
from .word_list import WordList
from .metrics import PublicationReport, analyze

__all__ = [
    "PublicationBody",
    "MatrixExport",
    "MarkovRows",
    "NGram",
    "NGramDecodeError",
    "encode_ngram",
    "decode_ngram",
    "MarkovMatrix",
    "construct_markov_matrix",
    "WordList",
    "PublicationReport",
    "analyze",
]
