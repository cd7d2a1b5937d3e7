# logos/context/__init__.py
# text splitting and the traversable publication body

from .tokenizer import split_words, tokenize_lines, TokenizedText  # text -> lines and words
from .body import StringPublicationBody, CursorExhaustedError  # in-memory body with line/word cursors

__all__ = [
    "split_words",
    "tokenize_lines",
    "TokenizedText",
    "StringPublicationBody",
    "CursorExhaustedError",
]
