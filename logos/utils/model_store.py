# model_store.py - simple persistence layer for Logos

# handles reading inputs and saving/loading models:
# - publication bodies (plain UTF-8 text files)
# - word lists (any text file, every word found counts)
# - Markov matrices (JSON, see MatrixExport)

import json
import os
from typing import Optional

from logos.context.body import StringPublicationBody
from logos.core.markov_matrix import MarkovMatrix, ngram_size_of
from logos.core.ngram import NGramDecodeError
from logos.core.protocols import MatrixExport
from logos.core.word_list import WordList
from logos.utils.logger_utils import Log

FORMAT_VERSION = 1


class ModelStoreError(RuntimeError):
    """Raised when a file cannot be read, written or parsed."""


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        Log.error(f"[model_store] read {path}: {e}")
        raise ModelStoreError(f"cannot read {path}: {e}") from e


# Inputs ---------------------------------------------------------------------
def load_body(path: str) -> StringPublicationBody:
    """Load a text file as a publication body."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            body = StringPublicationBody.from_reader(f)
    except (OSError, UnicodeDecodeError) as e:
        Log.error(f"[model_store] read {path}: {e}")
        raise ModelStoreError(f"cannot read {path}: {e}") from e
    Log.debug(f"[model_store] Loaded body {path} ({body.line_count} lines, {body.word_count} words)")
    return body


def load_word_list(path: str) -> WordList:
    words = WordList.from_text(_read_text(path))
    Log.debug(f"[model_store] Loaded word list {path} ({len(words)} words)")
    return words


# Markov Matrix Persistence -------------------------
def save_matrix(matrix: MarkovMatrix, path: str, ngram_size: Optional[int] = None):
    """
    Save a Markov matrix to disk, in JSON format.
    Args:
        matrix: the matrix to store
        path: destination file, parent directories are created
        ngram_size: recorded in the document; inferred from the keys when None
    """
    doc: MatrixExport = {
        "version": FORMAT_VERSION,
        "ngram_size": ngram_size if ngram_size is not None else ngram_size_of(matrix),
        "rows": matrix.to_dict(),
    }
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(doc, f, indent=2, sort_keys=True)
    except OSError as e:
        Log.error(f"[model_store] save_matrix {path}: {e}")
        raise ModelStoreError(f"cannot write {path}: {e}") from e
    Log.info(f"[model_store] Saved Markov matrix ({len(matrix)} rows) to {path}")


def load_matrix(path: str) -> MarkovMatrix:
    """
    Load a Markov matrix saved by save_matrix.
    Returns:
        MarkovMatrix: the stored matrix, or an empty one if the file is missing.
    """
    if not os.path.exists(path):
        Log.warning(f"[model_store] {path} not found, using an empty matrix")
        return MarkovMatrix()
    try:
        doc = json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        Log.error(f"[model_store] load_matrix {path}: {e}")
        raise ModelStoreError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(doc, dict) or not isinstance(doc.get("rows"), dict):
        raise ModelStoreError(f"{path} has no 'rows' mapping")
    if doc.get("version") != FORMAT_VERSION:
        raise ModelStoreError(f"{path}: unsupported format version {doc.get('version')!r}")
    try:
        matrix = MarkovMatrix.from_dict(doc["rows"])
    except (NGramDecodeError, TypeError, ValueError) as e:
        Log.error(f"[model_store] load_matrix {path}: {e}")
        raise ModelStoreError(f"{path} holds a malformed matrix: {e}") from e
    Log.info(f"[model_store] Loaded Markov matrix ({len(matrix)} rows) from {path}")
    return matrix
