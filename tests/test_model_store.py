# tests/test_model_store.py
import json

import pytest

from logos.core.markov_matrix import MarkovMatrix
from logos.utils import model_store
from logos.utils.model_store import ModelStoreError


def test_save_and_load_matrix(tmp_path):
    m = MarkovMatrix.from_words("a b c a b d".split(), 2)
    path = tmp_path / "out" / "matrix.json"
    model_store.save_matrix(m, str(path))

    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["version"] == 1
    assert doc["ngram_size"] == 2
    assert doc["rows"]["2.a.b"] == {"2.b.c": 0.5, "2.b.d": 0.5}

    assert model_store.load_matrix(str(path)) == m


def test_load_missing_matrix_is_empty(tmp_path):
    assert len(model_store.load_matrix(str(tmp_path / "missing.json"))) == 0


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps([1, 2]),
        json.dumps({"version": 1}),
        json.dumps({"version": 99, "rows": {}}),
        json.dumps({"version": 1, "rows": {"x": {"1.a": 1.0}}}),
        json.dumps({"version": 1, "rows": {"1.a": {"1.b": "high"}}}),
    ],
)
def test_load_bad_matrix_raises(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ModelStoreError):
        model_store.load_matrix(str(path))


def test_load_body_and_word_list(tmp_path):
    text = tmp_path / "pub.txt"
    text.write_text("This is the body.\n\nOf the paragraph\n", encoding="utf-8")
    words = tmp_path / "words.txt"
    words.write_text("the\nbody\n", encoding="utf-8")

    body = model_store.load_body(str(text))
    assert body.line_count == 2
    assert body.word_count == 7

    wl = model_store.load_word_list(str(words))
    assert wl.contains("the") and wl.contains("body")


def test_load_body_missing_file(tmp_path):
    with pytest.raises(ModelStoreError):
        model_store.load_body(str(tmp_path / "nope.txt"))
