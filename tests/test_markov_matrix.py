# tests/test_markov_matrix.py
import pytest

from logos.context.body import StringPublicationBody
from logos.core.markov_matrix import MarkovMatrix, construct_markov_matrix, ngram_size_of
from logos.core.ngram import NGram, NGramDecodeError

A, B, C = NGram.of("A"), NGram.of("B"), NGram.of("C")


def test_get_probability_defaults_to_zero():
    m = MarkovMatrix()
    assert m.get_probability(A, B) == 0.0
    m.set_probability(A, B, 0.5)
    assert m.get_probability(A, B) == 0.5
    assert m.get_probability(A, C) == 0.0
    assert m.get_probability(B, A) == 0.0


def test_set_probability_upserts():
    m = MarkovMatrix()
    m.set_probability(A, B, 1)
    m.set_probability(A, B, 3)
    m.set_probability(A, C, 1)
    assert m.to_dict() == {"1.A": {"1.B": 3.0, "1.C": 1.0}}
    assert len(m) == 1
    assert A in m and B not in m


def test_unigram_alternation():
    m = MarkovMatrix.from_words(["A", "B", "A", "B"], 1)
    assert len(m) == 2
    assert m.get_probability(A, B) == pytest.approx(1.0)
    assert m.get_probability(B, A) == pytest.approx(1.0)
    assert m.get_probability(A, A) == 0.0


def test_bigram_windows():
    m = MarkovMatrix.from_words("the cat sat the cat ran".split(), 2)
    the_cat = NGram.of("the", "cat")
    assert m.get_probability(the_cat, NGram.of("cat", "sat")) == pytest.approx(0.5)
    assert m.get_probability(the_cat, NGram.of("cat", "ran")) == pytest.approx(0.5)
    assert m.get_probability(NGram.of("cat", "sat"), NGram.of("sat", "the")) == pytest.approx(1.0)
    assert len(m) == 3


@pytest.mark.parametrize("n", [1, 2, 3])
def test_rows_sum_to_one(n):
    words = "a b a c b a c c a b b a c a".split()
    m = MarkovMatrix.from_words(words, n)
    assert len(m) > 0
    for src, row in m.rows():
        assert src.size == n
        assert sum(row.values()) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("words, n", [([], 1), (["a"], 1), (["a", "b"], 2), (["a", "b", "c"], 3)])
def test_short_streams_give_empty_matrix(words, n):
    assert len(MarkovMatrix.from_words(words, n)) == 0


@pytest.mark.parametrize("n", [0, -2, 1.5, True])
def test_invalid_size(n):
    with pytest.raises(ValueError):
        MarkovMatrix.from_words(["a", "b"], n)


def test_normalized_leaves_counts_untouched():
    counts = MarkovMatrix()
    counts.increment(A, B)
    counts.increment(A, B)
    counts.increment(A, C, 2.0)
    probs = counts.normalized()
    assert counts.get_probability(A, B) == 2.0
    assert probs.get_probability(A, B) == pytest.approx(0.5)
    assert counts.row_total(A) == 4.0
    assert probs.row_total(A) == pytest.approx(1.0)


def test_top_next_orders_by_weight_then_key():
    m = MarkovMatrix.from_words("A B A C A B A C A D".split(), 1)
    top = m.top_next(A, topn=2)
    assert [g for g, _ in top] == [B, C]
    assert top[0][1] == pytest.approx(0.4)
    assert m.top_next(NGram.of("Z")) == []


def test_row_decodes_keys():
    m = MarkovMatrix.from_words(["A", "B", "A", "C"], 1)
    assert m.row(A) == {B: pytest.approx(0.5), C: pytest.approx(0.5)}
    assert m.row(C) == {}


def test_dict_export_round_trip():
    m = MarkovMatrix.from_words("x y z x y".split(), 2)
    exported = m.to_dict()
    exported["2.x.y"]["2.y.z"] = 99.0
    assert m.get_probability(NGram.of("x", "y"), NGram.of("y", "z")) == pytest.approx(1.0)
    assert MarkovMatrix.from_dict(m.to_dict()) == m
    assert ngram_size_of(m) == 2
    assert ngram_size_of(MarkovMatrix()) is None


def test_from_dict_rejects_bad_keys():
    with pytest.raises(NGramDecodeError):
        MarkovMatrix.from_dict({"nope": {"1.a": 1.0}})
    with pytest.raises(NGramDecodeError):
        MarkovMatrix.from_dict({"1.a": {"1.": 1.0}})


def test_construct_from_body_resets_word_cursor():
    body = StringPublicationBody.from_string("A B\nA B")
    body.next_word()
    body.next_word()
    m = construct_markov_matrix(body, 1)
    assert len(m) == 2
    assert m.get_probability(B, A) == pytest.approx(1.0)
    assert not body.has_next_word()


def test_construct_from_short_body():
    body = StringPublicationBody.from_string("only")
    assert len(construct_markov_matrix(body, 1)) == 0


def test_top_next_rejects_negative_topn():
    m = MarkovMatrix.from_words("A B A C A D".split(), 1)
    with pytest.raises(ValueError):
        m.top_next(A, topn=-1)
    assert m.top_next(A, topn=0) == []
