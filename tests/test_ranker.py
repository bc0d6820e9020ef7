# tests/test_ranker.py
import pytest

from typeahead.core.ranker import FrequencyRanker, RankerError

FREQ = {"a": 1, "b": 3, "c": 3, "d": 2}


def freq(word):
    return FREQ.get(word, 0)


def test_merge_keeps_first_seen_order():
    assert FrequencyRanker.merge(["a", "b", "a"], ["c", "b"], []) == ["a", "b", "c"]


def test_rank_orders_by_frequency():
    ranked = FrequencyRanker().rank(["a", "d", "b"], freq)
    assert ranked == [("b", 3), ("d", 2), ("a", 1)]


def test_rank_tie_break_encounter_order():
    fr = FrequencyRanker()
    assert fr.rank(["c", "b"], freq) == [("c", 3), ("b", 3)]
    assert fr.rank(["b", "c"], freq) == [("b", 3), ("c", 3)]


def test_rank_tie_break_lexicographic():
    fr = FrequencyRanker(tie_break="alpha")
    assert fr.rank(["c", "b"], freq) == [("b", 3), ("c", 3)]


def test_rank_topn():
    fr = FrequencyRanker()
    assert len(fr.rank(["a", "b", "c", "d"], freq, topn=2)) == 2
    assert fr.rank(["a", "b"], freq, topn=0) == []


def test_rank_scores_duplicates_once():
    assert FrequencyRanker().rank(["a", "a", "b"], freq) == [("b", 3), ("a", 1)]


def test_merge_and_rank():
    out = FrequencyRanker().merge_and_rank([["a", "b"], ["d", "a", "x"]], freq, topn=3)
    assert out == [("b", 3), ("d", 2), ("a", 1)]


def test_unknown_tie_break():
    with pytest.raises(RankerError):
        FrequencyRanker(tie_break="random")
    assert issubclass(RankerError, ValueError)
