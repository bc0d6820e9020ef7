# tests/test_suggester.py - merge/rank behaviour of the query facade

from typeahead.core.ranker import FrequencyRanker
from typeahead.core.suggester import Suggester


def test_scenario_cat_car_cart_dog(suggester):
    assert suggester.suggest("ca") == ["cat", "car", "cart"]
    suggester.insert("cat")
    assert suggester.frequency_of("cat") == 2
    assert suggester.suggest("ca")[0] == "cat"


def test_substring_matches_are_merged_in():
    s = Suggester()
    s.load(["scar", "car", "oscar", "cargo", "scar"])
    out = s.suggest("car")
    assert out[0] == "scar"
    assert sorted(out) == ["car", "cargo", "oscar", "scar"]


def test_results_are_unique_and_capped_at_five():
    s = Suggester()
    words = ["apple", "grape", "banana", "papaya", "mango", "guava", "avocado", "pear"]
    s.load(words + ["banana", "banana", "papaya"])
    out = s.suggest("a")
    assert len(out) == 5
    assert len(set(out)) == 5
    assert out[:2] == ["banana", "papaya"]


def test_scores_never_increase():
    s = Suggester()
    s.load(["ab"] * 2 + ["abc"] * 5 + ["xab"] + ["abab"] * 3)
    scored = s.suggest_scored("ab")
    freqs = [f for _, f in scored]
    assert freqs == sorted(freqs, reverse=True)
    assert scored[0] == ("abc", 5)


def test_topn_override():
    s = Suggester(max_suggestions=2)
    s.load(["one", "bone", "cone", "done"])
    assert len(s.suggest("one")) == 2
    assert len(s.suggest("one", topn=3)) == 3
    assert s.suggest("one", topn=0) == []


def test_repeated_query_is_identical(suggester):
    first = suggester.suggest("a")
    assert suggester.suggest("a") == first
    assert first == ["cat", "car", "cart"]


def test_nothing_indexed():
    s = Suggester()
    assert s.trie.search_prefix("x") == []
    assert s.trie.search_substring("x") == []
    assert s.suggest("x") == []


def test_empty_query_returns_most_frequent_overall(suggester):
    suggester.insert("dog")
    out = suggester.suggest("")
    assert out[0] == "dog"
    assert sorted(out) == ["car", "cart", "cat", "dog"]


def test_alpha_tie_break():
    s = Suggester(ranker=FrequencyRanker(tie_break="alpha"))
    s.load(["cart", "car", "cat"])
    assert s.suggest("ca") == ["car", "cart", "cat"]


def test_independent_instances():
    a, b = Suggester(), Suggester()
    a.insert("alpha")
    assert b.suggest("al") == []
    assert a.suggest("al") == ["alpha"]


def test_load_and_stats():
    s = Suggester()
    assert s.load(["x", "y", "x"]) == 3
    s.suggest("x")
    assert s.stats() == {"distinct_words": 2, "insertions": 3, "queries": 1}
