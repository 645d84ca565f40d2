import pytest

from shortcutter.fuzzy import find

DATA = ["Ctrl+A Beginning of line", "Ctrl+E End of line", "Alt+F Forward word", "Tab Complete"]


def test_empty_pattern_matches_nothing():
    assert find("", DATA) == []


def test_no_match():
    assert find("zzzzz", DATA) == []


@pytest.mark.parametrize("pattern", ["ctrl", "word", "line", "tc"])
def test_matched_indexes_spell_pattern(pattern):
    results = find(pattern, DATA)
    assert results
    for match in results:
        assert match.str == DATA[match.index]
        letters = "".join(match.str[i] for i in match.matched_indexes)
        assert letters.lower() == pattern.lower()
        assert match.matched_indexes == sorted(match.matched_indexes)


def test_sorted_by_score():
    results = find("l", DATA)
    scores = [match.score for match in results]
    assert scores == sorted(scores, reverse=True)


def test_case_insensitive():
    assert {m.index for m in find("CTRL", DATA)} == {0, 1}


def test_prefix_ranks_first():
    results = find("tab", ["xxtxaxb", "Tab"])
    assert results[0].str == "Tab"