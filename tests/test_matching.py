import pytest

from lexhelpers import (InvalidInputError, MatchRecord, get_frequencies, get_matches,
                        get_weighted_relative_frequencies, resolve_thresholds)


def _by_token(records):
    return {r.token: r for r in records}


def test_matches_tokens_in_both(lex, doc1):
    out = get_matches(get_frequencies(doc1), {"pos": lex})
    assert set(out) == {"pos"}
    got = _by_token(out["pos"])
    assert got == {
        "a": MatchRecord("a", 2, 3),
        "b": MatchRecord("b", 10, 87),
        "c": MatchRecord("c", 3, -15),
    }


def test_every_category_present_even_if_empty(doc1):
    lexicon = {"hit": {"a": 1.0}, "miss": {"zzz": 2.0}, "blank": {}}
    out = get_matches(get_frequencies(doc1), lexicon)
    assert set(out) == {"hit", "miss", "blank"}
    assert out["miss"] == []
    assert out["blank"] == []
    assert len(out["hit"]) == 1


def test_token_in_multiple_categories():
    freqs = {"good": 2, "bad": 1}
    lexicon = {"pos": {"good": 0.8}, "neg": {"good": -0.1, "bad": 0.9}}
    out = get_matches(freqs, lexicon)
    assert out["pos"] == [MatchRecord("good", 2, 0.8)]
    assert _by_token(out["neg"])["good"].weight == -0.1


def test_threshold_bounds_are_exclusive(lex, doc1):
    freqs = get_frequencies(doc1)
    out = get_matches(freqs, {"x": lex}, min=-15, max=87)
    assert [r.token for r in out["x"]] == ["a"]

    out = get_matches(freqs, {"x": lex}, min=-16, max=88)
    assert {r.token for r in out["x"]} == {"a", "b", "c"}

    out = get_matches(freqs, {"x": lex}, min=3)
    assert {r.token for r in out["x"]} == {"b"}


def test_zero_bounds_are_real_bounds():
    out = get_matches({"p": 1, "n": 1, "z": 1}, {"x": {"p": 1.0, "n": -1.0, "z": 0.0}}, min=0)
    assert [r.token for r in out["x"]] == ["p"]


def test_invalid_input():
    with pytest.raises(InvalidInputError):
        get_matches(None, {"x": {}})
    with pytest.raises(InvalidInputError):
        get_matches({"a": 1}, None)
    with pytest.raises(InvalidInputError):
        get_matches(["a"], {"x": {}})
    with pytest.raises(InvalidInputError):
        get_matches({"a": 1}, {"x": ["a"]})
    with pytest.raises(InvalidInputError):
        get_matches({"a": 1}, {"x": {"a": "heavy"}})
    with pytest.raises(InvalidInputError):
        get_matches({"a": 1}, {"x": {"a": 1}}, min="0")


def test_resolve_thresholds_defaults():
    t = resolve_thresholds()
    assert t.allows(1e300) and t.allows(-1e300)
    assert not resolve_thresholds(0, 1).allows(1)


def test_weighted_relative_frequencies(lex, doc1, doc2):
    got = {tv.token: tv.value for tv in get_weighted_relative_frequencies(lex, get_frequencies(doc1))}
    assert got == {
        "a": float(f"{(2 / 25) * 3:.15g}"),
        "b": float(f"{(10 / 25) * 87:.15g}"),
        "c": float(f"{(3 / 25) * -15:.15g}"),
    }
    got = {tv.token for tv in get_weighted_relative_frequencies(lex, get_frequencies(doc2))}
    assert got == {"a", "b", "c"}
