import pytest

LEX = {"a": 3, "b": 87, "c": -15}
INTERCEPT = 23.2189

DOC1 = "a a b b b b b b b b b b c c c e e e e e e f f f f".split(" ")
DOC2 = "a a a a a b b b c c c c c c c c d d d d f f f f f f f f f f".split(" ")


@pytest.fixture
def lex():
    return dict(LEX)


@pytest.fixture
def doc1():
    return list(DOC1)


@pytest.fixture
def doc2():
    return list(DOC2)
