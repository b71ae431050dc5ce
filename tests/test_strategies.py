"""testy numeracji słów (indeks <-> słowo)"""

import itertools

import pytest

from wordlist.alphabet import Alphabet
from wordlist.exceptions import IndexOutOfRange
from wordlist.strategies import LengthOrderedStrategy


def _abc(max_length=2):
    return LengthOrderedStrategy(Alphabet("abc"), max_length)


def test_default_total():
    """64 znaki, długości 1..4"""
    strategy = LengthOrderedStrategy(Alphabet(), 4)
    assert strategy.total_combinations() == 17043520, "64 + 4096 + 262144 + 16777216"
    assert strategy.total_combinations() == sum(64 ** l for l in range(1, 5))


def test_cumulative_counts():
    """cum[0] = 0, cum[l] = cum[l-1] + N^l"""
    cum = LengthOrderedStrategy(Alphabet(), 4).cumulative_counts()
    assert cum == [0, 64, 4160, 266304, 17043520]
    assert all(a < b for a, b in zip(cum, cum[1:])), "tablica musi rosnąć ściśle"


def test_abc_scenario():
    """alfabet {a,b,c}, długość do 2"""
    strategy = _abc()
    assert strategy.total_combinations() == 12
    assert strategy.word_at(0) == "a"
    assert strategy.word_at(2) == "c"
    assert strategy.word_at(3) == "aa"
    assert strategy.word_at(11) == "cc"


def test_boundaries_default_alphabet():
    """pierwszy znak, ostatni znak, pierwsze słowo dwuznakowe"""
    strategy = LengthOrderedStrategy(Alphabet(), 4)
    cum = strategy.cumulative_counts()
    assert strategy.word_at(0) == "a"
    assert strategy.word_at(cum[1] - 1) == "."
    assert strategy.word_at(cum[1]) == "aa"
    assert strategy.word_at(cum[2]) == "aaa"
    assert strategy.word_at(strategy.total_combinations() - 1) == "...."


def test_length_blocks():
    """słowa z bloku [cum[l-1], cum[l]) mają długość l"""
    strategy = _abc(3)
    cum = strategy.cumulative_counts()
    for l in range(1, 4):
        for pos in range(cum[l - 1], cum[l]):
            assert len(strategy.word_at(pos)) == l, f"indeks {pos} powinien dać słowo długości {l}"
            assert strategy.length_of(pos) == l


def test_bijection_small_alphabet():
    """wszystkie słowa długości 1..3 nad {a,b,c}, każde dokładnie raz i we właściwej kolejności"""
    strategy = _abc(3)
    words = [strategy.word_at(i) for i in range(strategy.total_combinations())]
    expected = [
        "".join(p) for l in range(1, 4) for p in itertools.product("abc", repeat=l)
    ]
    assert words == expected
    assert len(set(words)) == len(words), "dwa indeksy dały to samo słowo"


def test_index_of_is_inverse():
    """index_of(word_at(i)) == i"""
    strategy = LengthOrderedStrategy(Alphabet("xy_."), 3)
    for i in range(strategy.total_combinations()):
        assert strategy.index_of(strategy.word_at(i)) == i
    assert strategy.index_of("x") == 0
    assert strategy.index_of("..") == 4 + 15


def test_index_of_rejects_bad_words():
    strategy = _abc()
    for word in ("", "abc", "ad"):
        with pytest.raises(ValueError):
            strategy.index_of(word)


def test_out_of_range_is_rejected():
    """indeksy spoza [0, total) nie są obcinane ani zawijane"""
    strategy = _abc()
    with pytest.raises(IndexOutOfRange):
        strategy.word_at(12)
    with pytest.raises(IndexOutOfRange):
        strategy.word_at(-1)
    with pytest.raises(IndexError):
        strategy.word_at(10 ** 20)
    with pytest.raises(TypeError):
        strategy.word_at(1.0)


def test_generate_range():
    strategy = _abc()
    assert list(strategy.generate(2, 3)) == ["c", "aa", "ab"]
    assert list(strategy.generate(10, 100)) == ["cb", "cc"], "generate kończy się na total"
    assert list(strategy.generate(0, 0)) == []
    with pytest.raises(IndexOutOfRange):
        list(strategy.generate(12, 1))


def test_estimated_bytes():
    """każde słowo + znak nowej linii"""
    assert _abc().estimated_bytes() == 3 * 2 + 9 * 3
    assert LengthOrderedStrategy(Alphabet(), 4).estimated_bytes() == 64 * 2 + 4096 * 3 + 262144 * 4 + 16777216 * 5


def test_invalid_max_length():
    with pytest.raises(ValueError):
        LengthOrderedStrategy(Alphabet("ab"), 0)
