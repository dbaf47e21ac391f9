import math

import pytest

from bacalgo.dynamic import (
    chess_king_dyn,
    chess_king_rec,
    knapsack,
    levenshtein_distance,
    main,
)

CORRECT = [(2, 3), (4, 2), (5, 5), (3, 2), (3, 8)]
OVERWEIGHT = [(9, 3), (9, 2), (9, 5), (9, 2), (9, 8)]
ALL_INCLUDED = [(1, 3), (1, 2), (1, 5), (1, 2), (1, 8)]
LAST_INCLUDED = [(9, 3), (9, 2), (9, 5), (9, 2), (3, 8)]
FIRST_INCLUDED = [(2, 3), (9, 2), (9, 5), (9, 2), (9, 8)]
ZEROES1 = [(0, 3), (0, 2), (0, 5), (0, 2), (0, 8)]
ZEROES2 = [(0, 0)] * 5
ZEROES3 = [(2, 0), (4, 0), (5, 0), (3, 0), (3, 0)]
ALL_CASES = [CORRECT, OVERWEIGHT, ALL_INCLUDED, LAST_INCLUDED, FIRST_INCLUDED, [], ZEROES1, ZEROES2, ZEROES3]


@pytest.mark.parametrize("x, y", [(1, 1), (1, 7), (7, 1), (3, 4), (10, 15)])
def test_chess_king_recursive_and_dynamic_agree(x, y):
    assert chess_king_rec(x, y) == chess_king_dyn(x, y)


@pytest.mark.parametrize("x, y", [(2, 2), (5, 3), (10, 15)])
def test_chess_king_matches_binomial(x, y):
    assert chess_king_dyn(x, y) == math.comb(x + y - 2, x - 1)


def test_chess_king_edge_is_single_path():
    assert chess_king_rec(1, 15) == 1
    assert chess_king_dyn(10, 1) == 1


@pytest.mark.parametrize("x, y", [(0, 3), (3, 0)])
def test_chess_king_rejects_zero(x, y):
    with pytest.raises(ValueError):
        chess_king_rec(x, y)
    with pytest.raises(ValueError):
        chess_king_dyn(x, y)


def test_knapsack_correct_case():
    assert knapsack(CORRECT, 6) == 11


def test_knapsack_overweight():
    assert knapsack(OVERWEIGHT, 6) == 0


@pytest.mark.parametrize("items", [ALL_INCLUDED, ZEROES1])
def test_knapsack_everything_fits(items):
    assert knapsack(items, 6) == sum(value for _, value in items)


def test_knapsack_single_fitting_item():
    assert knapsack(LAST_INCLUDED, 6) == LAST_INCLUDED[-1][1]
    assert knapsack(FIRST_INCLUDED, 6) == FIRST_INCLUDED[0][1]


@pytest.mark.parametrize("items", [[], ZEROES2, ZEROES3])
def test_knapsack_nothing_of_value(items):
    assert knapsack(items, 6) == 0


@pytest.mark.parametrize("items", ALL_CASES)
def test_knapsack_zero_capacity(items):
    assert knapsack(items, 0) == 0


@pytest.mark.parametrize("items", ALL_CASES)
def test_knapsack_monotonic_in_capacity(items):
    results = [knapsack(items, c) for c in range(0, 12)]
    assert results == sorted(results)


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(CORRECT, -1)


def test_levenshtein_wiki_examples():
    assert levenshtein_distance("kitten", "sitten") == 1
    assert levenshtein_distance("sitten", "sittin") == 1
    assert levenshtein_distance("sittin", "sitting") == 1
    assert levenshtein_distance("kitten", "sitting") == 3


def test_levenshtein_reversal():
    assert levenshtein_distance("ABCD", "DCBA") == 4


@pytest.mark.parametrize("word", ["", "ABCD", "kitten"])
def test_levenshtein_identity_and_empty(word):
    assert levenshtein_distance(word, word) == 0
    assert levenshtein_distance(word, "") == len(word)
    assert levenshtein_distance("", word) == len(word)


@pytest.mark.parametrize(
    "a, b, c",
    [("ABCD", "XCD", "CBAD"), ("kitten", "sitting", "sittin"), ("ABCD", "BXXX", "D")],
)
def test_levenshtein_metric_properties(a, b, c):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
    assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


@pytest.mark.parametrize("b", ["AXCD", "XXCD", "XXXD", "XXXX", "DBCD", "DCBX"])
def test_levenshtein_same_length_bounded_by_hamming(b):
    a = "ABCD"
    hamming = sum(x != y for x, y in zip(a, b))
    assert levenshtein_distance(a, b) <= hamming


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == lines[1] == str(math.comb(23, 9))
    assert "levenshtein_distance is testing..." in lines
    assert lines[-1] == "3"