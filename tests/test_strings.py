import pytest

from bacalgo.strings import kmp_search, main

LONG_LINE = "abcbaccabcaabcaabaabacabacabacababacabcaabadcabaacbacabaaa"


def test_demo_case():
    assert kmp_search("aba", "ababacababxs") == [0, 2, 6]


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("abacaba", LONG_LINE),
        ("xxx", "xxxxxxxxhasdfbckknbadpaojojanxc"),
        ("abacaba", "abacabas"),
        ("aba", "ababacababxs"),
    ],
)
def test_reported_offsets_are_real_matches(pattern, text):
    for offset in kmp_search(pattern, text):
        assert text[offset:offset + len(pattern)] == pattern


def test_pattern_at_start():
    assert kmp_search("abacaba", "abacabas")[0] == 0


def test_pattern_longer_than_text():
    assert kmp_search("abacaba", "abaca") == []


def test_empty_text():
    assert kmp_search("xxx", "") == []


def test_absent_pattern():
    assert kmp_search("xxx", "abacabas") == []


def test_empty_pattern_reports_every_position():
    text = "abaca"
    assert kmp_search("", text) == list(range(1, len(text) + 1))


@pytest.mark.parametrize("char", ["a", "b", "c"])
def test_single_character_pattern(char):
    expected = [i for i, c in enumerate(LONG_LINE) if c == char]
    assert kmp_search(char, LONG_LINE) == expected


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "0\t2\t6\t\n"


def test_main_arguments(capsys):
    assert main(["xyz", "abc"]) == 0
    assert capsys.readouterr().out == "\n"