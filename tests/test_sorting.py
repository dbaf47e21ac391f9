import pytest

from bacalgo.sorting import (
    INT_MAX,
    ascending_values,
    benchmark,
    bubble_sort,
    descending_values,
    insertion_sort,
    main,
    merge_sort,
    random_values,
    selection_sort,
)

SORTS = [selection_sort, insertion_sort, bubble_sort, merge_sort]

OCCASIONS = [
    "empty case",
    "single case",
    "zeroes case",
    "int_max case",
    "best case",
    "worst case",
    "random case",
]


@pytest.mark.parametrize(
    "data",
    [
        [],
        [1],
        [0] * 10,
        [INT_MAX] * 10,
        list(range(10)),
        list(range(9, -1, -1)),
        [3, 7, 1, 9, 1, 0, 5, 5, 2, 8],
        [-4, 12, -4, 0, 7],
    ],
)
def test_sorts_match_builtin(data):
    expected = sorted(data)

    items = list(data)
    selection_sort(items)
    assert items == expected

    items = list(data)
    insertion_sort(items)
    assert items == expected

    items = list(data)
    bubble_sort(items)
    assert items == expected

    items = list(data)
    merge_sort(items)
    assert items == expected


@pytest.mark.parametrize("sort_func", SORTS)
def test_sorts_random_values(sort_func):
    data = random_values(200)
    items = list(data)
    sort_func(items)
    assert items == sorted(data)


def test_sorts_strings():
    original = ["pear", "apple", "fig", "banana", "apple"]
    expected = ["apple", "apple", "banana", "fig", "pear"]

    words = list(original)
    selection_sort(words)
    assert words == expected

    words = list(original)
    insertion_sort(words)
    assert words == expected

    words = list(original)
    bubble_sort(words)
    assert words == expected

    words = list(original)
    merge_sort(words)
    assert words == expected


@pytest.mark.parametrize("sort_func", SORTS)
def test_sort_keeps_same_list_object(sort_func):
    items = descending_values(20)
    alias = items
    sort_func(items)
    assert alias is items
    assert alias == ascending_values(20)


def test_ascending_values():
    assert ascending_values(5) == [0, 1, 2, 3, 4]
    assert ascending_values(0) == []


def test_descending_values():
    assert descending_values(5) == [4, 3, 2, 1, 0]
    assert descending_values(0) == []


def test_random_values_are_digits():
    values = random_values(500)
    assert len(values) == 500
    assert all(0 <= v < 10 for v in values)


@pytest.mark.parametrize("sort_func", SORTS)
def test_benchmark_reports_every_case(sort_func):
    timings = benchmark(sort_func, 30)
    assert list(timings) == OCCASIONS
    assert all(ms >= 0 for ms in timings.values())


def test_benchmark_rejects_negative_size():
    with pytest.raises(ValueError):
        benchmark(merge_sort, -1)


def test_main_prints_titles_and_cases(capsys):
    assert main(["--size", "20"]) == 0
    out = capsys.readouterr().out
    for title in ["Selection sort", "Insertion sort", "Bubble sort", "Merge sort"]:
        assert f"{title} is testing...\n" in out
    assert out.count("\trandom case\ttime spended: ") == 4