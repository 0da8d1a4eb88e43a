import random

from gopractice.sorting import bubble_sort, quick_sort


def test_bubble_sort_reverse_order():
    values = [5, 4, 3, 2, 1]
    bubble_sort(values)
    assert values == [1, 2, 3, 4, 5]


def test_quick_sort_reverse_order():
    values = [5, 4, 3, 2, 1]
    quick_sort(values)
    assert values == [1, 2, 3, 4, 5]


def test_bubble_sort_with_duplicates():
    values = [5, 5, 3, 2, 1]
    bubble_sort(values)
    assert values == [1, 2, 3, 5, 5]


def test_quick_sort_with_duplicates():
    values = [5, 5, 3, 2, 1]
    quick_sort(values)
    assert values == [1, 2, 3, 5, 5]


def test_bubble_sort_single_value():
    values = [5]
    bubble_sort(values)
    assert values == [5]


def test_quick_sort_single_value():
    values = [5]
    quick_sort(values)
    assert values == [5]


def test_bubble_sort_empty():
    values = []
    bubble_sort(values)
    assert values == []


def test_quick_sort_empty():
    values = []
    quick_sort(values)
    assert values == []


def test_bubble_sort_already_sorted():
    values = list(range(30))
    bubble_sort(values)
    assert values == list(range(30))


def test_quick_sort_already_sorted():
    values = list(range(30))
    quick_sort(values)
    assert values == list(range(30))


def test_bubble_sort_random_lists_match_sorted():
    rng = random.Random(1234)
    for _ in range(200):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
        expected = sorted(values)
        bubble_sort(values)
        assert values == expected


def test_quick_sort_random_lists_match_sorted():
    rng = random.Random(1234)
    for _ in range(200):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
        expected = sorted(values)
        quick_sort(values)
        assert values == expected


def test_bubble_sort_is_in_place_and_returns_none():
    values = [3, 1, 2]
    same = values
    result = bubble_sort(values)
    assert result is None
    assert same is values
    assert values == [1, 2, 3]


def test_quick_sort_is_in_place_and_returns_none():
    values = [3, 1, 2]
    same = values
    result = quick_sort(values)
    assert result is None
    assert same is values
    assert values == [1, 2, 3]