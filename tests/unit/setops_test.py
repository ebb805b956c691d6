from operator import itemgetter

from pytest import mark, raises

from ordered import compare_by, difference, intersect, reverse_compare, union


def test_merge_operations_on_overlapping_sequences():
    assert list(union([1, 3, 5], [2, 3, 4])) == [1, 2, 3, 4, 5]
    assert list(intersect([1, 3, 5], [2, 3, 4])) == [3]
    assert list(difference([1, 3, 5], [2, 3, 4])) == [1, 5]


@mark.parametrize(
    "first, second, expected",
    [
        ([1, 1, 1, 2], [1, 3], [1, 1, 2]),
        ([1, 2, 2, 3], [2, 2, 2], [1, 3]),
        ([1, 2, 3], [], [1, 2, 3]),
        ([], [1, 2, 3], []),
        ([1, 2, 3], [1, 2, 3], []),
        ([4, 5], [1, 2, 3], [4, 5]),
    ],
)
def test_difference(first, second, expected):
    assert list(difference(first, second)) == expected


@mark.parametrize(
    "first, second, expected",
    [
        ([1, 2, 2, 2, 3], [2, 2, 4], [2, 2]),
        ([1, 2, 3], [], []),
        ([], [1, 2, 3], []),
        ([1, 3, 5], [2, 4, 6], []),
        ([1, 1], [1, 1, 1], [1, 1]),
    ],
)
def test_intersect(first, second, expected):
    assert list(intersect(first, second)) == expected


@mark.parametrize(
    "first, second, expected",
    [
        ([1, 1, 2], [1, 3], [1, 1, 2, 3]),
        ([1, 2], [3, 4, 5], [1, 2, 3, 4, 5]),
        ([3, 4, 5], [1, 2], [1, 2, 3, 4, 5]),
        ([], [1, 2], [1, 2]),
        ([1, 2], [], [1, 2]),
        ([], [], []),
    ],
)
def test_union(first, second, expected):
    assert list(union(first, second)) == expected


def test_equal_items_are_taken_from_first_sequence():
    by_key = compare_by(itemgetter(0))
    first = [(1, "a"), (2, "a")]
    second = [(2, "b"), (3, "b")]

    assert list(intersect(first, second, compare=by_key)) == [(2, "a")]
    assert list(union(first, second, compare=by_key)) == [(1, "a"), (2, "a"), (3, "b")]
    assert list(difference(first, second, compare=by_key)) == [(1, "a")]


def test_descending_order():
    desc = reverse_compare()
    assert list(difference([5, 3, 1], [4, 3], compare=desc)) == [5, 1]
    assert list(union([5, 3, 1], [4, 3], compare=desc)) == [5, 4, 3, 1]


@mark.parametrize("operation", [difference, intersect, union])
def test_none_argument_fails_before_iteration(operation):
    with raises(ValueError, match="first"):
        operation(None, [1])
    with raises(ValueError, match="second"):
        operation([1], None)


@mark.parametrize("operation", [difference, intersect, union])
def test_results_are_lazy(operation):
    pulled = []

    def source(items):
        for item in items:
            pulled.append(item)
            yield item

    result = operation(source([1, 2, 3]), source([2, 3, 4]))
    assert pulled == []

    next(result)
    assert len(pulled) < 6


def test_results_are_single_pass():
    result = union([1, 3], [2])
    assert list(result) == [1, 2, 3]
    assert list(result) == []
