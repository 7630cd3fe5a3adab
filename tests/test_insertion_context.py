import math

from assertpack.numeric import describe_position, format_sorted_window, locate_insertion_context


def test_unsorted_collection_resolves_neighbours_from_sorted_copy() -> None:
    collection = [10, 80, 20, 70, 30, 60, 40, 50]

    context = locate_insertion_context(55, collection)

    assert context.below == 50
    assert context.above == 60
    assert context.insert_index == 5
    assert context.found is False
    assert context.sorted_window == (40, 50, 60, 70)
    assert collection == [10, 80, 20, 70, 30, 60, 40, 50]


def test_neighbours_bracket_the_query() -> None:
    collection = [3, 9, 1, 7, 5]
    for query in (0, 2, 4, 6, 8, 10):
        context = locate_insertion_context(query, collection)
        if context.below is not None:
            assert context.below <= query
        if context.above is not None:
            assert query <= context.above


def test_query_outside_range_has_single_neighbour() -> None:
    low = locate_insertion_context(-5, [1, 2, 3])
    high = locate_insertion_context(99, [1, 2, 3])

    assert (low.below, low.above) == (None, 1)
    assert (high.below, high.above) == (3, None)
    assert describe_position(low) == "Element -5 would be before 1 in sorted order"
    assert describe_position(high) == "Element 99 would be after 3 in sorted order"


def test_found_query_has_no_neighbours() -> None:
    context = locate_insertion_context(2, [3, 2, 1])

    assert context.found is True
    assert context.has_neighbors is False
    assert describe_position(context) is None


def test_empty_and_single_element_collections() -> None:
    empty = locate_insertion_context(4, [])
    single = locate_insertion_context(4, [7])

    assert empty.total == 0
    assert empty.has_neighbors is False
    assert single.above == 7
    assert single.below is None
    assert single.sorted_window == (7,)


def test_nan_and_unorderable_values_degrade_with_reason() -> None:
    assert locate_insertion_context(math.nan, [1, 2]).unsupported_reason is not None
    assert locate_insertion_context(1, [math.nan, 2]).unsupported_reason is not None
    assert locate_insertion_context(1, ["a", 2]).unsupported_reason is not None


def test_sorted_window_marks_cut_ends() -> None:
    context = locate_insertion_context(55, [10, 80, 20, 70, 30, 60, 40, 50])

    assert format_sorted_window(context) == "[..., 40, 50, 60, 70, ...]"
    assert describe_position(context) == "Element 55 would fit between 50 and 60 in sorted order"


def test_duplicates_resolve_to_leftmost_index_and_stay_in_window() -> None:
    member = locate_insertion_context(5, [7, 5, 5, 3])
    neighbour = locate_insertion_context(6, [7, 5, 5, 3])

    assert member.found is True
    assert member.insert_index == 1
    assert member.sorted_window == (3, 5, 5)
    assert neighbour.found is False
    assert neighbour.insert_index == 3
    assert (neighbour.below, neighbour.above) == (5, 7)
    assert neighbour.sorted_window == (5, 5, 7)
