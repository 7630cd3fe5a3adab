import pytest

from assertpack.similar import damerau_levenshtein_distance, levenshtein_distance


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("", "", 0),
        ("", "abc", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("user3", "user-3", 1),
        ("user3", "userThree", 5),
    ],
)
def test_levenshtein_distance_known_values(left: str, right: str, expected: int) -> None:
    assert levenshtein_distance(left, right) == expected


def test_levenshtein_distance_is_symmetric_and_zero_only_for_identity() -> None:
    words = ["apple", "apply", "maple", "", "a"]
    for left in words:
        for right in words:
            assert levenshtein_distance(left, right) == levenshtein_distance(right, left)
            assert (levenshtein_distance(left, right) == 0) == (left == right)


def test_single_insertion_costs_one_edit() -> None:
    base = "status"
    for index in range(len(base) + 1):
        inserted = base[:index] + "x" + base[index:]
        assert levenshtein_distance(base, inserted) == 1


def test_transposition_is_one_edit_only_in_damerau_variant() -> None:
    assert levenshtein_distance("tets", "test") == 2
    assert damerau_levenshtein_distance("tets", "test") == 1
    assert damerau_levenshtein_distance("ca", "abc") == 3
    assert damerau_levenshtein_distance("same", "same") == 0
