import pytest

from assertpack.explainer import Explainer
from assertpack.messages.ordering import choose_float_format, find_sort_violations


def _lines(text: str) -> list[str]:
    return text.split("\n")


def test_sorted_lists_each_violation() -> None:
    assert _lines(Explainer().sorted([1, 3, 2, 5, 4])) == [
        "Expected collection to be in ascending order, but it is not:",
        "Collection: (total: 5 elements)",
        "Status    : 2 order violations found",
        "Problems  :",
        "  - Index 1: 3 > 2",
        "  - Index 3: 5 > 4",
    ]


def test_sorted_counts_all_violations_but_shows_a_few() -> None:
    lines = _lines(Explainer().sorted(list(range(20, 0, -1))))

    assert lines[2] == "Status    : 19 order violations found"
    assert lines[4] == "  - Index 0: 20 > 19"
    assert len([line for line in lines if line.startswith("  - Index")]) == 5
    assert lines[-1] == "  - ... and 14 more violations"


def test_sorted_flags_large_collections() -> None:
    values = list(range(150))
    values[10], values[11] = values[11], values[10]

    lines = _lines(Explainer().sorted(values))

    assert lines[1] == "Collection: [Large collection] (total: 150 elements)"
    assert lines[2] == "Status    : 1 order violation found"


def test_sorted_degrades_for_unorderable_values() -> None:
    assert "not mutually comparable" in Explainer().sorted([1, "a", 2])


def test_violation_scan_stores_a_bounded_prefix() -> None:
    violations, total = find_sort_violations([5, 4, 3, 2, 1], limit=2)

    assert total == 4
    assert [violation.index for violation in violations] == [0, 1]


def test_in_range_above_maximum() -> None:
    assert _lines(Explainer().in_range(15, 1, 10)) == [
        "Expected value to be in range [1, 10], but it was above:",
        "  Value   : 15",
        "  Range   : [1, 10]",
        "  Distance: 5 above maximum (15 > 10)",
        "",
        "Hint: Value should be <= 10",
    ]


def test_in_range_below_minimum() -> None:
    lines = _lines(Explainer().in_range(-3, 0, 10))

    assert lines[0] == "Expected value to be in range [0, 10], but it was below:"
    assert lines[3] == "  Distance: 3 below minimum (-3 < 0)"
    assert lines[-1] == "Hint: Value should be >= 0"


def test_compare_reports_signed_difference_and_hint() -> None:
    assert _lines(Explainer().compare(5, 10, "greater")) == [
        "Expected value to be greater than threshold:",
        "  Value     : 5",
        "  Threshold : 10",
        "  Difference: -5 (value is 5 smaller)",
        "",
        "Hint: Value should be larger than threshold",
    ]


@pytest.mark.parametrize(
    ("actual", "threshold", "operator", "difference"),
    [
        (10, 10, "greater", "0 (values are equal)"),
        (12, 10, "less", "+2 (value is 2 greater)"),
        (12, 10, "less_or_equal", "+2 (value is 2 greater)"),
        (3, 4, "greater_or_equal", "-1 (value is 1 smaller)"),
    ],
)
def test_compare_variants(actual: int, threshold: int, operator: str, difference: str) -> None:
    lines = _lines(Explainer().compare(actual, threshold, operator))

    assert lines[3] == f"  Difference: {difference}"
    assert lines[-1].startswith("Hint: Value should be")


def test_within_reports_multiple_of_tolerance() -> None:
    assert _lines(Explainer().within(10.5, 10.0, 0.1)) == [
        "Expected 10.500000 to be within ±0.100000 of 10.000000",
        "Difference: 0.500000 (4.00× greater than tolerance)",
    ]


def test_within_reports_percentage_for_small_excess() -> None:
    lines = _lines(Explainer().within(10.15, 10.0, 0.1))

    assert lines[1] == "Difference: 0.150000 (50.00% greater than tolerance)"


def test_float_format_switches_to_scientific_for_extremes() -> None:
    assert choose_float_format(1.5, 2.0) == "{:.6f}"
    assert choose_float_format(2e6, 1.0) == "{:.6e}"
    assert choose_float_format(1e-9, 1.0) == "{:.6e}"
    assert choose_float_format(0.0, 1.0) == "{:.6f}"
