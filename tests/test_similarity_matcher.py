from assertpack.core.config import EngineConfig
from assertpack.similar import find_similar, identifier_fold, similarity_threshold
from assertpack.similar.matcher import describe_difference


def test_identifier_fold_drops_case_separators_and_number_words() -> None:
    assert identifier_fold("userThree") == "user3"
    assert identifier_fold("User-3") == "user3"
    assert identifier_fold("user_two") == "user2"
    assert identifier_fold("first.name") == "firstname"


def test_similarity_threshold_grows_with_query_length() -> None:
    assert similarity_threshold("ab") == 1
    assert similarity_threshold("abcdefgh") == 2
    assert similarity_threshold("abcdefgh", EngineConfig(similarity_divisor=2)) == 4

    lengths = [similarity_threshold("x" * size) for size in range(1, 21)]
    assert lengths == sorted(lengths)


def test_user_identifier_variants_rank_by_distance() -> None:
    collection = ["user-one", "user_two", "UserThree", "user-3", "userThree"]

    matches = find_similar("user3", collection)

    assert [match.candidate for match in matches] == ["user-3", "userThree", "UserThree"]
    assert [match.position for match in matches] == [3, 4, 2]
    assert [match.distance for match in matches] == [1, 5, 6]

    first = matches[0]
    assert first.kind == "extra_chars"
    assert first.details == "extra '-' at position 5"
    assert matches[1].kind == "typo"
    assert matches[1].details.endswith("(same identifier ignoring case and separators)")


def test_case_only_difference_is_classified_first_class() -> None:
    matches = find_similar("Alice", ["alice", "bob"])

    assert len(matches) == 1
    assert matches[0].kind == "case_only"
    assert matches[0].details == "case difference"


def test_missing_character_reports_segment_and_position() -> None:
    matches = find_similar("apple", ["aple"])

    assert matches[0].kind == "missing_chars"
    assert matches[0].details == "missing 'p' at position 3"


def test_single_substitution_and_swap_details() -> None:
    substitution = find_similar("hello", ["hallo"])
    assert substitution[0].kind == "typo"
    assert substitution[0].details == "'a' ≠ 'e' at position 2"

    swap = find_similar("identifeir", ["identifier"])
    assert swap[0].kind == "typo"
    assert swap[0].details == "adjacent characters swapped at position 8"


def test_exact_matches_and_non_strings_are_never_reported() -> None:
    assert find_similar("same", ["same", 5, None]) == []


def test_long_queries_skip_similarity_search() -> None:
    query = "a" * 21
    assert find_similar(query, [query + "b"]) == []


def test_result_count_is_capped_by_config() -> None:
    config = EngineConfig(max_similar=2)
    matches = find_similar("cat", ["bat", "hat", "mat", "rat"], config=config)

    assert [match.candidate for match in matches] == ["bat", "hat"]


def test_numeric_neighbours_within_delta_are_signed() -> None:
    matches = find_similar(55, [10, 50, 60, 100])

    assert [match.candidate for match in matches] == [50, 60]
    assert [match.details for match in matches] == ["differs by -5", "differs by +5"]
    assert all(match.kind == "numeric_proximity" for match in matches)


def test_numeric_search_falls_back_to_single_closest_value() -> None:
    matches = find_similar(500, [1, 2, 900])

    assert len(matches) == 1
    assert matches[0].candidate == 900
    assert matches[0].details == "differs by +400"


def test_booleans_are_not_numeric_candidates() -> None:
    matches = find_similar(1, [True, 2])

    assert [match.candidate for match in matches] == [2]


def test_mapping_candidates_report_their_key_as_position() -> None:
    matches = find_similar("bob", {"y": "zzz", "x": "bobb"})

    assert len(matches) == 1
    assert matches[0].candidate == "bobb"
    assert matches[0].position == "x"


def test_describe_difference_matches_ranked_classification() -> None:
    assert describe_difference("user3", "user-3") == ("extra_chars", "extra '-' at position 5")
    assert describe_difference("Name", "name") == ("case_only", "case difference")


def test_number_words_fold_only_as_whole_tokens() -> None:
    assert identifier_fold("done") == "done"
    assert identifier_fold("network") == "network"
    assert identifier_fold("itemTwoCount") == "item2count"
    assert find_similar("d1", ["done"]) == []


def test_wider_threshold_keeps_every_earlier_match() -> None:
    candidates = ["abcdefgx", "abcdexyz", "abxdefgh", "zzzzzzzz", "abcdefghij"]
    narrow = find_similar("abcdefgh", candidates, config=EngineConfig(max_similar=10))
    wide = find_similar(
        "abcdefgh",
        candidates,
        config=EngineConfig(max_similar=10, similarity_divisor=2),
    )

    narrow_found = {match.candidate for match in narrow}
    wide_found = {match.candidate for match in wide}
    assert narrow_found <= wide_found
    assert "abcdexyz" in wide_found - narrow_found
    assert "zzzzzzzz" not in wide_found
