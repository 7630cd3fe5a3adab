from datetime import timedelta

import pytest

from assertpack.core.config import DEFAULT_CONFIG, EngineConfig, FormatOptions
from assertpack.core.exceptions import EngineConfigError


def test_default_thresholds() -> None:
    config = DEFAULT_CONFIG.to_dict()

    assert config["max_similar"] == 3
    assert config["similarity_query_cap"] == 20
    assert config["numeric_proximity_delta"] == 10
    assert config["neighbor_window"] == 2
    assert config["line_width"] == 56


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_similar": 0},
        {"line_width": 2.5},
        {"head_lines": True},
        {"numeric_proximity_delta": -1},
    ],
)
def test_invalid_thresholds_raise(overrides: dict) -> None:
    with pytest.raises(EngineConfigError):
        EngineConfig(**overrides)


def test_fractional_proximity_delta_is_allowed() -> None:
    assert EngineConfig(numeric_proximity_delta=0.5).numeric_proximity_delta == 0.5


def test_options_from_dict_maps_truncate_seconds() -> None:
    options = FormatOptions.from_dict({"truncate_seconds": 60, "ignore_case": True})

    assert options.truncate == timedelta(minutes=1)
    assert options.ignore_case is True
    assert options.message is None


def test_options_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(EngineConfigError, match="colour"):
        FormatOptions.from_dict({"colour": True})


def test_empty_options_payload_yields_defaults() -> None:
    assert FormatOptions.from_dict(None) == FormatOptions()
    assert FormatOptions.from_dict({}) == FormatOptions()


def test_non_positive_truncate_is_rejected() -> None:
    with pytest.raises(EngineConfigError):
        FormatOptions(truncate=timedelta(0))


@pytest.mark.parametrize(
    "raw",
    [
        ["message"],
        {"max_items": "3"},
        {"max_items": True},
        {"truncate_seconds": "soon"},
        {"truncate_seconds": 1e300},
        {"ignore_case": "yes"},
        {"message": 7},
    ],
)
def test_options_from_dict_rejects_wrong_types(raw: object) -> None:
    with pytest.raises(EngineConfigError):
        FormatOptions.from_dict(raw)
