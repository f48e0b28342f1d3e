from __future__ import annotations

import pytest

from ghrelease.core.result import Err, Ok, Result, is_err, is_ok


def _half(n: int) -> Result[int, str]:
    if n % 2:
        return Err(f"{n} is odd")
    return Ok(n // 2)


def test_ok_carries_value() -> None:
    result = _half(4)
    assert is_ok(result)
    assert result.unwrap() == 2
    assert result.unwrap_or(0) == 2


def test_err_carries_error() -> None:
    result = _half(3)
    assert is_err(result)
    assert result.unwrap_or(0) == 0
    with pytest.raises(ValueError, match="3 is odd"):
        result.unwrap()


def test_map_only_touches_matching_side() -> None:
    assert Ok(2).map(lambda v: v + 1) == Ok(3)
    assert Err("boom").map(lambda v: v + 1) == Err("boom")
    assert Err("boom").map_err(str.upper) == Err("BOOM")
    assert Ok(2).map_err(str.upper) == Ok(2)


def test_pattern_matching() -> None:
    match _half(10):
        case Ok(value):
            assert value == 5
        case Err(_):
            pytest.fail("expected Ok")
