"""Tests for conversions into ResultOption."""

import pytest
from hypothesis import given

from result_option import (
    Absent,
    Err,
    Failure,
    Nothing,
    Ok,
    Some,
    Value,
    from_nullable,
    from_option,
    from_result,
)
from tests.strategies import integers, options, result_options, results_of_options


class TestFromResult:
    """Tests for from_result()."""

    def test_ok_some(self):
        assert from_result(Ok(Some(5))) == Value(5)

    def test_ok_nothing(self):
        assert from_result(Ok(Nothing)) is Absent

    def test_err(self):
        assert from_result(Err("e")) == Failure("e")

    def test_ok_without_option_raises(self):
        with pytest.raises(TypeError, match="Ok to hold an Option, got int"):
            from_result(Ok(5))  # type: ignore[arg-type]

    def test_non_result_raises(self):
        with pytest.raises(TypeError, match="expects Ok or Err"):
            from_result(Some(5))  # type: ignore[arg-type]

    @given(results_of_options)
    def test_round_trip_through_to_result(self, result):
        assert from_result(result).to_result() == result

    @given(result_options)
    def test_round_trip_from_to_result(self, ro):
        assert from_result(ro.to_result()) == ro

    @given(results_of_options)
    def test_projections_recover_payload(self, result):
        """The option projections recover the channel that was kept."""
        ro = from_result(result)
        match result:
            case Ok(option):
                assert ro.to_value_option() == option
                assert ro.to_failure_option() is Nothing
            case Err(error):
                assert ro.to_value_option() is Nothing
                assert ro.to_failure_option() == Some(error)


class TestFromOption:
    """Tests for from_option()."""

    def test_some(self):
        assert from_option(Some(5)) == Value(5)

    def test_nothing(self):
        assert from_option(Nothing) is Absent

    def test_shares_payload_by_default(self):
        payload = [95]
        assert from_option(Some(payload)).unwrap() is payload

    def test_clone_owns_payload(self):
        payload = [95]
        ro = from_option(Some(payload), clone=True)
        payload.append(96)
        assert ro == Value([95])
        assert ro.unwrap() is not payload

    def test_non_option_raises(self):
        with pytest.raises(TypeError, match="expects Some or Nothing"):
            from_option(5)  # type: ignore[arg-type]

    @given(options)
    def test_never_failure(self, option):
        assert not from_option(option).is_failure()


class TestFromNullable:
    """Tests for from_nullable()."""

    def test_present(self):
        assert from_nullable(5) == Value(5)

    def test_none(self):
        assert from_nullable(None) is Absent

    def test_falsy_values_are_present(self):
        assert from_nullable(0) == Value(0)
        assert from_nullable("") == Value("")

    def test_clone_is_independent_of_binding(self):
        def make():
            score = {"score": 95}
            ro = from_nullable(score, clone=True)
            score["score"] = 0
            return ro

        assert make() == Value({"score": 95})

    @given(integers)
    def test_matches_from_option(self, value: int):
        assert from_nullable(value) == from_option(Some(value))
