"""Tests for the unwrapping families of ResultOption."""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

import result_option
from result_option import Absent, Failure, Nothing, Some, State, UnwrapError, Value
from tests.strategies import exception_failures, failures, result_options


class TestUnwrap:
    """Tests for unwrap and expect."""

    def test_value_unwrap(self):
        assert Value(42).unwrap() == 42

    def test_absent_unwrap_raises(self):
        with pytest.raises(UnwrapError, match="^Called unwrap on Absent$") as exc_info:
            Absent.unwrap()
        assert exc_info.value.state is State.ABSENT
        assert exc_info.value.method == "unwrap"
        assert exc_info.value.payload is None

    def test_failure_unwrap_includes_error(self):
        with pytest.raises(UnwrapError, match="Called unwrap on Failure: 'boom'") as exc_info:
            Failure("boom").unwrap()
        assert exc_info.value.state is State.FAILURE
        assert exc_info.value.payload == "boom"

    def test_unwrap_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Absent.unwrap()

    def test_value_expect(self):
        assert Value(42).expect("should not fail") == 42

    def test_absent_expect_uses_message(self):
        with pytest.raises(UnwrapError, match="^user must exist$"):
            Absent.expect("user must exist")

    def test_failure_expect_appends_error(self):
        with pytest.raises(UnwrapError, match=re.escape("user must exist: ValueError('bad id')")):
            Failure(ValueError("bad id")).expect("user must exist")


class TestUnwrapOr:
    """Tests for unwrap_or, unwrap_or_else and unwrap_or_default."""

    def test_unwrap_or(self):
        assert Value(42).unwrap_or(7) == 42
        assert Absent.unwrap_or(7) == 7
        assert Failure("e").unwrap_or(7) == 7

    def test_unwrap_or_else(self):
        assert Value(42).unwrap_or_else(lambda: 7) == 42
        assert Absent.unwrap_or_else(lambda: 7) == 7
        assert Failure("e").unwrap_or_else(lambda: 7) == 7

    def test_unwrap_or_else_not_called_on_value(self):
        called = False

        def factory():
            nonlocal called
            called = True
            return 0

        assert Value(42).unwrap_or_else(factory) == 42
        assert called is False

    def test_unwrap_or_default(self):
        assert Value(42).unwrap_or_default(int) == 42
        assert Absent.unwrap_or_default(int) == 0
        assert Failure("e").unwrap_or_default(list) == []

    @given(st.integers(), st.text())
    def test_absent_and_failure_agree(self, default: int, error: str):
        """unwrap_or yields the default for both Absent and Failure."""
        assert Absent.unwrap_or(default) == Failure(error).unwrap_or(default) == default


class TestUnwrapFailure:
    """Tests for unwrap_failure and expect_failure."""

    def test_failure_unwrap_failure(self):
        assert Failure("boom").unwrap_failure() == "boom"

    def test_value_unwrap_failure_includes_value(self):
        with pytest.raises(UnwrapError, match="Called unwrap_failure on Value: 42") as exc_info:
            Value(42).unwrap_failure()
        assert exc_info.value.state is State.VALUE
        assert exc_info.value.payload == 42

    def test_absent_unwrap_failure(self):
        with pytest.raises(UnwrapError, match="^Called unwrap_failure on Absent$"):
            Absent.unwrap_failure()

    def test_expect_failure(self):
        assert Failure("boom").expect_failure("unused") == "boom"
        with pytest.raises(UnwrapError, match="^expected an error: 42$"):
            Value(42).expect_failure("expected an error")
        with pytest.raises(UnwrapError, match="^expected an error$"):
            Absent.expect_failure("expected an error")


class TestOptionFlavoredUnwrap:
    """Tests for the unwrap_as_option family."""

    def test_unwrap_as_option(self):
        assert Value(42).unwrap_as_option() == Some(42)
        assert Absent.unwrap_as_option() is Nothing

    def test_unwrap_as_option_failure_raises(self):
        with pytest.raises(UnwrapError, match="Called unwrap_as_option on Failure: 'boom'"):
            Failure("boom").unwrap_as_option()

    def test_expect_as_option(self):
        assert Value(42).expect_as_option("unused") == Some(42)
        assert Absent.expect_as_option("unused") is Nothing
        with pytest.raises(UnwrapError, match="^lookup failed: 'boom'$"):
            Failure("boom").expect_as_option("lookup failed")

    def test_unwrap_as_option_or(self):
        assert Value(42).unwrap_as_option_or(0) == Some(42)
        assert Absent.unwrap_as_option_or(0) is Nothing
        assert Failure("e").unwrap_as_option_or(0) == Some(0)

    def test_unwrap_as_option_or_default(self):
        assert Value(42).unwrap_as_option_or_default(int) == Some(42)
        assert Absent.unwrap_as_option_or_default(int) is Nothing
        assert Failure("e").unwrap_as_option_or_default(int) == Some(0)

    def test_unwrap_as_option_or_nothing(self):
        assert Value(42).unwrap_as_option_or_nothing() == Some(42)
        assert Absent.unwrap_as_option_or_nothing() is Nothing
        assert Failure("e").unwrap_as_option_or_nothing() is Nothing

    @given(result_options)
    def test_or_nothing_is_total(self, ro):
        """unwrap_as_option_or_nothing never raises and is Some only for Value."""
        option = ro.unwrap_as_option_or_nothing()
        assert option.is_some() == ro.is_value()


class TestUnchecked:
    """Tests for the *_unchecked family."""

    def test_matching_variant_returns_payload(self):
        assert Value(42).unwrap_unchecked() == 42
        assert Failure("e").unwrap_failure_unchecked() == "e"
        assert Value(42).unwrap_as_option_unchecked() == Some(42)
        assert Absent.unwrap_as_option_unchecked() is Nothing

    @pytest.mark.parametrize(
        ("call", "message"),
        [
            (lambda: Absent.unwrap_unchecked(), "Called unwrap_unchecked on Absent"),
            (lambda: Failure("e").unwrap_unchecked(), "Called unwrap_unchecked on Failure"),
            (lambda: Value(1).unwrap_failure_unchecked(), "Called unwrap_failure_unchecked on Value"),
            (lambda: Absent.unwrap_failure_unchecked(), "Called unwrap_failure_unchecked on Absent"),
            (
                lambda: Failure("e").unwrap_as_option_unchecked(),
                "Called unwrap_as_option_unchecked on Failure",
            ),
        ],
    )
    def test_misuse_asserts_when_checked(self, call, message):
        result_option.init(check_unchecked=True)
        with pytest.raises(AssertionError, match=f"^{message}$"):
            call()

    def test_misuse_skips_check_when_disabled(self):
        result_option.init(check_unchecked=False)
        assert Absent.unwrap_unchecked() is None
        assert Failure("e").unwrap_unchecked() is None
        assert Value(1).unwrap_failure_unchecked() is None


class TestTotality:
    """The non-strict combinators never raise."""

    @given(result_options, st.integers())
    def test_non_strict_operations_return(self, ro, default: int):
        ro.unwrap_or(default)
        ro.unwrap_or_else(lambda: default)
        ro.unwrap_or_default(int)
        ro.map_or(default, lambda x: x)
        ro.map_or_else(lambda: default, lambda x: x)
        ro.map_or_default(lambda x: x, int)
        ro.to_value_option()
        ro.to_failure_option()
        ro.to_result()
        ro.unwrap_as_option_or(default)
        ro.unwrap_as_option_or_default(int)
        ro.unwrap_as_option_or_nothing()

    @given(st.one_of(failures, exception_failures))
    def test_strict_unwrap_on_failure_embeds_repr(self, ro):
        with pytest.raises(UnwrapError) as exc_info:
            ro.unwrap()
        assert repr(ro.error) in str(exc_info.value)


class TestScenarios:
    """End-to-end scenarios for each variant."""

    def test_value_scenario(self):
        ro = Value(42)
        assert ro.is_value() is True
        assert ro.unwrap() == 42
        assert ro.to_value_option() == Some(42)

    def test_absent_scenario(self):
        ro = Absent
        with pytest.raises(UnwrapError):
            ro.unwrap()
        assert ro.unwrap_or(7) == 7
        assert ro.unwrap_as_option_or_nothing() is Nothing

    def test_failure_scenario(self):
        ro = Failure("boom")
        assert ro.unwrap_failure() == "boom"
        with pytest.raises(UnwrapError, match="boom"):
            ro.unwrap()
        assert ro.unwrap_as_option_or_nothing() is Nothing
