"""Benchmarks for the ResultOption type.

Run with: pytest benchmarks/bench_result_option.py --benchmark-only -v
"""

from result_option import Absent, Failure, Nothing, Ok, Some, Value, from_nullable, from_result, safe


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark variant creation."""

    def test_value_creation(self, benchmark):
        """Benchmark Value creation."""
        benchmark(Value, 42)

    def test_absent_access(self, benchmark):
        """Benchmark Absent singleton access."""

        def get_absent():
            return Absent

        benchmark(get_absent)

    def test_failure_creation(self, benchmark):
        """Benchmark Failure creation."""
        benchmark(Failure, "error")


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethods:
    """Benchmark method calls."""

    def test_value_map(self, benchmark):
        """Benchmark Value.map."""
        found = Value(5)
        benchmark(found.map, lambda x: x * 2)

    def test_absent_map(self, benchmark):
        """Benchmark Absent.map."""
        benchmark(Absent.map, lambda x: x * 2)

    def test_value_unwrap_or(self, benchmark):
        """Benchmark Value.unwrap_or."""
        found = Value(5)
        benchmark(found.unwrap_or, 0)

    def test_failure_unwrap_or(self, benchmark):
        """Benchmark Failure.unwrap_or."""
        failed = Failure("error")
        benchmark(failed.unwrap_or, 0)

    def test_failure_unwrap_as_option_or_nothing(self, benchmark):
        """Benchmark Failure.unwrap_as_option_or_nothing."""
        failed = Failure("error")
        benchmark(failed.unwrap_as_option_or_nothing)

    def test_sort_mixed(self, benchmark):
        """Benchmark sorting mixed variants by rank."""
        items = [Failure("z"), Absent, Value(3), Value(1), Failure("a")] * 20
        benchmark(sorted, items)


# =============================================================================
# Conversion benchmarks
# =============================================================================


class TestConversions:
    """Benchmark conversions into ResultOption."""

    def test_from_result_some(self, benchmark):
        """Benchmark from_result on Ok(Some)."""
        result = Ok(Some(5))
        benchmark(from_result, result)

    def test_from_result_nothing(self, benchmark):
        """Benchmark from_result on Ok(Nothing)."""
        result = Ok(Nothing)
        benchmark(from_result, result)

    def test_from_nullable(self, benchmark):
        """Benchmark from_nullable."""
        benchmark(from_nullable, 5)

    def test_safe_call(self, benchmark):
        """Benchmark a @safe-wrapped lookup."""

        @safe
        def lookup(key: str) -> int | None:
            return {"a": 1}.get(key)

        benchmark(lookup, "a")
