"""Benchmarks for Option type.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_variant import Nothing, Some, _, range_


# =============================================================================
# Creation and method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option creation and method calls."""

    def test_some_creation(self, benchmark):
        benchmark(Some, 42)

    def test_some_map(self, benchmark):
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_unwrap_or(self, benchmark):
        some = Some(5)
        benchmark(some.unwrap_or, 0)

    def test_some_zip_with(self, benchmark):
        some1 = Some(1)
        some2 = Some(2)
        benchmark(some1.zip_with, some2, lambda a, b: a + b)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""

        def chain():
            return (
                Some(5)
                .map(lambda x: x + 1)
                .filter(lambda x: x > 5)
                .and_then(lambda x: Some(x - 1))
            )

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return (
                Nothing.map(lambda x: x + 1)
                .filter(lambda x: x > 5)
                .and_then(lambda x: Some(x - 1))
            )

        benchmark(chain)


# =============================================================================
# Match benchmarks
# =============================================================================


class TestOptionMatch:
    """Benchmark Option.match against the native match statement."""

    def test_match_method_literal(self, benchmark):
        some = Some(42)
        arms = [(Some(1), "one"), (Some(42), "answer"), (_, "other")]
        benchmark(some.match, arms)

    def test_match_method_predicates(self, benchmark):
        some = Some(42)
        arms = [(range_(0, 9), "digit"), (range_(10, 99), "two digits"), (_, "other")]
        benchmark(some.match, arms)

    def test_match_method_nothing(self, benchmark):
        arms = [(Some(1), "one"), (Nothing, "nothing")]
        benchmark(Nothing.match, arms)

    def test_match_statement(self, benchmark):
        some = Some(42)

        def match_it():
            match some:
                case Some(42):
                    return "answer"
                case _:
                    return "other"

        benchmark(match_it)
