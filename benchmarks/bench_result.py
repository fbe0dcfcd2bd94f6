"""Benchmarks for Result type.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from klaw_variant import Err, Ok, _, any_, collect


class TestResultMethods:
    """Benchmark Result creation and method calls."""

    def test_ok_creation(self, benchmark):
        benchmark(Ok, 42)

    def test_err_creation(self, benchmark):
        benchmark(Err, "error")

    def test_ok_map(self, benchmark):
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_err_map_err(self, benchmark):
        err = Err("error")
        benchmark(err.map_err, str.upper)

    def test_ok_and_then(self, benchmark):
        ok = Ok(5)
        benchmark(ok.and_then, lambda x: Ok(x * 2))

    def test_err_or_else(self, benchmark):
        err = Err("error")
        benchmark(err.or_else, lambda e: Ok(len(e)))

    def test_ok_to_option(self, benchmark):
        ok = Ok(5)
        benchmark(ok.ok)


class TestResultCollect:
    """Benchmark collect over many results."""

    def test_collect_1000_ok(self, benchmark):
        results = [Ok(i) for i in range(1000)]
        benchmark(collect, results)


class TestResultMatch:
    """Benchmark Result.match."""

    def test_ok_match_literal(self, benchmark):
        ok = Ok(42)
        arms = [(Err(42), "err"), (Ok(42), "ok"), (_, "other")]
        benchmark(ok.match, arms)

    def test_err_match_predicate(self, benchmark):
        err = Err("timeout")
        arms = [(any_(["refused", "reset"]), "network"), (any_(["timeout"]), "slow"), (_, "other")]
        benchmark(err.match, arms)
