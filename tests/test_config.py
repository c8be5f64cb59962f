"""Tests for environment-driven settings."""

import sys

import pytest

from bestfirst.config import Settings, load_settings, log_level, rbfs_recursion_limit, recursion_limit


class TestSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings()

    def test_overrides(self) -> None:
        s = load_settings({
            "BESTFIRST_LOG_LEVEL": "debug",
            "BESTFIRST_RBFS_RECURSION_LIMIT": "5000",
            "BESTFIRST_BENCH_PROBLEM": "Grid",
            "BESTFIRST_RANDOM_NODES": "12",
            "BESTFIRST_RANDOM_SEED": "3",
        })
        assert s.log_level == "DEBUG"
        assert s.rbfs_recursion_limit == 5000
        assert s.bench_problem == "grid"
        assert (s.random_nodes, s.random_seed) == (12, 3)

    def test_rejects_unknown_problem(self) -> None:
        with pytest.raises(ValueError, match="BESTFIRST_BENCH_PROBLEM"):
            load_settings({"BESTFIRST_BENCH_PROBLEM": "mars"})

    def test_rejects_non_positive_limit(self) -> None:
        with pytest.raises(ValueError):
            load_settings({"BESTFIRST_RBFS_RECURSION_LIMIT": "0"})

    def test_reads_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("BESTFIRST_RANDOM_SEED", "99")
        assert load_settings().random_seed == 99


class TestEngineTunables:
    def test_recursion_limit_default(self) -> None:
        assert rbfs_recursion_limit({}) == 10_000

    def test_recursion_limit_ignores_benchmark_variables(self) -> None:
        env = {"BESTFIRST_BENCH_PROBLEM": "mars", "BESTFIRST_RANDOM_NODES": "lots"}
        assert rbfs_recursion_limit(env) == 10_000

    def test_recursion_limit_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError, match="BESTFIRST_RBFS_RECURSION_LIMIT"):
            rbfs_recursion_limit({"BESTFIRST_RBFS_RECURSION_LIMIT": "-3"})

    def test_log_level_ignores_benchmark_variables(self) -> None:
        assert log_level({"BESTFIRST_LOG_LEVEL": "info", "BESTFIRST_BENCH_PROBLEM": "mars"}) == "INFO"


class TestRecursionLimit:
    def test_raised_then_restored(self) -> None:
        old = sys.getrecursionlimit()
        with recursion_limit(old + 500):
            assert sys.getrecursionlimit() == old + 500
        assert sys.getrecursionlimit() == old

    def test_never_lowered(self) -> None:
        old = sys.getrecursionlimit()
        with recursion_limit(10):
            assert sys.getrecursionlimit() == old
        assert sys.getrecursionlimit() == old
