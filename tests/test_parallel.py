"""
Tests for the parallel execution strategies used by DocumentWalker.
"""

import os
import sys
import threading
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.parallel import (
    ExecutorStrategy,
    SequentialStrategy,
    ThreadPoolStrategy,
    create_strategy,
)


class TestSequentialStrategy:
    """Test SequentialStrategy for deterministic execution."""

    def test_sequential_map_returns_results_in_order(self):
        strategy = SequentialStrategy()
        results = list(strategy.map(lambda x: x * 2, [1, 2, 3, 4, 5]))
        assert results == [2, 4, 6, 8, 10]

    def test_sequential_runs_in_calling_thread(self):
        caller = threading.get_ident()
        strategy = SequentialStrategy()
        idents = list(strategy.map(lambda _: threading.get_ident(), [1, 2, 3]))
        assert idents == [caller, caller, caller]

    def test_sequential_map_propagates_exceptions(self):
        strategy = SequentialStrategy()

        def fail_on_two(x):
            if x == 2:
                raise RuntimeError("two")
            return x

        with pytest.raises(RuntimeError, match="two"):
            list(strategy.map(fail_on_two, [1, 2, 3]))

    def test_sequential_max_workers_is_one(self):
        assert SequentialStrategy().max_workers == 1

    def test_sequential_context_manager(self):
        with SequentialStrategy() as strategy:
            result = list(strategy.map(str.upper, ["a", "b", "c"]))
        assert result == ["A", "B", "C"]


class TestThreadPoolStrategy:
    """Test ThreadPoolStrategy for parallel execution."""

    def test_threadpool_default_max_workers(self):
        strategy = ThreadPoolStrategy()
        assert strategy.max_workers == min(os.cpu_count() or 4, 4)
        strategy.shutdown()

    def test_threadpool_custom_max_workers(self):
        strategy = ThreadPoolStrategy(max_workers=2)
        assert strategy.max_workers == 2
        strategy.shutdown()

    def test_threadpool_rejects_zero_workers(self):
        with pytest.raises(ValueError):
            ThreadPoolStrategy(max_workers=0)

    def test_threadpool_map_keeps_submission_order(self):
        with ThreadPoolStrategy(max_workers=3) as strategy:
            results = list(strategy.map(lambda x: x * 2, list(range(20))))
        assert results == [x * 2 for x in range(20)]

    def test_threadpool_map_propagates_exceptions(self):
        def fail(x):
            raise RuntimeError(f"failed {x}")

        with ThreadPoolStrategy(max_workers=2) as strategy:
            with pytest.raises(RuntimeError, match="failed"):
                list(strategy.map(fail, [1, 2]))


class TestCreateStrategy:
    """Strategy selection from a worker count."""

    def test_one_worker_is_sequential(self):
        assert isinstance(create_strategy(1), SequentialStrategy)

    def test_zero_workers_is_sequential(self):
        assert isinstance(create_strategy(0), SequentialStrategy)

    def test_many_workers_is_thread_pool(self):
        with create_strategy(3) as strategy:
            assert isinstance(strategy, ThreadPoolStrategy)
            assert strategy.max_workers == 3

    def test_none_uses_default_pool(self):
        with create_strategy(None) as strategy:
            assert isinstance(strategy, ExecutorStrategy)
            assert strategy.max_workers == min(os.cpu_count() or 4, 4)

    def test_strategy_interface_is_map_and_shutdown(self):
        """A custom strategy only has to provide map and shutdown."""
        assert ExecutorStrategy.__abstractmethods__ == frozenset({"map", "shutdown"})
