"""
Execution strategies for cleaning paragraphs.

Separates "what to run" (clean one paragraph) from "how to run it"
(a thread pool or a plain loop). The DocumentWalker receives a strategy
in its constructor, so tests can use SequentialStrategy for deterministic
ordering while the CLI uses ThreadPoolStrategy.

Usage:
    with ThreadPoolStrategy(max_workers=4) as strategy:
        results = list(strategy.map(clean_paragraph, paragraphs))
"""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, TypeVar
import os

T = TypeVar('T')
R = TypeVar('R')


class ExecutorStrategy(ABC):
    """
    Abstract strategy for running a function over many items.

    Attributes:
        max_workers: Number of concurrent workers (1 for sequential).
    """

    max_workers: int

    @abstractmethod
    def map(self, fn: Callable[[T], R], items: list[T]) -> Iterator[R]:
        """
        Map function over items, returning results in submission order.

        An exception raised by `fn` is re-raised when its result is reached.
        """
        pass

    @abstractmethod
    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        """Release any resources held by the strategy."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True)
        return False


class ThreadPoolStrategy(ExecutorStrategy):
    """
    Thread-based parallel execution.

    Paragraph cleaning is pure Python and holds the GIL, so the gain is
    modest; the pool mainly exercises the CounterStore's locking the way
    a multi-core document model would.

    Args:
        max_workers: Maximum concurrent threads. Defaults to min(cpu_count, 4).
    """

    def __init__(self, max_workers: int = None):
        if max_workers is None:
            max_workers = min(os.cpu_count() or 4, 4)
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="docx-cleaner"
        )
        self.max_workers = max_workers

    def map(self, fn: Callable[[T], R], items: list[T]) -> Iterator[R]:
        return self._executor.map(fn, items)

    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=cancel_futures)


class SequentialStrategy(ExecutorStrategy):
    """
    Sequential execution in the calling thread.

    Drop-in replacement for ThreadPoolStrategy with deterministic ordering
    and no thread interleaving in the debug trace.
    """

    def __init__(self):
        self.max_workers = 1

    def map(self, fn: Callable[[T], R], items: list[T]) -> Iterator[R]:
        for item in items:
            yield fn(item)

    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        """No-op (no resources to release)."""
        pass


def create_strategy(max_workers: int | None) -> ExecutorStrategy:
    """
    Pick a strategy for the given worker count.

    One worker (or fewer) means SequentialStrategy; anything else gets a pool.
    """
    if max_workers is not None and max_workers <= 1:
        return SequentialStrategy()
    return ThreadPoolStrategy(max_workers=max_workers)
