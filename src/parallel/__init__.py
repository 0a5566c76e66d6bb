"""
Parallel execution utilities for DocxCleaner.

Strategy Pattern-based execution so that the DocumentWalker does not care
whether paragraphs are cleaned in a thread pool or one after another.

Components:
    ExecutorStrategy   - Abstract base class defining the execution interface
    ThreadPoolStrategy - Thread-based parallel execution (CLI default)
    SequentialStrategy - Sequential execution (tests, --workers 1)
    create_strategy    - Picks one of the above from a worker count
"""

from .executor_strategy import (
    ExecutorStrategy,
    SequentialStrategy,
    ThreadPoolStrategy,
    create_strategy,
)

__all__ = [
    'ExecutorStrategy',
    'ThreadPoolStrategy',
    'SequentialStrategy',
    'create_strategy',
]
