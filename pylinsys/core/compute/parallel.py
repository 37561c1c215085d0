"""
Task-parallel for-loop.

Both parallel solvers fan work out the same way: a list of disjoint work
items (rows to eliminate, unknowns to compute), one closure applied to
each, and a barrier before anything downstream runs. This module is that
one abstraction, plus its sequential twin so that a solver's sequential
and parallel variants differ only in which runner they pass around.

Safety comes from disjointness, not locking: callers must guarantee that
no two items write the same memory.
"""

from __future__ import annotations

import logging
from concurrent.futures import (
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)
from typing import Callable, Iterable, Literal, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

ExecutorKind = Literal['thread', 'process']

# A runner maps fn over items and returns the results in item order.
Runner = Callable[[Sequence[T], Callable[[T], R]], list[R]]


def sequential_for(items: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    """Apply fn to each item in order and return the results."""
    return [fn(item) for item in items]


def parallel_for(
    items: Iterable[T],
    fn: Callable[[T], R],
    executor: Executor,
) -> list[R]:
    """
    Apply fn to every item concurrently and wait for all of them.

    Every item is submitted before any result is collected. The call
    returns only once every task has finished, even when some of them
    fail, so no task is still touching shared data when the caller
    resumes.

    Args:
        items: Work items; each must touch data disjoint from the others
        fn: Per-item closure. Must be picklable for a process pool.
        executor: Pool that runs the tasks. Owned by the caller.

    Returns:
        Results of fn, in the order of items

    Raises:
        Exception: The first failure in item order, re-raised after the
            barrier.
    """
    futures = [executor.submit(fn, item) for item in items]
    if not futures:
        return []

    wait(futures)

    failed = sum(1 for f in futures if f.exception() is not None)
    if failed:
        logger.debug("parallel_for: %d of %d tasks failed", failed, len(futures))

    return [f.result() for f in futures]


def make_executor(
    kind: ExecutorKind = 'thread',
    max_workers: int | None = None,
) -> Executor:
    """
    Build a fresh executor for one solve call.

    Args:
        kind: 'thread' for a ThreadPoolExecutor, 'process' for a
            ProcessPoolExecutor
        max_workers: Worker count; None uses the concurrent.futures default

    Returns:
        Executor, to be used as a context manager by the caller

    Raises:
        ValueError: If kind is unknown or max_workers is not positive
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    if kind == 'thread':
        return ThreadPoolExecutor(max_workers=max_workers)
    elif kind == 'process':
        return ProcessPoolExecutor(max_workers=max_workers)
    else:
        raise ValueError(f"Unknown executor kind: {kind!r}")
