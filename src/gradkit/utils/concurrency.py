"""Concurrency management for stencil and gradient evaluations."""

from __future__ import annotations

import contextvars
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence, Tuple

__all__ = [
    "set_default_workers",
    "set_workers",
    "resolve_workers",
    "normalize_workers",
    "parallel_execute",
]


_workers_var: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "gradkit_workers", default=None
)
_DEFAULT_WORKERS: int | None = None


def set_default_workers(n: int | None) -> None:
    """Sets the module-wide default number of evaluation workers.

    Args:
        n: Number of workers, or None for one worker per task.
    """
    global _DEFAULT_WORKERS
    _DEFAULT_WORKERS = None if n is None else normalize_workers(n)


@contextmanager
def set_workers(n: int | None) -> Iterator[int | None]:
    """Temporarily sets the number of evaluation workers.

    Args:
        n: Number of workers, or ``None`` to fall back to the module default.

    Yields:
        int | None: The previous worker setting (restored on exit).
    """
    prev = _workers_var.get()
    token = _workers_var.set(None if n is None else normalize_workers(n))
    try:
        yield prev
    finally:
        _workers_var.reset(token)


def normalize_workers(n_workers: Any) -> int:
    """Coerces a requested worker count to an integer >= 1.

    Anything that is not convertible to ``int`` counts as a single worker.
    """
    if n_workers is None:
        return 1
    try:
        return max(1, int(n_workers))
    except (TypeError, ValueError):
        return 1


def resolve_workers(n_workers: int | None, n_tasks: int) -> int:
    """Decides how many threads to use for ``n_tasks`` independent evaluations.

    An explicit ``n_workers`` wins. Otherwise the value set with
    :func:`set_workers`, then :func:`set_default_workers` is used. With none
    of those every task gets its own thread. The result never exceeds
    ``n_tasks``.

    Args:
        n_workers: Requested number of workers, or None.
        n_tasks: Number of tasks to run.

    Returns:
        Number of workers, at least 1.
    """
    for candidate in (n_workers, _workers_var.get(), _DEFAULT_WORKERS):
        if candidate is not None:
            return min(normalize_workers(candidate), max(1, n_tasks))
    return max(1, n_tasks)


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
    threaded: bool | None = None,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in ``arg_tuples``.

    When ``threaded`` is True every call is submitted to a pool of
    ``n_workers`` threads, even a pool of one, so no call runs on the calling
    thread. ``threaded=None`` means "threaded if ``n_workers > 1``".

    The function returns only once every submitted call has finished. Results
    follow the order of ``arg_tuples``; if calls raised, the exception of the
    first failing one in that order is re-raised and the rest are discarded.
    """
    if threaded is None:
        threaded = n_workers > 1
    if not threaded:
        return [worker(*args) for args in arg_tuples]

    with ThreadPoolExecutor(max_workers=max(1, n_workers)) as pool:
        # contextvars do not cross into pool threads by themselves
        futures = [
            pool.submit(contextvars.copy_context().run, worker, *args)
            for args in arg_tuples
        ]
        return [fut.result() for fut in futures]
