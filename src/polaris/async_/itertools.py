"""Async aggregation of deferred Results.

Every deferred computation is resolved (concurrently, optionally bounded
with an aiologic.CapacityLimiter) before the synchronous `aggregate` or
`choose` runs over the resolved Results in input order. Completion order
of the underlying work never affects the output order.

Example:
    ```python
    async def fetch_items(ids: list[int]) -> Result[list[Item]]:
        return await aggregate_async([fetch_item(id) for id in ids], limit=4)
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Iterator

import aiologic
import anyio

from polaris._config import check_async_limit, get_config
from polaris._logging import get_logger
from polaris.itertools import aggregate, choose
from polaris.types.result import Result, Success

__all__ = [
    'aggregate_async',
    'choose_async',
    'choose_iter',
    'resolve_all',
]


async def resolve_all[T](
    deferreds: Iterable[Awaitable[Result[T]]],
    *,
    limit: int | None = None,
) -> list[Result[T]]:
    """Resolve every deferred Result, keeping input order.

    Runs all awaitables concurrently in an anyio task group and waits for
    all of them. Nothing is cancelled on Failure; an exception raised by an
    awaitable cancels the rest and propagates out of the task group.

    Note:
        The iterable is eagerly materialized into a list before anything
        is awaited.

    Args:
        deferreds: Awaitables that produce Result values.
        limit: Maximum number of awaitables running at once. None means unlimited.

    Returns:
        The resolved Results, in the order of the input iterable.

    Raises:
        ValueError: If limit is less than 1.
    """
    check_async_limit(limit)
    deferred_list = list(deferreds)
    results: list[Result[T] | None] = [None] * len(deferred_list)
    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None

    async with anyio.create_task_group() as tg:

        async def run_one(i: int, aw: Awaitable[Result[T]]) -> None:
            if limiter is None:
                results[i] = await aw
                return
            async with limiter:
                results[i] = await aw

        for i, aw in enumerate(deferred_list):
            tg.start_soon(run_one, i, aw)

    get_logger(__name__).debug('resolve_all.completed', count=len(deferred_list), limit=limit)
    return results  # type: ignore[return-value]


async def aggregate_async[T](
    deferreds: Iterable[Awaitable[Result[T]]],
    separator: str | None = None,
    *,
    limit: int | None = None,
) -> Result[list[T]]:
    """Resolve deferred Results and aggregate them.

    Same semantics as `aggregate`: every element is evaluated and every
    failure message is reported, in input order.

    Args:
        deferreds: Awaitables that produce Result values.
        separator: Text placed between failure messages (default: configured separator).
        limit: Maximum concurrency. None uses the configured async_limit, which
            is itself None (unbounded) unless init() or POLARIS_ASYNC_LIMIT set it.
            To bypass a configured limit, call `resolve_all` directly.

    Returns:
        Success(list[T]) if all succeeded, otherwise one Failure with all messages.

    Example:
        ```python
        async def check(n: int) -> Result[int]:
            return Success(n) if n > 0 else Failure(f'{n} is negative')

        async def example():
            result = await aggregate_async([check(n) for n in [-1, 2, -3]])
            assert result == Failure('-1 is negative, -3 is negative')
        ```
    """
    if limit is None:
        limit = get_config().async_limit
    results = await resolve_all(deferreds, limit=limit)
    return aggregate(results, separator)


async def choose_async[T](
    deferreds: Iterable[Awaitable[Result[T]]],
    on_failure: Callable[[str], object],
    *,
    limit: int | None = None,
) -> Iterator[Success[T]]:
    """Resolve deferred Results and lazily choose the successes.

    All awaitables are resolved first. The returned iterator is the lazy
    `choose` generator: on_failure runs as it is consumed, in input order.

    Args:
        deferreds: Awaitables that produce Result values.
        on_failure: Called with each failure message.
        limit: Maximum concurrency. None uses the configured async_limit, which
            is itself None (unbounded) unless init() or POLARIS_ASYNC_LIMIT set it.
            To bypass a configured limit, call `resolve_all` directly.

    Returns:
        Iterator over the Success elements, in input order.
    """
    if limit is None:
        limit = get_config().async_limit
    results = await resolve_all(deferreds, limit=limit)
    return choose(results, on_failure)


async def choose_iter[T](
    results: AsyncIterable[Result[T]],
    on_failure: Callable[[str], object],
) -> AsyncIterator[Success[T]]:
    """Yield the Success elements of an async stream of Results.

    Args:
        results: An async iterable of Result values.
        on_failure: Called with each failure message, in stream order.

    Yields:
        Success elements, as they arrive.

    Example:
        ```python
        async def generate():
            yield Success(1)
            yield Failure('skip')
            yield Success(2)

        async def example():
            kept = [r.value async for r in choose_iter(generate(), print)]
            assert kept == [1, 2]
        ```
    """
    async for result in results:
        if isinstance(result, Success):
            yield result
        else:
            on_failure(result.message)
