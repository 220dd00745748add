"""Async utilities: AsyncResult and async-aware adapters.

This module lifts the Result combinators and the aggregation helpers over
deferred computations (any Awaitable[Result[T]]):
- match_async, match_void_async, bind_async, map_async, to_optional_async
- AsyncResult: wrapper for chaining the same adapters as methods
- aggregate_async, choose_async: resolve a batch, then aggregate/choose in input order
- choose_iter: filter an async stream of Results

Examples:
    >>> from polaris.async_ import AsyncResult, aggregate_async
    >>>
    >>> async def fetch(id: int) -> Result[dict]:
    ...     return Success({'id': id})
    >>>
    >>> async def main():
    ...     result = await AsyncResult(fetch(1)).amap(lambda d: d['id'])
    ...     results = await aggregate_async([fetch(1), fetch(2), fetch(3)])
"""

from polaris.async_.itertools import aggregate_async, choose_async, choose_iter, resolve_all
from polaris.async_.result import (
    AsyncResult,
    bind_async,
    map_async,
    match_async,
    match_void_async,
    to_optional_async,
)

__all__ = [
    'AsyncResult',
    'aggregate_async',
    'bind_async',
    'choose_async',
    'choose_iter',
    'map_async',
    'match_async',
    'match_void_async',
    'resolve_all',
    'to_optional_async',
]
