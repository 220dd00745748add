"""Iteration utilities for Result streams: choose and aggregate.

Unlike `bind`, which stops at the first Failure, these helpers walk the whole
stream and report every failure, so a batch can be validated in one pass.

Example:
    ```python
    from polaris import aggregate, failure, success

    aggregate([success(1), failure('a'), failure('b')])
    # Failure(message='a, b')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from polaris._config import get_config
from polaris._logging import get_logger
from polaris.types.result import Failure, Result, Success

__all__ = [
    'aggregate',
    'choose',
    'choose_failures',
]


def choose_failures[T](
    results: Iterable[Result[T]],
    on_failure: Callable[[Failure], object],
) -> Iterator[Success[T]]:
    """Lazily keep the Success elements, handing each Failure to a callback.

    Args:
        results: An iterable of Result values, consumed lazily.
        on_failure: Called with each Failure, in encounter order, as the
            generator advances past it.

    Yields:
        The Success elements, unchanged and in order.
    """
    for result in results:
        if isinstance(result, Success):
            yield result
        else:
            on_failure(result)


def choose[T](
    results: Iterable[Result[T]],
    on_failure: Callable[[str], object],
) -> Iterator[Success[T]]:
    """Lazily keep the Success elements, reporting each failure message.

    Args:
        results: An iterable of Result values, consumed lazily.
        on_failure: Called with each failure message, in encounter order.

    Yields:
        The Success elements (as Results, not unwrapped), in order.

    Example:
        ```python
        errors = []
        kept = list(choose([success(1), failure('bad')], errors.append))
        # kept == [Success(value=1)], errors == ['bad']
        ```
    """
    return choose_failures(results, lambda f: on_failure(f.message))


def aggregate[T](
    results: Iterable[Result[T]],
    separator: str | None = None,
) -> Result[list[T]]:
    """Combine a stream of Results into one Result of a list.

    Every element is evaluated; nothing short-circuits. Each failure message
    is appended to an accumulator after the separator, and the first
    occurrence of the separator is then removed from the accumulated text.
    Success values that are None are left out of the list.

    Args:
        results: An iterable of Result values, consumed exactly once.
        separator: Text placed between failure messages. Defaults to the
            configured error separator (', ').

    Returns:
        Success(list[T]) if no element failed, otherwise one Failure holding
        all failure messages in order.

    Examples:
        >>> aggregate([Success(1), Success(2), Success(3)])
        Success(value=[1, 2, 3])
        >>> aggregate([Success(1), Failure('a'), Failure('b')], ', ')
        Failure(message='a, b')
    """
    sep = separator if separator is not None else get_config().error_separator
    parts: list[str] = []
    failures = 0
    total = 0

    def on_failure(message: str) -> None:
        nonlocal failures
        failures += 1
        parts.append(sep)
        parts.append(message)

    values: list[T] = []
    for result in choose(results, on_failure):
        total += 1
        if result.value is not None:
            values.append(result.value)
    total += failures

    get_logger(__name__).debug('aggregate.completed', total=total, failures=failures)

    if failures:
        return Failure(''.join(parts).replace(sep, '', 1))
    return Success(values)
