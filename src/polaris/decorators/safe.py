"""@safe and @safe_async decorators for turning exceptions into Failure.

These are for the edge of calling code that raises: the combinators
themselves never catch exceptions raised inside `map`/`bind` callbacks.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from polaris.types.result import Failure, Result, Success

__all__ = ['safe', 'safe_async']


def _message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) on success and
    Failure(str(exception)) if one of the given exceptions is raised.
    Other exceptions propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, KeyError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T] instead of T.

    Example:
        ```python
        @safe
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port('8080')  # Success(value=8080)
        parse_port('http')  # Failure(message="invalid literal for int() with base 10: 'http'")
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T]:
        try:
            return Success(wrapped(*args, **kwargs))
        except catch as e:
            return Failure(_message(e))

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Failure.

    The wrapped coroutine function produces a deferred Result, so it plugs
    straight into `aggregate_async` and the other async adapters.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns Result[T] instead of T.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T]:
        try:
            return Success(await wrapped(*args, **kwargs))
        except catch as e:
            return Failure(_message(e))

    if func is not None:
        return wrapper(func)
    return wrapper
