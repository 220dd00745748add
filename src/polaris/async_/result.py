"""Async adapters for Result: free functions and the AsyncResult wrapper.

A deferred computation is any Awaitable[Result[T]]. The adapters await it
and then apply the synchronous combinator, so success/failure semantics are
exactly those of the sync types; only the point where the caller may
suspend changes.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User]:
        ...

    name = await match_async(fetch_user(1), lambda u: u.name, lambda msg: '<unknown>')

    # Chain async operations
    result = await AsyncResult(fetch_user(1)).abind(validate_user).amap(format_response)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from polaris.types.option import Option
from polaris.types.result import Failure, Result, Success

__all__ = [
    'AsyncResult',
    'bind_async',
    'map_async',
    'match_async',
    'match_void_async',
    'to_optional_async',
]


async def match_async[T, U](
    deferred: Awaitable[Result[T]],
    on_success: Callable[[T], U],
    on_failure: Callable[[str], U],
) -> U:
    """Await a Result and dispatch to exactly one branch.

    Args:
        deferred: Awaitable producing a Result[T].
        on_success: Called with the value on Success.
        on_failure: Called with the message on Failure.

    Returns:
        Whatever the invoked branch returns.
    """
    result = await deferred
    return result.match(on_success, on_failure)


async def match_void_async[T](
    deferred: Awaitable[Result[T]],
    on_success: Callable[[T], object],
    on_failure: Callable[[str], object],
) -> None:
    """Await a Result and run exactly one side-effecting branch."""
    result = await deferred
    result.match_void(on_success, on_failure)


def bind_async[T, U](
    deferred: Awaitable[Result[T]],
    f: Callable[[T], Result[U]],
) -> AsyncResult[U]:
    """Chain a Result-returning function after a deferred Result.

    f is only called if the awaited Result is Success.
    """
    return AsyncResult(deferred).abind(f)


def map_async[T, U](
    deferred: Awaitable[Result[T]],
    f: Callable[[T], U],
) -> AsyncResult[U]:
    """Transform the value of a deferred Result."""
    return AsyncResult(deferred).amap(f)


async def to_optional_async[T](deferred: Awaitable[Result[T]]) -> Option[T]:
    """Await a Result and convert it to an Option."""
    result = await deferred
    return result.to_optional()


class AsyncResult[T]:
    """Async-aware Result wrapper for composing async Result operations.

    AsyncResult holds an Awaitable[Result[T]] and provides methods that
    return new AsyncResult instances, building up a chain that only runs
    when awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Wrap a Task/Future for multi-await use.

    Example:
        ```python
        async def get_data() -> Result[int]:
            return Success(42)

        async def main():
            result = await AsyncResult(get_data()).amap(lambda x: x * 2)
            assert result == Success(84)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_success(cls, value: T) -> AsyncResult[T]:
        """Create an AsyncResult containing Success(value)."""

        async def _success() -> Result[T]:
            return Success(value)

        return cls(_success())

    @classmethod
    def from_failure(cls, message: str) -> AsyncResult[T]:
        """Create an AsyncResult containing Failure(message)."""

        async def _failure() -> Result[T]:
            return Failure(message)

        return cls(_failure())

    @classmethod
    def from_result(cls, result: Result[T]) -> AsyncResult[T]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[T]:
            return result

        return cls(_result())

    def amatch[U](self, on_success: Callable[[T], U], on_failure: Callable[[str], U]) -> Coroutine[Any, Any, U]:
        """Match the underlying Result once it resolves.

        Returns:
            Coroutine producing whatever the invoked branch returns.
        """
        return match_async(self._awaitable, on_success, on_failure)

    def amatch_void(
        self, on_success: Callable[[T], object], on_failure: Callable[[str], object]
    ) -> Coroutine[Any, Any, None]:
        """Run exactly one side-effecting branch once the Result resolves."""
        return match_void_async(self._awaitable, on_success, on_failure)

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U]:
        """Apply a sync function to the Success value.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_success(5).amap(lambda x: x * 2)
                assert result == Success(10)
            ```
        """

        async def _mapped() -> Result[U]:
            result = await self._awaitable
            return result.map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U]:
        """Apply an async function to the Success value.

        If Failure, f is not awaited and the Failure is returned unchanged.
        """

        async def _mapped() -> Result[U]:
            result = await self._awaitable
            if isinstance(result, Success):
                return Success(await f(result.value))
            return result

        return AsyncResult(_mapped())

    def abind[U](self, f: Callable[[T], Result[U]]) -> AsyncResult[U]:
        """Chain with a sync function that returns a Result.

        Example:
            ```python
            def validate(x: int) -> Result[int]:
                return Success(x) if x > 0 else Failure('not positive')

            async def example():
                result = await AsyncResult.from_success(5).abind(validate)
                assert result == Success(5)
            ```
        """

        async def _chained() -> Result[U]:
            result = await self._awaitable
            return result.bind(f)

        return AsyncResult(_chained())

    def abind_async[U](self, f: Callable[[T], Awaitable[Result[U]]]) -> AsyncResult[U]:
        """Chain with an async function that returns a Result."""

        async def _chained() -> Result[U]:
            result = await self._awaitable
            if isinstance(result, Success):
                return await f(result.value)
            return result

        return AsyncResult(_chained())

    def ato_optional(self) -> Coroutine[Any, Any, Option[T]]:
        """Convert to Option once the Result resolves."""
        return to_optional_async(self._awaitable)

    def aget_value_or_default(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value.

        Returns:
            Coroutine that produces the Success value or the default.
        """

        async def _unwrap() -> T:
            result = await self._awaitable
            return result.get_value_or_default(default)

        return _unwrap()

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
