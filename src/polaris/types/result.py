"""Result type: Success[T] | Failure for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from polaris.errors import GetErrorOrThrowError, GetValueOrThrowError

if TYPE_CHECKING:
    from polaris.types.option import NothingType, Option

__all__ = [
    'Failure',
    'Result',
    'Success',
    'failure',
    'of_nullable',
    'of_optional',
    'success',
]


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Success represents the successful outcome of an operation. It wraps a
    value that can be extracted, transformed, or passed along a chain of
    Result-returning operations.

    Examples:
        >>> ok = Success(42)
        >>> ok.get_value_or_throw()
        42
        >>> ok.map(lambda x: x * 2)
        Success(value=84)
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True if the result is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs[Failure]:
        """Return False since this is Success."""
        return False

    def match[U](self, on_success: Callable[[T], U], on_failure: Callable[[str], U]) -> U:  # noqa: ARG002
        """Dispatch to the `on_success` branch with the contained value.

        Args:
            on_success: Called with the value since this is Success.
            on_failure: Ignored.

        Returns:
            Whatever on_success returns.
        """
        return on_success(self.value)

    def match_void(self, on_success: Callable[[T], object], on_failure: Callable[[str], object]) -> None:  # noqa: ARG002
        """Call `on_success` with the contained value, discarding its return."""
        on_success(self.value)

    def bind[U](self, f: Callable[[T], Success[U] | Failure]) -> Success[U] | Failure:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or and_then. Exceptions raised by f propagate.

        Args:
            f: Function that takes T and returns Result[U].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Only the returned value is wrapped: exceptions raised by f are not
        turned into a Failure.

        Args:
            f: Function to apply to the Success value.

        Returns:
            Success containing the result of applying f to the value.
        """
        return Success(f(self.value))

    def to_optional(self) -> Option[T]:
        """Convert to Option, returning Some(value), or Nothing for a None value."""
        from polaris.types.option import from_nullable

        return from_nullable(self.value)

    def get_value_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_error_or_default(self) -> str:
        """Return an empty string since this is Success."""
        return ''

    def get_value_or_throw(self) -> T:
        """Return the contained value.

        Since this is Success, this always succeeds.
        """
        return self.value

    def get_error_or_throw(self) -> NoReturn:
        """Raise since a Success has no error message.

        Raises:
            GetErrorOrThrowError: Always, with a fixed diagnostic.
        """
        raise GetErrorOrThrowError()


class Failure(msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing a human-readable message.

    Failure is the same for every value type: `bind` and `map` return the
    instance itself, which keeps the message identical along a chain.

    Examples:
        >>> err = Failure('user not found')
        >>> err.is_failure()
        True
        >>> err.get_value_or_default(0)
        0
    """

    message: str

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure]:
        """Return True if the result is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the result is Failure.
        """
        return True

    def match[U](self, on_success: Callable[[object], U], on_failure: Callable[[str], U]) -> U:  # noqa: ARG002
        """Dispatch to the `on_failure` branch with the message."""
        return on_failure(self.message)

    def match_void(self, on_success: Callable[[object], object], on_failure: Callable[[str], object]) -> None:  # noqa: ARG002
        """Call `on_failure` with the message, discarding its return."""
        on_failure(self.message)

    def bind[T, U](self, f: Callable[[T], Success[U] | Failure]) -> Failure:  # noqa: ARG002
        """Return self unchanged without calling f."""
        return self

    def map[T, U](self, f: Callable[[T], U]) -> Failure:  # noqa: ARG002
        """Return self unchanged without calling f."""
        return self

    def to_optional(self) -> NothingType:
        """Convert to Option, returning Nothing. The message is discarded."""
        from polaris.types.option import Nothing

        return Nothing

    def get_value_or_default[T](self, default: T) -> T:
        """Return the default value since this is Failure."""
        return default

    def get_error_or_default(self) -> str:
        """Return the failure message."""
        return self.message

    def get_value_or_throw(self) -> NoReturn:
        """Raise since this is Failure.

        Raises:
            GetValueOrThrowError: Always, carrying the failure message.
        """
        raise GetValueOrThrowError(self.message)

    def get_error_or_throw(self) -> str:
        """Return the failure message."""
        return self.message


type Result[T] = Success[T] | Failure


def success[T](value: T) -> Success[T]:
    """Create a successful Result."""
    return Success(value)


def failure(message: str) -> Failure:
    """Create a failed Result carrying a message."""
    return Failure(message)


def of_optional[T](option: Option[T], message: str) -> Result[T]:
    """Create a Result from an Option.

    Args:
        option: The Option to convert.
        message: Failure message used when the option is Nothing.

    Returns:
        Success(value) for Some(value), Failure(message) for Nothing.
    """
    return option.to_result(lambda: message)


def of_nullable[T](value: T | None, message: str) -> Result[T]:
    """Create a Result from a value that may be None.

    Args:
        value: Any value.
        message: Failure message used when value is None.

    Returns:
        Failure(message) if value is None, otherwise Success(value).

    Example:
        ```python
        of_nullable(users.get(42), 'user 42 not found')
        ```
    """
    if value is None:
        return Failure(message)
    return Success(value)
