"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from polaris.errors import GetValueOrThrowError

if TYPE_CHECKING:
    from polaris.types.result import Failure, Success

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'flatten',
    'from_nullable',
    'from_optional',
    'none',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value is never None:
    use `from_nullable` to build an Option from a value that may be None.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).to_result(lambda: 'missing')
        Success(value=42)
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError('Some cannot wrap None, use from_nullable() instead')

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def match[U](self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Dispatch to the `on_some` branch with the contained value.

        Args:
            on_some: Called with the value since this is Some.
            on_none: Ignored.

        Returns:
            Whatever on_some returns.
        """
        return on_some(self.value)

    def match_void(self, on_some: Callable[[T], object], on_none: Callable[[], object]) -> None:  # noqa: ARG002
        """Call `on_some` with the contained value, discarding its return."""
        on_some(self.value)

    def if_some(self, on_some: Callable[[T], object]) -> None:
        """Call `on_some` with the contained value."""
        on_some(self.value)

    def bind[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def map[U](self, f: Callable[[T], U | None]) -> Some[U] | NothingType:
        """Apply a function to the contained value.

        A mapper returning None produces Nothing.

        Args:
            f: Function to apply to the Some value.

        Returns:
            from_nullable(f(value)).
        """
        return from_nullable(f(self.value))

    def to_result(self, on_none: Callable[[], str]) -> Success[T]:  # noqa: ARG002
        """Convert to Result, returning Success(value).

        The message factory is not called.
        """
        from polaris.types.result import Success

        return Success(self.value)

    def get_value_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_value_or_throw(self) -> T:
        """Return the contained value.

        Since this is Some, this always succeeds.
        """
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant (or `none()`) instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.get_value_or_default(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def match[U](self, on_some: Callable[[object], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Dispatch to the `on_none` branch."""
        return on_none()

    def match_void(self, on_some: Callable[[object], object], on_none: Callable[[], object]) -> None:  # noqa: ARG002
        """Call `on_none`, discarding its return."""
        on_none()

    def if_some(self, on_some: Callable[[object], object]) -> None:
        """Do nothing since there is no value."""

    def bind[T, U](self, f: Callable[[T], Some[U] | NothingType]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling f."""
        return self

    def map[T, U](self, f: Callable[[T], U]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling f."""
        return self

    def to_result(self, on_none: Callable[[], str]) -> Failure:
        """Convert to Result, computing the failure message.

        Args:
            on_none: Function that produces the failure message. Only called here.

        Returns:
            Failure containing the computed message.
        """
        from polaris.types.result import Failure

        return Failure(on_none())

    def get_value_or_default[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def get_value_or_throw(self) -> NoReturn:
        """Raise since this is Nothing.

        Raises:
            GetValueOrThrowError: Always, naming the absent type.
        """
        raise GetValueOrThrowError(f'cannot get value from {type(self).__name__!r}')

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T | None) -> Option[T]:
    """Create an Option from a value; None gives Nothing."""
    return from_nullable(value)


def none() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def from_nullable[T](value: T | None) -> Option[T]:
    """Create an Option from a value that may be None.

    Args:
        value: Any value.

    Returns:
        Nothing if value is None, otherwise Some(value).

    Example:
        ```python
        from_nullable({'a': 1}.get('b'))
        # Nothing
        ```
    """
    if value is None:
        return Nothing
    return Some(value)


def from_optional[T](value: T | None) -> Option[T]:
    """Create an Option from a typing.Optional value."""
    return from_nullable(value)


def flatten[T](option: Option[Option[T]]) -> Option[T]:
    """Collapse one level of Option nesting.

    Nothing at either level yields Nothing.

    Example:
        ```python
        flatten(Some(Some(1)))  # Some(value=1)
        flatten(Some(Nothing))  # Nothing
        ```
    """
    return option.match(lambda inner: inner, none)
