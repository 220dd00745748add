"""Contract-violation errors: dual struct+exception for Result and raise-based code.

Calling a success-only or failure-only accessor on the wrong variant is a
contract violation. Each condition exists as a frozen struct (to carry as
data) and as an exception (raised at the point of misuse).
"""

from __future__ import annotations

import msgspec

__all__ = [
    'GetErrorOrThrow',
    'GetErrorOrThrowError',
    'GetValueOrThrow',
    'GetValueOrThrowError',
    'PolarisError',
]


class PolarisError(Exception):
    """Base exception class for polaris errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from polaris import PolarisError, failure

        try:
            failure('missing user').get_value_or_throw()
        except PolarisError as e:
            print(e.code, e.message)
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


# --- Value accessor ---


class GetValueOrThrow(msgspec.Struct, frozen=True, gc=False):
    """A value was requested from a Failure or Nothing - struct variant."""

    message: str

    def to_exception(self) -> GetValueOrThrowError:
        """Convert to exception for raise-based code."""
        return GetValueOrThrowError(self.message)


class GetValueOrThrowError(PolarisError):
    """A value was requested from a Failure or Nothing - exception variant."""

    code_name = 'GET_VALUE_OR_THROW'

    def __init__(self, message: str) -> None:
        super().__init__(message, code=self.code_name)

    def to_struct(self) -> GetValueOrThrow:
        """Convert to struct for Result-based code."""
        return GetValueOrThrow(self.message)


# --- Error accessor ---


class GetErrorOrThrow(msgspec.Struct, frozen=True, gc=False):
    """An error message was requested from a Success - struct variant."""

    message: str = 'Tried to get error message from a success.'

    def to_exception(self) -> GetErrorOrThrowError:
        """Convert to exception for raise-based code."""
        return GetErrorOrThrowError(self.message)


class GetErrorOrThrowError(PolarisError):
    """An error message was requested from a Success - exception variant."""

    code_name = 'GET_ERROR_OR_THROW'

    def __init__(self, message: str = 'Tried to get error message from a success.') -> None:
        super().__init__(message, code=self.code_name)

    def to_struct(self) -> GetErrorOrThrow:
        """Convert to struct for Result-based code."""
        return GetErrorOrThrow(self.message)
