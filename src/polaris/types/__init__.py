"""Core types: Result, Success, Failure, Option, Some, Nothing."""

from polaris.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    flatten,
    from_nullable,
    from_optional,
    none,
    some,
)
from polaris.types.result import Failure, Result, Success, failure, of_nullable, of_optional, success

__all__ = [
    'Failure',
    'Nothing',
    'NothingType',
    'Option',
    'Result',
    'Some',
    'Success',
    'failure',
    'flatten',
    'from_nullable',
    'from_optional',
    'none',
    'of_nullable',
    'of_optional',
    'some',
    'success',
]
