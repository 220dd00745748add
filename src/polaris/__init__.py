"""polaris: Result and Option types with total combinators for Python 3.13+.

Flat imports (preferred):
    from polaris import Result, Success, Failure, Option, Some, Nothing
    from polaris import aggregate, choose, aggregate_async, safe

Submodule imports (for organization):
    from polaris.types import Result, Option
    from polaris.itertools import aggregate, choose
    from polaris.async_ import AsyncResult, match_async
"""

# Configuration
from polaris._config import PolarisConfig, get_config, init, reset_config

# Logging
from polaris._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Async
from polaris.async_ import (
    AsyncResult,
    aggregate_async,
    bind_async,
    choose_async,
    choose_iter,
    map_async,
    match_async,
    match_void_async,
    to_optional_async,
)

# Decorators
from polaris.decorators import safe, safe_async

# Errors
from polaris.errors import (
    GetErrorOrThrow,
    GetErrorOrThrowError,
    GetValueOrThrow,
    GetValueOrThrowError,
    PolarisError,
)

# Aggregation
from polaris.itertools import aggregate, choose, choose_failures

# Types
from polaris.types import (
    Failure,
    Nothing,
    NothingType,
    Option,
    Result,
    Some,
    Success,
    failure,
    flatten,
    from_nullable,
    from_optional,
    none,
    of_nullable,
    of_optional,
    some,
    success,
)

__all__ = [
    # Async
    'AsyncResult',
    # Result types
    'Failure',
    # Errors
    'GetErrorOrThrow',
    'GetErrorOrThrowError',
    'GetValueOrThrow',
    'GetValueOrThrowError',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    # Configuration
    'PolarisConfig',
    'PolarisError',
    'Result',
    'Some',
    'Success',
    # Logging
    'add_log_hook',
    # Aggregation
    'aggregate',
    'aggregate_async',
    'bind_async',
    'choose',
    'choose_async',
    'choose_failures',
    'choose_iter',
    'clear_log_hooks',
    'configure_logging',
    'failure',
    'flatten',
    'from_nullable',
    'from_optional',
    'get_config',
    'get_logger',
    'init',
    'map_async',
    'match_async',
    'match_void_async',
    'none',
    'of_nullable',
    'of_optional',
    'remove_log_hook',
    'reset_config',
    # Decorators
    'safe',
    'safe_async',
    'some',
    'success',
    'to_optional_async',
]
