"""optres: Option, Result and Identity containers for Python 3.13+.

Flat imports (preferred):
    from optres import Option, Some, Nothing, Result, Ok, Err, Identity
    from optres import from_nullable, try_, safe, unwrap_values

Family namespaces (constructors, predicates, bridges, aggregates):
    from optres import option, result, identity

    option.collect([Some(1), Some(2)])  # Some(value=[1, 2])
    result.collect([Ok(1), Err('x')])  # Err(error='x')
"""

from optres import identity, option, result
from optres._config import Config, get_config, init
from optres._kernel import SingletonContainer, unwrap_values
from optres._logging import configure_logging, get_logger

# Decorators
from optres.decorators import safe, safe_async

# Errors
from optres.errors import (
    ErrValueError,
    ExpectationError,
    MissingErrorValueError,
    MissingValueError,
    OptresError,
    UnwrapError,
)
from optres.identity import Identity, is_identity

# Option
from optres.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    const_nothing,
    const_some,
    from_nullable,
    from_options,
    is_none,
    is_option,
    is_some,
    nothing,
    some,
    unwrap_fields,
    wrap_fields,
)

# Result
from optres.result import (
    Err,
    Ok,
    Result,
    const_err,
    const_ok,
    err,
    from_awaitable,
    from_nullable_or,
    from_nullable_or_else,
    from_promise,
    from_results,
    is_err,
    is_ok,
    is_result,
    ok,
    try_,
)

__all__ = [
    # Configuration
    'Config',
    # Result types
    'Err',
    # Errors
    'ErrValueError',
    'ExpectationError',
    # Identity
    'Identity',
    'MissingErrorValueError',
    'MissingValueError',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptresError',
    'Result',
    'SingletonContainer',
    'Some',
    'UnwrapError',
    'configure_logging',
    'const_err',
    'const_nothing',
    'const_ok',
    'const_some',
    'err',
    'from_awaitable',
    'from_nullable',
    'from_nullable_or',
    'from_nullable_or_else',
    'from_options',
    'from_promise',
    'from_results',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'is_err',
    'is_identity',
    'is_none',
    'is_ok',
    'is_option',
    'is_result',
    'is_some',
    'nothing',
    'ok',
    'option',
    'result',
    # Decorators
    'safe',
    'safe_async',
    'some',
    'try_',
    'unwrap_fields',
    'unwrap_values',
    'wrap_fields',
]
