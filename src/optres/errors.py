"""Error types raised by terminal operations on optres containers.

Combinators never raise on their own; only the ``unwrap``/``expect`` family
turns an absent or failed container into an exception.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'ErrValueError',
    'ExpectationError',
    'MissingErrorValueError',
    'MissingValueError',
    'OptresError',
    'UnwrapError',
]


class OptresError(Exception):
    """Base exception class for optres errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        try:
            Nothing.unwrap()
        except OptresError as e:
            print(e.code)  # missing_value
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        if self.code is None:
            return f'{type(self).__name__}({self.message!r})'
        return f'{type(self).__name__}({self.message!r}, code={self.code!r})'


class UnwrapError(OptresError, RuntimeError):
    """A terminal operation found no value where one was assumed."""


class MissingValueError(UnwrapError):
    """``unwrap()`` was called on ``Nothing``."""

    def __init__(self, message: str = 'Missing Option value.') -> None:
        super().__init__(message, code='missing_value')


class MissingErrorValueError(UnwrapError):
    """``unwrap_err()`` was called on ``Ok``."""

    def __init__(self, message: str = 'Missing error value.') -> None:
        super().__init__(message, code='missing_error')


class ExpectationError(UnwrapError):
    """``expect()`` or ``expect_err()`` failed.

    ``str(error)`` is exactly the message passed to ``expect``, so messages
    should read naturally after "should", e.g. ``"config should be present"``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code='expectation')


class ErrValueError(UnwrapError):
    """Carries an ``Err`` payload that is not an exception.

    Python can only raise ``BaseException`` instances, so ``Err('boom').unwrap()``
    raises this wrapper instead of the bare string.

    Attributes:
        error (Any): The original ``Err`` payload.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Err value: {error!r}', code='err_value')
