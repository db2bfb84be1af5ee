"""@safe and @safe_async: ``try_`` and ``from_awaitable`` as decorators.

A decorated function never raises one of the captured exception types;
it returns ``Ok(value)`` or ``Err(error)`` instead. The capture rules are
the same as for the bridges in ``optres.result``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from optres._config import get_config
from optres._kernel import captured_error
from optres._logging import get_logger
from optres.result import Err, Ok, Result

__all__ = ['safe', 'safe_async']

P = ParamSpec('P')
T = TypeVar('T')

logger = get_logger(__name__)

type _Catch = tuple[type[BaseException], ...] | None


def _log_capture(wrapped: Callable[..., Any], exc: BaseException) -> None:
    logger.debug(
        'Captured exception as Err',
        function=getattr(wrapped, '__name__', repr(wrapped)),
        exc_type=type(exc).__name__,
    )


@overload
def safe(func: Callable[P, T]) -> Callable[P, Result[T, Any]]: ...


@overload
def safe(*, exceptions: _Catch = None) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]: ...


def safe(func: Callable[..., Any] | None = None, *, exceptions: _Catch = None) -> Any:
    """Make a function return a Result instead of raising.

    ``safe(f)(*args)`` behaves like ``try_(lambda: f(*args))``, and works
    on plain functions and methods alike.

    Args:
        func: The function to wrap when used as a bare ``@safe``.
        exceptions: Exception types to capture. Defaults to the configured
            ``catch`` tuple, looked up on every call so a later ``init()``
            applies to already decorated functions.

    Returns:
        The wrapped function, or a decorator when called with keywords only.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def port(text: str) -> int:
            return int(text)

        port('8080').unwrap_or(80)  # 8080
        port('http').unwrap_or(80)  # 80
        ```
    """

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        catch = exceptions if exceptions is not None else get_config().catch
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            _log_capture(wrapped, e)
            return Err(captured_error(e))

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T, Any]]]: ...


@overload
def safe_async(
    *, exceptions: _Catch = None
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, Any]]]]: ...


def safe_async(func: Callable[..., Any] | None = None, *, exceptions: _Catch = None) -> Any:
    """Async counterpart of ``safe``; awaiting the call yields the Result."""

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        catch = exceptions if exceptions is not None else get_config().catch
        try:
            return Ok(await wrapped(*args, **kwargs))
        except catch as e:
            _log_capture(wrapped, e)
            return Err(captured_error(e))

    if func is not None:
        return wrapper(func)
    return wrapper
