"""Result type: Ok[T] | Err[E] for explicit error handling.

The module doubles as the Result namespace: alongside the variants it
provides constructors, predicates, the exception and awaitable bridges and
the aggregate helpers.

Example:
    ```python
    from optres import result

    parsed = result.try_(lambda: int(raw)).map_err(str)
    port = parsed.unwrap_or(8080)

    # Await-side bridge
    body = await result.from_awaitable(client.get(url))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs, overload

from optres._config import get_config
from optres._kernel import SingletonContainer, captured_error, raise_value, resolve_message, values_equal
from optres._logging import get_logger
from optres.errors import ExpectationError, MissingErrorValueError

if TYPE_CHECKING:
    from optres.option import NothingType, Option, Some

__all__ = [
    'Err',
    'Ok',
    'Result',
    'collect',
    'const_err',
    'const_ok',
    'equals',
    'err',
    'from_awaitable',
    'from_nullable_or',
    'from_nullable_or_else',
    'from_promise',
    'from_results',
    'is_err',
    'is_ok',
    'is_result',
    'ok',
    'try_',
    'unwrap_values',
]

logger = get_logger(__name__)


class Ok[T](SingletonContainer, frozen=True):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or passed through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> list(ok)
        [42]
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        return iter((self.value,))

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(predicate(self.value))

    def is_err_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        return False

    # --- Extraction ---

    def unwrap(self, error_factory: Callable[[], object] | None = None) -> T:  # noqa: ARG002
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, message: str | Callable[[], str]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_err(self, error_factory: Callable[[], object] | None = None) -> NoReturn:
        """Raise since Ok holds no error.

        Args:
            error_factory: Optional callable producing the exception to raise.

        Raises:
            MissingErrorValueError: When no error_factory is given.
        """
        if error_factory is None:
            raise MissingErrorValueError()
        raise_value(error_factory())

    def expect_err(self, message: str | Callable[[], str]) -> NoReturn:
        """Raise ExpectationError with the given or computed message."""
        raise ExpectationError(resolve_message(message))

    def unwrap_or[D](self, default: D) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else[D](self, f: Callable[[Any], D]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_or_none(self) -> T:
        return self.value

    def unwrap_unchecked(self) -> T:
        return self.value

    def unwrap_err_unchecked(self) -> Any:
        """Return None; only meaningful after an ``is_err()`` check."""
        return None

    # --- Transformation ---

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def map_or[D, U](self, default: D, f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_else[D, U](self, default: Callable[[Any], D], f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_none[U](self, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_nullable_or[U, F](self, default_error: F, f: Callable[[T], U | None]) -> Ok[U] | Err[F]:
        """Apply f, turning a None result into Err(default_error).

        Args:
            default_error: Error to carry when f returns None.
            f: Function that may return None.

        Returns:
            Ok(f(value)) if the result is not None, else Err(default_error).
        """
        mapped = f(self.value)
        if mapped is None:
            return Err(default_error)
        return Ok(mapped)

    def map_nullable_or_else[U, F](
        self, default_error: Callable[[], F], f: Callable[[T], U | None]
    ) -> Ok[U] | Err[F]:
        """Like ``map_nullable_or()`` but computes the error lazily."""
        mapped = f(self.value)
        if mapped is None:
            return Err(default_error())
        return Ok(mapped)

    def and_then[U, F](self, f: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Apply a function that returns a Result to the contained value.

        Also known as flat_map or bind.

        Args:
            f: Function that takes T and returns Result[U, F].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flat_map[U, F](self, f: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Alias of ``and_then()``."""
        return self.and_then(f)

    def and_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        """Return other since this is Ok."""
        return other

    def or_(self, other: Result[Any, Any]) -> Ok[T]:  # noqa: ARG002
        """Return self since this is Ok."""
        return self

    def or_else(self, f: Callable[[Any], Result[Any, Any]]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from optres.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from optres.option import Nothing

        return Nothing

    def flatten[U, F](self: Ok[Result[U, F]]) -> Result[U, F]:
        """Flatten Ok(Ok(x)) into Ok(x) and Ok(Err(e)) into Err(e).

        Raises:
            TypeError: If the contained value is not a Result.
        """
        if not is_result(self.value):
            raise TypeError(f'flatten() expects Ok(Result), got Ok({self.value!r})')
        return self.value

    def transpose[U](self: Ok[Option[U]]) -> Option[Result[U, Any]]:
        """Swap Result[Option[T], E] into Option[Result[T, E]].

        ``Ok(Some(x))`` becomes ``Some(Ok(x))`` and ``Ok(Nothing)`` becomes
        ``Nothing``.

        Raises:
            TypeError: If the contained value is not an Option.
        """
        from optres.option import NothingType, Some

        match self.value:
            case Some(value):
                return Some(Ok(value))
            case NothingType():
                return self.value
            case other:
                raise TypeError(f'transpose() expects Ok(Option), got Ok({other!r})')

    @overload
    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[Any], R]) -> R: ...

    @overload
    def match(self, on_ok: Callable[[T], Any], on_err: None = None) -> None: ...

    @overload
    def match(self, on_ok: None = None, *, on_err: Callable[[Any], Any]) -> None: ...

    def match(
        self,
        on_ok: Callable[[T], Any] | None = None,
        on_err: Callable[[Any], Any] | None = None,
    ) -> Any:
        """Dispatch on the variant.

        With both handlers, calls on_ok and returns its result. With a single
        handler the call is a side effect only and returns None.
        """
        if on_ok is None:
            return None
        value = on_ok(self.value)
        return value if on_err is not None else None

    def tap_ok(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def tap_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    async def to_awaitable(self) -> T:
        """Return the value from a coroutine.

        Example:
            ```python
            value = await Ok(1).to_awaitable()  # 1
            ```
        """
        return self.value

    def to_promise(self) -> Awaitable[T]:
        """Alias of ``to_awaitable()``."""
        return self.to_awaitable()

    def equals(
        self,
        other: Result[Any, Any],
        cmp_ok: Callable[[T, Any], bool] | None = None,
        cmp_err: Callable[[Any, Any], bool] | None = None,  # noqa: ARG002
    ) -> bool:
        """Compare with another Result.

        Args:
            other: The Result to compare against.
            cmp_ok: Optional comparator for the two success values.
            cmp_err: Optional comparator for the two errors.

        Returns:
            bool: True if other is Ok and the values compare equal.
        """
        if not isinstance(other, Ok):
            return False
        return values_equal(self.value, other.value, cmp_ok, is_result)


class Err[E](SingletonContainer, frozen=True):
    """Failure variant of Result containing an error of type E.

    The error may be any value; the library never inspects it. Only
    ``unwrap()`` and ``to_awaitable()`` raise it, wrapping it in
    ``ErrValueError`` when it is not an exception.

    Examples:
        >>> err = Err('boom')
        >>> err.unwrap_or(0)
        0
        >>> err.map_err(str.upper)
        Err(error='BOOM')
        >>> list(err)
        []
    """

    error: E

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        return False

    def is_err_and(self, predicate: Callable[[E], object]) -> bool:
        """Return True if the predicate holds for the contained error."""
        return bool(predicate(self.error))

    # --- Extraction ---

    def unwrap(self, error_factory: Callable[[], object] | None = None) -> NoReturn:
        """Raise the contained error.

        Args:
            error_factory: Optional callable producing the exception to raise
                instead of the error.

        Raises:
            E: The error itself when it is an exception.
            ErrValueError: When the error is not an exception.
        """
        raise_value(self.error if error_factory is None else error_factory())

    def expect(self, message: str | Callable[[], str]) -> NoReturn:
        """Raise ExpectationError with the given or computed message.

        The error is ignored for the message; when it is an exception it is
        chained as ``__cause__``.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ExpectationError(resolve_message(message)) from cause

    def unwrap_err(self, error_factory: Callable[[], object] | None = None) -> E:  # noqa: ARG002
        return self.error

    def expect_err(self, message: str | Callable[[], str]) -> E:  # noqa: ARG002
        return self.error

    def unwrap_or[D](self, default: D) -> D:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[D](self, f: Callable[[E], D]) -> D:
        """Compute a default from the error."""
        return f(self.error)

    def unwrap_or_none(self) -> None:
        return None

    def unwrap_unchecked(self) -> Any:
        """Return None; only meaningful after an ``is_ok()`` check."""
        return None

    def unwrap_err_unchecked(self) -> E:
        return self.error

    # --- Transformation ---

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error.

        Returns:
            Err containing the result of applying f to the error.
        """
        return Err(f(self.error))

    def map_or[D](self, default: D, f: Callable[[Any], Any]) -> D:  # noqa: ARG002
        return default

    def map_or_else[D](self, default: Callable[[E], D], f: Callable[[Any], Any]) -> D:  # noqa: ARG002
        """Compute the fallback from the error."""
        return default(self.error)

    def map_or_none(self, f: Callable[[Any], Any]) -> None:  # noqa: ARG002
        return None

    def map_nullable_or(self, default_error: Any, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged; the existing error wins over default_error."""
        return self

    def map_nullable_or_else(self, default_error: Callable[[], Any], f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def and_then(self, f: Callable[[Any], Result[Any, Any]]) -> Err[E]:  # noqa: ARG002
        """Return self since there's no value to bind."""
        return self

    def flat_map(self, f: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        return self.and_then(f)

    def and_(self, other: Result[Any, Any]) -> Err[E]:  # noqa: ARG002
        """Return self since this is Err."""
        return self

    def or_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        """Return other since this is Err."""
        return other

    def or_else[U, F](self, f: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from optres.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from optres.option import Some

        return Some(self.error)

    def flatten(self) -> Err[E]:
        return self

    def transpose(self) -> Some[Err[E]]:
        """Return Some(self)."""
        from optres.option import Some

        return Some(self)

    @overload
    def match[R](self, on_ok: Callable[[Any], R], on_err: Callable[[E], R]) -> R: ...

    @overload
    def match(self, on_ok: Callable[[Any], Any], on_err: None = None) -> None: ...

    @overload
    def match(self, on_ok: None = None, *, on_err: Callable[[E], Any]) -> None: ...

    def match(
        self,
        on_ok: Callable[[Any], Any] | None = None,
        on_err: Callable[[E], Any] | None = None,
    ) -> Any:
        """Dispatch on the variant.

        With both handlers, calls on_err and returns its result. With a single
        handler the call is a side effect only and returns None.
        """
        if on_err is None:
            return None
        value = on_err(self.error)
        return value if on_ok is not None else None

    def tap_ok(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def tap_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for its side effect and return self."""
        f(self.error)
        return self

    async def to_awaitable(self) -> NoReturn:
        """Raise the error from a coroutine.

        Raises:
            E: The error itself when it is an exception.
            ErrValueError: When the error is not an exception.
        """
        raise_value(self.error)

    def to_promise(self) -> Awaitable[NoReturn]:
        """Alias of ``to_awaitable()``."""
        return self.to_awaitable()

    def equals(
        self,
        other: Result[Any, Any],
        cmp_ok: Callable[[Any, Any], bool] | None = None,  # noqa: ARG002
        cmp_err: Callable[[E, Any], bool] | None = None,
    ) -> bool:
        """Compare the error channels of two Results.

        Nested Results are compared recursively, so
        ``Err(Err('a')).equals(Err(Err('a')))`` is True.
        """
        if not isinstance(other, Err):
            return False
        return values_equal(self.error, other.error, cmp_err, is_result)


type Result[T, E] = Ok[T] | Err[E]


# --- Constructors ---


def ok[T](value: T) -> Result[T, Any]:
    """Wrap a value in Ok, typed as the wider Result[T, E]."""
    return Ok(value)


def err[E](error: E) -> Result[Any, E]:
    """Wrap an error in Err, typed as the wider Result[T, E]."""
    return Err(error)


def const_ok[T](value: T) -> Ok[T]:
    return Ok(value)


def const_err[E](error: E) -> Err[E]:
    return Err(error)


def try_[T](
    f: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, Any]:
    """Call f and capture a raised exception as Err.

    This is the bridge from exception-based code.

    Args:
        f: Zero-argument callable to run.
        exceptions: Exception types to capture. Defaults to the configured
            ``catch`` tuple, ``(Exception,)`` unless changed with ``init()``.

    Returns:
        Ok(f()) on success, Err(exception) if f raised one of ``exceptions``.
        An ``ErrValueError`` is unwrapped, so its payload is stored instead.

    Example:
        ```python
        try_(lambda: int('42'))  # Ok(value=42)
        try_(lambda: int('x'))  # Err(error=ValueError(...))
        ```
    """
    catch = exceptions if exceptions is not None else get_config().catch
    try:
        return Ok(f())
    except catch as e:
        logger.debug('Captured exception as Err', exc_type=type(e).__name__)
        return Err(captured_error(e))


async def from_awaitable[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, Any]:
    """Await a value and capture a raised exception as Err.

    The returned coroutine never raises one of ``exceptions``; it resolves to
    Ok(value) on success or Err(exception) on failure.

    Args:
        awaitable: Coroutine, task or future to await.
        exceptions: Exception types to capture. Defaults to the configured
            ``catch`` tuple.

    Returns:
        Result of the awaited value. Undoes ``to_awaitable()`` for exception
        instances and plain payloads alike, e.g. ``Err('boom')`` comes back as is.
    """
    catch = exceptions if exceptions is not None else get_config().catch
    try:
        return Ok(await awaitable)
    except catch as e:
        logger.debug('Captured awaited exception as Err', exc_type=type(e).__name__)
        return Err(captured_error(e))


from_promise = from_awaitable
"""Alias of ``from_awaitable()``."""


def from_nullable_or[T, E](error: E, value: T | None) -> Result[T, E]:
    """Return Err(error) if value is None, else Ok(value)."""
    return Err(error) if value is None else Ok(value)


def from_nullable_or_else[T, E](error: Callable[[], E], value: T | None) -> Result[T, E]:
    """Return Err(error()) if value is None, else Ok(value)."""
    return Err(error()) if value is None else Ok(value)


# --- Predicates ---


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True if value is Ok or Err."""
    return isinstance(value, Ok | Err)


def is_ok(value: object) -> TypeIs[Ok[Any]]:
    return isinstance(value, Ok)


def is_err(value: object) -> TypeIs[Err[Any]]:
    return isinstance(value, Err)


def equals(
    a: object,
    b: object,
    cmp_ok: Callable[[Any, Any], bool] | None = None,
    cmp_err: Callable[[Any, Any], bool] | None = None,
) -> bool:
    """Compare two values as Results.

    Returns False unless both a and b are Results; otherwise defers to
    ``a.equals(b, cmp_ok, cmp_err)``.
    """
    return is_result(a) and is_result(b) and a.equals(b, cmp_ok, cmp_err)


# --- Aggregates ---


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect the values of an iterable of Results.

    Iteration stops at the first Err, which is returned as is; later items
    are never read.

    Args:
        results: An iterable of Result instances.

    Returns:
        Result[list[T], E]: Ok with all values, or the first Err.
    """
    out: list[T] = []
    for item in results:
        if isinstance(item, Err):
            return item
        out.append(item.value)
    return Ok(out)


from_results = collect
"""Alias of ``collect()``."""


def unwrap_values[T](results: Iterable[Result[T, Any]]) -> list[T]:
    """Return the values of the Ok items, skipping Err."""
    return [item.value for item in results if isinstance(item, Ok)]
