"""Option type: Some[T] | Nothing for optional values.

The module doubles as the Option namespace: alongside the variants it
provides constructors, predicates, the nullable bridge and the aggregate
helpers.

Example:
    ```python
    from optres import option

    port = option.from_nullable(env.get('PORT')).map(int).unwrap_or(8080)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, NoReturn, TypeGuard, TypeIs, overload

from optres._kernel import SingletonContainer, raise_value, resolve_message, values_equal
from optres.errors import ExpectationError, MissingValueError

if TYPE_CHECKING:
    from optres.result import Err, Ok, Result

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'collect',
    'const_nothing',
    'const_some',
    'equals',
    'from_nullable',
    'from_options',
    'is_none',
    'is_option',
    'is_some',
    'nothing',
    'some',
    'unwrap_fields',
    'unwrap_values',
    'wrap_fields',
]


class Some[T](SingletonContainer, frozen=True):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or passed through a chain of Option-returning
    operations.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> list(some)
        [42]
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        return iter((self.value,))

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, predicate: Callable[[T], object]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(predicate(self.value))

    def unwrap(self, error_factory: Callable[[], object] | None = None) -> T:  # noqa: ARG002
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, message: str | Callable[[], str]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or[D](self, default: D) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else[D](self, f: Callable[[], D]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def unwrap_or_none(self) -> T:
        return self.value

    def unwrap_unchecked(self) -> T:
        """Return the contained value.

        Only meaningful after an ``is_some()`` check; on Nothing this returns
        None instead of raising.
        """
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[D, U](self, default: D, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[D, U](self, default: Callable[[], D], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default factory."""
        return f(self.value)

    def map_or_none[U](self, f: Callable[[T], U]) -> U:
        """Apply f to the contained value."""
        return f(self.value)

    def map_nullable[U](self, f: Callable[[T], U | None]) -> Some[U] | NothingType:
        """Apply f and collapse a None result to Nothing.

        Args:
            f: Function that may return None.

        Returns:
            Some(f(value)) if the result is not None, else Nothing.
        """
        return from_nullable(f(self.value))

    @overload
    def filter[U](self, predicate: Callable[[T], TypeGuard[U]]) -> Some[U] | NothingType: ...

    @overload
    def filter(self, predicate: Callable[[T], object]) -> Some[T] | NothingType: ...

    def filter(self, predicate: Callable[[T], object]) -> Some[Any] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        The predicate may be a ``TypeGuard``, in which case the kept option is
        narrowed to the guarded type.

        Args:
            predicate: Function that returns a truthy value to keep the value.

        Returns:
            Some(value) if predicate(value) is truthy, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flat_map or bind. The Option returned by f is returned
        as is, never wrapped again.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias of ``and_then()``."""
        return self.and_then(f)

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other since this is Some."""
        return other

    def or_[U](self, other: Option[U]) -> Some[T]:  # noqa: ARG002
        """Return self since this is Some."""
        return self

    def or_else[U](self, f: Callable[[], Option[U]]) -> Some[T]:  # noqa: ARG002
        """Return self unchanged since this is Some."""
        return self

    def xor[U](self, other: Option[U]) -> Some[T] | NothingType:
        """Return self if other is Nothing, else Nothing."""
        if isinstance(other, NothingType):
            return self
        return Nothing

    def zip[U](self, other: Option[U]) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Some[R] | NothingType:
        """Combine two Some values with f, or return Nothing."""
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].

        Raises:
            TypeError: If the contained value is not an Option.
        """
        if not is_option(self.value):
            raise TypeError(f'flatten() expects Some(Option), got Some({self.value!r})')
        return self.value

    def join[U](self: Some[Option[U]]) -> Option[U]:
        """Alias of ``flatten()``."""
        return self.flatten()

    def ok_or[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value).

        Args:
            error: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from optres.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, f: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value) without calling f."""
        from optres.result import Ok

        return Ok(self.value)

    def transpose[U, E](self: Some[Result[U, E]]) -> Result[Option[U], E]:
        """Swap Option[Result[T, E]] into Result[Option[T], E].

        ``Some(Ok(x))`` becomes ``Ok(Some(x))`` and ``Some(Err(e))`` becomes
        ``Err(e)``.

        Raises:
            TypeError: If the contained value is not a Result.
        """
        from optres.result import Err, Ok

        match self.value:
            case Ok(value):
                return Ok(Some(value))
            case Err():
                return self.value
            case other:
                raise TypeError(f'transpose() expects Some(Result), got Some({other!r})')

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Call on_some with the value and return its result."""
        return on_some(self.value)

    def tap_some(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def tap_none(self, f: Callable[[], Any]) -> Some[T]:  # noqa: ARG002
        """Return self without calling f since this is Some."""
        return self

    def equals(self, other: Option[Any], cmp: Callable[[T, Any], bool] | None = None) -> bool:
        """Compare with another Option.

        Nested options are compared recursively, so
        ``Some(Some(1)).equals(Some(Some(1)))`` is True.

        Args:
            other: The Option to compare against.
            cmp: Optional comparator for the two contained values.

        Returns:
            bool: True if other is Some and the values compare equal.
        """
        if not isinstance(other, Some):
            return False
        return values_equal(self.value, other.value, cmp, is_option)


class NothingType(SingletonContainer, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing or a fallback. Use the ``Nothing``
    constant instead of instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> list(Nothing)
        []
    """

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def is_some_and(self, predicate: Callable[[Any], object]) -> bool:  # noqa: ARG002
        return False

    def unwrap(self, error_factory: Callable[[], object] | None = None) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Args:
            error_factory: Optional callable producing the exception to raise.

        Raises:
            MissingValueError: When no error_factory is given.
        """
        if error_factory is None:
            raise MissingValueError()
        raise_value(error_factory())

    def expect(self, message: str | Callable[[], str]) -> NoReturn:
        """Raise with a custom message.

        Args:
            message: The message, or a callable producing it.

        Raises:
            ExpectationError: Always, with ``str()`` equal to the message.
        """
        raise ExpectationError(resolve_message(message))

    def unwrap_or[D](self, default: D) -> D:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[D](self, f: Callable[[], D]) -> D:
        """Compute and return a default value since this is Nothing."""
        return f()

    def unwrap_or_none(self) -> None:
        return None

    def unwrap_unchecked(self) -> Any:
        return None

    def map(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to map."""
        return self

    def map_or[D](self, default: D, f: Callable[[Any], Any]) -> D:  # noqa: ARG002
        return default

    def map_or_else[D](self, default: Callable[[], D], f: Callable[[Any], Any]) -> D:  # noqa: ARG002
        return default()

    def map_or_none(self, f: Callable[[Any], Any]) -> None:  # noqa: ARG002
        return None

    def map_nullable(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[Any], object]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to filter."""
        return self

    def and_then(self, f: Callable[[Any], Option[Any]]) -> NothingType:  # noqa: ARG002
        """Return Nothing since there's no value to bind."""
        return self

    def flat_map(self, f: Callable[[Any], Option[Any]]) -> NothingType:
        return self.and_then(f)

    def and_(self, other: Option[Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since self is Nothing."""
        return self

    def or_[U](self, other: Option[U]) -> Option[U]:
        """Return other since self is Nothing."""
        return other

    def or_else[U](self, f: Callable[[], Option[U]]) -> Option[U]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[U](self, other: Option[U]) -> Option[U]:
        """Return other if it is Some, else Nothing."""
        if isinstance(other, Some):
            return other
        return self

    def zip(self, other: Option[Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing since self is Nothing."""
        return self

    def zip_with(self, other: Option[Any], f: Callable[[Any, Any], Any]) -> NothingType:  # noqa: ARG002
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def join(self) -> NothingType:
        return self

    def ok_or[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error).

        Args:
            error: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from optres.result import Err

        return Err(error)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from optres.result import Err

        return Err(f())

    def transpose(self) -> Ok[NothingType]:
        """Return Ok(Nothing)."""
        from optres.result import Ok

        return Ok(Nothing)

    def match[R](self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Call on_none and return its result."""
        return on_none()

    def tap_some(self, f: Callable[[Any], Any]) -> NothingType:  # noqa: ARG002
        return self

    def tap_none(self, f: Callable[[], Any]) -> NothingType:
        """Call f for its side effect and return self."""
        f()
        return self

    def equals(self, other: Option[Any], cmp: Callable[[Any, Any], bool] | None = None) -> bool:  # noqa: ARG002
        """Return True if other is Nothing as well."""
        return isinstance(other, NothingType)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


# --- Constructors ---


def some[T](value: T) -> Option[T]:
    """Wrap a value in Some, typed as the wider Option[T]."""
    return Some(value)


def nothing[T]() -> Option[T]:
    """Return Nothing, typed as the wider Option[T]."""
    return Nothing


def const_some[T](value: T) -> Some[T]:
    """Wrap a value in Some, keeping the narrow Some[T] type."""
    return Some(value)


def const_nothing() -> NothingType:
    """Return Nothing, keeping the narrow NothingType type."""
    return Nothing


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable value to an Option.

    Args:
        value: The value that may be None.

    Returns:
        Option[T]: Some(value) if value is not None, otherwise Nothing.
    """
    return Nothing if value is None else Some(value)


# --- Predicates ---


def is_option(value: object) -> TypeIs[Option[Any]]:
    """Return True if value is Some or Nothing."""
    return isinstance(value, Some | NothingType)


def is_some(value: object) -> TypeIs[Some[Any]]:
    return isinstance(value, Some)


def is_none(value: object) -> TypeIs[NothingType]:
    return isinstance(value, NothingType)


def equals(
    a: object,
    b: object,
    cmp: Callable[[Any, Any], bool] | None = None,
) -> bool:
    """Compare two values as Options.

    Returns False unless both a and b are Options; otherwise defers to
    ``a.equals(b, cmp)``.
    """
    return is_option(a) and is_option(b) and a.equals(b, cmp)


# --- Aggregates ---


def collect[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect the values of an iterable of Options.

    Iteration stops at the first Nothing, so later items are never read.

    Args:
        options: An iterable of Option instances.

    Returns:
        Option[list[T]]: Some with all values if every item is Some, otherwise Nothing.
    """
    out: list[T] = []
    for item in options:
        if isinstance(item, NothingType):
            return Nothing
        out.append(item.value)
    return Some(out)


from_options = collect
"""Alias of ``collect()``."""


def unwrap_values[T](options: Iterable[Option[T]]) -> list[T]:
    """Return the values of the Some items, skipping Nothing."""
    return [item.value for item in options if isinstance(item, Some)]


def wrap_fields[K, V](
    fields: Mapping[K, V],
    defaults: Mapping[K, Option[V]] | None = None,
) -> dict[K, Option[V]]:
    """Wrap every value of a mapping in Some.

    Args:
        fields: Plain record to wrap.
        defaults: Already wrapped fields; keys of ``fields`` take precedence.

    Returns:
        A new dict of Options.

    Example:
        ```python
        wrap_fields({'a': 1}, {'a': Nothing, 'b': Some(2)})
        # {'a': Some(value=1), 'b': Some(value=2)}
        ```
    """
    wrapped: dict[K, Option[V]] = {key: Some(value) for key, value in fields.items()}
    if defaults is None:
        return wrapped
    return {**defaults, **wrapped}


def unwrap_fields[K, V](fields: Mapping[K, Option[V]]) -> dict[K, V]:
    """Unwrap a mapping of Options, dropping the keys holding Nothing."""
    return {key: option.value for key, option in fields.items() if isinstance(option, Some)}
