"""Identity type: a container that always holds one value.

Identity shares its method names with Option so that code which may later
gain or lose optionality can switch containers with few call-site changes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, TypeIs

from optres._kernel import SingletonContainer, values_equal

if TYPE_CHECKING:
    from optres.result import Ok

__all__ = ['Identity', 'equals', 'is_identity', 'unwrap_values']


class Identity[T](SingletonContainer, frozen=True):
    """Wrapper holding exactly one value of type T.

    Examples:
        >>> Identity(2).map(lambda x: x + 1)
        Identity(value=3)
        >>> Identity(2).unwrap_or(0)
        2
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        return iter((self.value,))

    def is_identity_and(self, predicate: Callable[[T], object]) -> bool:
        return bool(predicate(self.value))

    def unwrap(self, error_factory: Callable[[], object] | None = None) -> T:  # noqa: ARG002
        return self.value

    def expect(self, message: str | Callable[[], str]) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, f: Callable[[], object]) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_none(self) -> T:
        return self.value

    def unwrap_unchecked(self) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Identity[U]:
        return Identity(f(self.value))

    def map_or[U](self, default: object, f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], object], f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_none[U](self, f: Callable[[T], U]) -> U:
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Identity[U]]) -> Identity[U]:
        """Apply a function returning an Identity, without wrapping again."""
        return f(self.value)

    def flat_map[U](self, f: Callable[[T], Identity[U]]) -> Identity[U]:
        """Alias of ``and_then()``."""
        return self.and_then(f)

    def zip[U](self, other: Identity[U]) -> Identity[tuple[T, U]]:
        return Identity((self.value, other.value))

    def zip_with[U, R](self, other: Identity[U], f: Callable[[T, U], R]) -> Identity[R]:
        return Identity(f(self.value, other.value))

    def flatten[U](self: Identity[Identity[U]]) -> Identity[U]:
        """Unwrap one level of nesting.

        Raises:
            TypeError: If the contained value is not an Identity.
        """
        if not isinstance(self.value, Identity):
            raise TypeError(f'flatten() expects Identity(Identity), got Identity({self.value!r})')
        return self.value

    def join[U](self: Identity[Identity[U]]) -> Identity[U]:
        """Alias of ``flatten()``."""
        return self.flatten()

    def ok_or(self, error: object) -> Ok[T]:  # noqa: ARG002
        """Return Ok(value); Identity is never empty."""
        from optres.result import Ok

        return Ok(self.value)

    def ok_or_else(self, f: Callable[[], object]) -> Ok[T]:  # noqa: ARG002
        from optres.result import Ok

        return Ok(self.value)

    def tap_identity(self, f: Callable[[T], Any]) -> Identity[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def equals(self, other: Identity[Any], cmp: Callable[[T, Any], bool] | None = None) -> bool:
        """Compare with another Identity, recursing into nested Identities."""
        if not isinstance(other, Identity):
            return False
        return values_equal(self.value, other.value, cmp, is_identity)


def is_identity(value: object) -> TypeIs[Identity[Any]]:
    return isinstance(value, Identity)


def equals(
    a: object,
    b: object,
    cmp: Callable[[Any, Any], bool] | None = None,
) -> bool:
    """Return False unless both are Identities, else ``a.equals(b, cmp)``."""
    return is_identity(a) and is_identity(b) and a.equals(b, cmp)


def unwrap_values[T](identities: Iterable[Identity[T]]) -> list[T]:
    return [item.value for item in identities]
