"""Shared semantics for containers holding zero or one value.

Every container (``Some``/``Nothing``, ``Ok``/``Err``, ``Identity``) derives
from ``SingletonContainer`` and is iterable: present variants yield their
value once, absent ones yield nothing. Equality between two containers of
the same family goes through ``values_equal``, which recurses into nested
containers of that family.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, NoReturn, Self

import msgspec

from optres.errors import ErrValueError

__all__ = [
    'SingletonContainer',
    'captured_error',
    'raise_value',
    'resolve_message',
    'unwrap_values',
    'values_equal',
]


class SingletonContainer(msgspec.Struct, frozen=True):
    """Base struct of every optres container.

    Subclasses define ``__iter__`` and the variant-specific operations; this
    base holds what is identical for all of them.

    Variants holding a value stay tracked by the cyclic garbage collector,
    so ``node.parent = Some(node)`` is collectable. Only the field-less
    ``NothingType`` sets ``gc=False``.
    """

    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def tap(self, f: Callable[[Self], Any]) -> Self:
        """Call ``f(self)`` for its side effect and return ``self``.

        Meant for chains, e.g. to log an intermediate container without
        altering the flow:

            ```python
            Some(3).map(double).tap(print).unwrap_or(0)
            ```
        """
        f(self)
        return self

    def to_nullable(self) -> Any:
        """Alias of ``unwrap_or_none()``."""
        return self.unwrap_or_none()  # type: ignore[attr-defined]


def values_equal(
    x: object,
    y: object,
    cmp: Callable[[Any, Any], bool] | None,
    is_member: Callable[[object], bool],
) -> bool:
    """Compare two contained values.

    Args:
        x: Value held by the left container.
        y: Value held by the right container.
        cmp: Optional comparator; takes precedence when given.
        is_member: Family predicate (``is_option``, ``is_result``, ...). When
            both values belong to the family, comparison recurses through
            their own ``equals`` without passing ``cmp`` down.

    Returns:
        bool: Whether the values are considered equal.
    """
    if cmp is not None:
        return bool(cmp(x, y))
    if is_member(x) and is_member(y):
        return x.equals(y)  # type: ignore[attr-defined]
    return x is y or bool(x == y)


def unwrap_values[T](containers: Iterable[SingletonContainer]) -> list[T]:
    """Return the present values of any mix of Option, Result and Identity.

    ``Nothing`` and ``Err`` items are skipped.

    Example:
        ```python
        unwrap_values([Some(1), Nothing, Ok(2), Err('x'), Identity(3)])  # [1, 2, 3]
        ```
    """
    values: list[T] = []
    for container in containers:
        values.extend(container)  # type: ignore[arg-type]
    return values


def resolve_message(message: str | Callable[[], str]) -> str:
    """Return ``message`` itself, or the string produced by calling it."""
    return message if isinstance(message, str) else message()


def raise_value(value: object) -> NoReturn:
    """Raise ``value`` if it is an exception, else wrap it in ``ErrValueError``."""
    if isinstance(value, BaseException):
        raise value
    if isinstance(value, type) and issubclass(value, BaseException):
        raise value
    raise ErrValueError(value)


def captured_error(exc: BaseException) -> object:
    """Return the payload an exception bridge should store in ``Err``.

    ``ErrValueError`` is unwrapped back to the payload it carries, so
    ``try_(lambda: Err('boom').unwrap())`` gives ``Err('boom')``.
    """
    if isinstance(exc, ErrValueError):
        return exc.error
    return exc
