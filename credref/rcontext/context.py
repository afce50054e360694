"""Immutable context frames carrying typed values.

A :class:`Context` is a chain of frames. Each frame binds exactly one
:class:`ContextKey` to a value and points at its parent, so deriving a new
context never changes the one it was derived from. Lookups walk the chain
from the newest frame to the root and return the first binding found.

Keys are compared by identity: two keys with the same name are still
different slots, which keeps unrelated values from colliding without any
global registry.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")


class ContextError(Exception):
    """Base class for context slot access failures.

    These indicate a programming error (a slot read before it was written or
    written with the wrong value) and are not meant to be handled.
    """

    def __init__(self, key: ContextKey[Any], message: str) -> None:
        super().__init__(message)
        self.key = key


class MissingBindingError(ContextError, LookupError):
    """Raised when a slot was never bound in the context chain."""

    def __init__(self, key: ContextKey[Any]) -> None:
        super().__init__(key, f"context slot '{key.name}' is not bound")


class TypeMismatchError(ContextError, TypeError):
    """Raised when the value bound to a slot has an unexpected type."""

    def __init__(self, key: ContextKey[Any], value: object) -> None:
        super().__init__(
            key,
            f"context slot '{key.name}' holds {type(value).__name__}, expected {key.expected}",
        )
        self.value = value


class ContextKey(Generic[T]):
    """Opaque key for one context slot.

    Args:
        name:  Human-readable slot name, used in error messages only.
        check: Either a type (checked with ``isinstance``) or a predicate
               returning True for acceptable values, e.g. ``callable``.
    """

    __slots__ = ("name", "_check")

    def __init__(self, name: str, check: type[T] | Callable[[object], bool]) -> None:
        self.name = name
        self._check = check

    @property
    def expected(self) -> str:
        check = self._check
        return check.__name__ if hasattr(check, "__name__") else repr(check)

    def accepts(self, value: object) -> bool:
        if isinstance(self._check, type):
            return isinstance(value, self._check)
        return bool(self._check(value))

    def __repr__(self) -> str:
        return f"ContextKey({self.name!r})"


@dataclass(frozen=True, eq=False, slots=True)
class Context:
    """One immutable frame of a context chain.

    Use :meth:`background` for the empty root and :func:`with_value` (or the
    typed helpers in :mod:`credref.rcontext.slots`) to derive children.
    """

    parent: Context | None = None
    key: ContextKey[Any] | None = None
    value: object = None

    @staticmethod
    def background() -> Context:
        """Return the shared empty root context."""
        return _BACKGROUND

    def lookup(self, key: ContextKey[Any]) -> tuple[bool, object]:
        """Return ``(found, value)`` for the newest binding of *key*."""
        frame: Context | None = self
        while frame is not None:
            if frame.key is key:
                return True, frame.value
            frame = frame.parent
        return False, None


_BACKGROUND = Context()


def with_value(ctx: Context, key: ContextKey[T], value: T) -> Context:
    """Return a child of *ctx* that answers *key* with *value*."""
    return Context(parent=ctx, key=key, value=value)


def value(ctx: Context, key: ContextKey[T]) -> T:
    """Return the value bound to *key* in *ctx*.

    Raises:
        MissingBindingError: *key* is not bound anywhere in the chain.
        TypeMismatchError:   the bound value fails the key's type check.
    """
    found, bound = ctx.lookup(key)
    if not found:
        raise MissingBindingError(key)
    if not key.accepts(bound):
        raise TypeMismatchError(key, bound)
    return cast(T, bound)
