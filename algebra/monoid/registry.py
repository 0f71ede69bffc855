"""Explicit lookup of monoid instances by type tag."""

from __future__ import annotations

import typing

from .base import Monoid
from .instances import INT_MULTIPLICATION, STRING_CONCAT


class MonoidRegistry:
    """Registry for looking up monoid instances by type.

    Nothing is resolved implicitly: a caller either passes an instance
    directly or passes a registry and asks it for one.

    Attributes:
        _instances: Internal mapping of type tags to Monoid instances.
    """

    def __init__(self, instances: dict[type, Monoid[typing.Any]] | None = None) -> None:
        self._instances = dict(instances) if instances else {}

    def register[T](self, tag: type[T], instance: Monoid[T]) -> None:
        """Register (or replace) the instance used for `tag`."""
        self._instances[tag] = instance

    def get[T](self, tag: type[T]) -> Monoid[T]:
        """Get the instance for a type."""
        if tag not in self._instances:
            raise KeyError(f"No monoid registered for type '{tag.__name__}'")
        return self._instances[tag]

    def __getitem__[T](self, tag: type[T]) -> Monoid[T]:
        return self.get(tag)

    def __setitem__[T](self, tag: type[T], instance: Monoid[T]) -> None:
        self.register(tag, instance)

    def __contains__(self, tag: object) -> bool:
        return tag in self._instances

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._instances)
        return f"MonoidRegistry({names})"


def default_registry() -> MonoidRegistry:
    """Fresh registry with str -> STRING_CONCAT and int -> INT_MULTIPLICATION."""
    return MonoidRegistry({str: STRING_CONCAT, int: INT_MULTIPLICATION})


__all__ = ("MonoidRegistry", "default_registry")
