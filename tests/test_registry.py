from __future__ import annotations

import pytest

from algebra.monoid import (
    INT_ADDITION,
    INT_MULTIPLICATION,
    STRING_CONCAT,
    MonoidRegistry,
    default_registry,
)


class TestMonoidRegistry:
    def test_default_instances(self) -> None:
        registry = default_registry()
        assert registry.get(str) is STRING_CONCAT
        assert registry[int] is INT_MULTIPLICATION

    def test_register_replaces(self) -> None:
        registry = default_registry()
        registry.register(int, INT_ADDITION)
        assert registry[int].combine_all([1, 2, 3]) == 6
        assert registry[int] is INT_ADDITION

    def test_setitem(self) -> None:
        registry = MonoidRegistry()
        registry[int] = INT_ADDITION
        assert int in registry
        assert str not in registry

    def test_missing_tag(self) -> None:
        registry = MonoidRegistry()
        with pytest.raises(KeyError, match="float"):
            registry.get(float)

    def test_default_registries_are_independent(self) -> None:
        first = default_registry()
        second = default_registry()
        first.register(int, INT_ADDITION)
        assert second[int] is INT_MULTIPLICATION

    def test_constructor_copies_mapping(self) -> None:
        instances = {int: INT_ADDITION}
        registry = MonoidRegistry(instances)
        registry.register(str, STRING_CONCAT)
        assert str not in instances
