from .base import Magma, Monoid, Semigroup
from .instances import (
    INT_ADDITION,
    INT_MULTIPLICATION,
    STRING_CONCAT,
    IntAddition,
    IntMultiplication,
    ListConcat,
    StringConcat,
    list_concat,
)
from .registry import MonoidRegistry, default_registry
from . import laws

__all__ = (
    # Hierarchy
    "Magma",
    "Semigroup",
    "Monoid",
    # Instances
    "INT_ADDITION",
    "INT_MULTIPLICATION",
    "STRING_CONCAT",
    "IntAddition",
    "IntMultiplication",
    "ListConcat",
    "StringConcat",
    "list_concat",
    # Registry
    "MonoidRegistry",
    "default_registry",
    # Laws
    "laws",
)
