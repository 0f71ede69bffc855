"""
Algebra library: monoids and short-circuiting error handling.

Two small capabilities:
- Monoid: identity element + associative combine, and combine_all over a sequence
- Result composition: chain fallible steps, flip [Result] into Result[list],
  parse-then-aggregate with a monoid

Architecture:
- Instances are explicit objects passed as arguments (or fetched from a MonoidRegistry)
- Errors are values inside returns' Result (Success | Failure), never raised by the core
"""

# Core types
from ._types import BinaryOp, Parser, Producer, Step

# Monoid hierarchy and instances
from . import monoid
from .monoid import (
    INT_ADDITION,
    INT_MULTIPLICATION,
    STRING_CONCAT,
    Magma,
    Monoid,
    MonoidRegistry,
    Semigroup,
    default_registry,
    list_concat,
)

# Lift helpers
from . import lift
from .lift import catching, error_of, from_optional, to_optional

# Result composition
from .result import bind, chain, map_and_aggregate, sequence_results, traverse_results

# Sample fallible operations
from .arithmetic import div_int, div_strings, mul_ints, parse_int

# Errors
from ._errors import AlgebraError, DivideByZeroError, ParseError

__all__ = (
    # Types
    "BinaryOp",
    "Parser",
    "Producer",
    "Step",
    # Monoid
    "monoid",
    "Magma",
    "Semigroup",
    "Monoid",
    "MonoidRegistry",
    "default_registry",
    "INT_ADDITION",
    "INT_MULTIPLICATION",
    "STRING_CONCAT",
    "list_concat",
    # Lift
    "lift",
    "catching",
    "error_of",
    "from_optional",
    "to_optional",
    # Result
    "bind",
    "chain",
    "map_and_aggregate",
    "sequence_results",
    "traverse_results",
    # Arithmetic
    "div_int",
    "div_strings",
    "mul_ints",
    "parse_int",
    # Errors
    "AlgebraError",
    "DivideByZeroError",
    "ParseError",
)
