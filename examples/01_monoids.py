from __future__ import annotations

from _infra import banner

from algebra import INT_MULTIPLICATION, STRING_CONCAT, Monoid, default_registry


def main() -> None:
    banner("01_monoids: uniform combine_all over any monoid")

    strs = ["Hello", " ", "World"]
    ints = [1, 2, 3]

    # Each type's own operator...
    concat_str = strs[0] + strs[1] + strs[2]
    mul_ints = ints[0] * ints[1] * ints[2]
    print(f"  concat_str = {concat_str!r}")
    print(f"  mul_ints   = {mul_ints}")

    # ...versus one interface for both
    print(f"  concat_str_monoid = {STRING_CONCAT.combine_all(strs)!r}")
    print(f"  mul_ints_monoid   = {INT_MULTIPLICATION.combine_all(ints)}")

    # The identity element makes the empty case well defined
    print(f"  empty_string = {STRING_CONCAT.combine_all([])!r}")
    print(f"  empty_product = {INT_MULTIPLICATION.combine_all([])}")

    # Strings are not commutative, ints under * are
    print(f"  'Hello' . 'World' = {STRING_CONCAT.combine('Hello', 'World')!r}")
    print(f"  'World' . 'Hello' = {STRING_CONCAT.combine('World', 'Hello')!r}")

    # Instances are looked up explicitly, never implicitly
    registry = default_registry()
    registry.register(list, Monoid.of([], lambda a, b: a + b))
    print(f"  registry[list] -> {registry[list].combine_all([[1], [2, 3]])}")


if __name__ == "__main__":
    main()
