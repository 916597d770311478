"""Modular arithmetic and elementary number theory."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt, prod

MOD = 1_000_000_007


def mod_pow(x: int, n: int, m: int = MOD) -> int:
    """Return ``x ** n`` modulo ``m`` using binary exponentiation."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    x %= m
    while n:
        if n & 1:
            result = result * x % m
        x = x * x % m
        n >>= 1
    return result


def log_ceil(base: int, value: int) -> int:
    """Return the smallest ``k`` such that ``base ** k >= value``."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if value < 1:
        raise ValueError("value must be positive")
    exponent = 0
    power = 1
    while power < value:
        power *= base
        exponent += 1
    return exponent


def factorial_mod(n: int, m: int = MOD) -> int:
    """Return ``n!`` modulo ``m``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for k in range(n, 0, -1):
        result = result * k % m
    return result


def divisor_count(n: int) -> int:
    """Return the number of positive divisors of ``n`` (0 for ``n < 1``)."""
    return sum(
        1 if i * i == n else 2
        for i in range(1, isqrt(n) + 1 if n > 0 else 1)
        if n % i == 0
    )


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def mod_add(a: int, b: int, m: int = MOD) -> int:
    """Return ``(a + b) mod m`` in ``[0, m)``."""
    return (a % m + b % m) % m


def mod_sub(a: int, b: int, m: int = MOD) -> int:
    """Return ``(a - b) mod m`` in ``[0, m)``."""
    return (a % m - b % m) % m


def mod_mul(a: int, b: int, m: int = MOD) -> int:
    """Return ``(a * b) mod m`` in ``[0, m)``."""
    return (a % m) * (b % m) % m


def mod_inv(a: int, m: int = MOD) -> int:
    """Return the inverse of ``a`` modulo the prime ``m`` (Fermat)."""
    return mod_pow(a, m - 2, m)


def mod_div(a: int, b: int, m: int = MOD) -> int:
    """Return ``a / b`` modulo the prime ``m``."""
    if b % m == 0:
        raise ZeroDivisionError("divisor is congruent to zero modulo m")
    return mod_mul(a, mod_inv(b, m), m)


def binary_mul(x: int, n: int, m: int = MOD) -> int:
    """Return ``x * n`` modulo ``m`` by repeated doubling."""
    if n < 0:
        raise ValueError("multiplier must be non-negative")
    result = 0
    x %= m
    while n:
        if n & 1:
            result = (result + x) % m
        x = (x + x) % m
        n >>= 1
    return result


def large_pow(x: int, n: int, m: int = MOD) -> int:
    """Return ``x ** n`` modulo ``m`` using doubling-based multiplication."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    x %= m
    while n:
        if n & 1:
            result = binary_mul(result, x, m)
        x = binary_mul(x, x, m)
        n >>= 1
    return result


def crt(remainders: Sequence[int], moduli: Sequence[int]) -> int:
    """Solve ``x = r_i (mod m_i)`` for pairwise coprime moduli.

    Returns the smallest non-negative solution.
    """
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli must have the same length")
    total = prod(moduli)
    x = 0
    for remainder, modulus in zip(remainders, moduli):
        partial = total // modulus
        try:
            inverse = pow(partial, -1, modulus)
        except ValueError as exc:
            raise ValueError("moduli must be positive and pairwise coprime") from exc
        x += remainder * partial * inverse
    return x % total