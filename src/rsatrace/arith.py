"""Number-theoretic primitives underlying key generation and the RSA primitive.

Deliberately spelled out instead of delegating to `pow(b, e, m)` / `pow(a, -1, m)`, so every operation can be followed
step by step.

Typical usage example:

    r = random_in_range(2, n - 2)
    c = mod_pow(m, e, n)
    d = mod_inverse(e, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets

from rsatrace.errors import NoModularInverseError


def random_in_range(low: int, high: int) -> int:
    """Draw a uniformly random integer in `[low, high]`, inclusive on both ends.

    Rejection sampling over `secrets.token_bytes`: enough bytes are drawn to cover the bit length of the range width,
    the surplus top bits are masked off and any draw above the width is thrown away.

    Args:
        low: Lower bound.
        high: Upper bound. Must be >= `low`.

    Returns:
        A random integer `low <= r <= high`.

    Raises:
        ValueError: If `low > high`.
    """
    if low > high:
        raise ValueError("Lower bound must not exceed upper bound.")
    width = high - low
    bits = width.bit_length()
    if bits == 0:
        return low
    nbytes = (bits + 7) // 8
    msk = (1 << bits) - 1
    while True:
        draw = int.from_bytes(secrets.token_bytes(nbytes), byteorder="big") & msk
        if draw <= width:
            return low + draw


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Modular exponentiation via right-to-left square-and-multiply.

    Args:
        base: The base.
        exponent: The exponent. Must be non-negative.
        modulus: The modulus. Must be > 1.

    Returns:
        `base ** exponent % modulus`

    Raises:
        ValueError: If the modulus is not > 1 or the exponent is negative.
    """
    if modulus <= 1:
        raise ValueError("Modulus must be greater than 1.")
    if exponent < 0:
        raise ValueError("Exponent must be non-negative.")
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclid: returns `(g, x, y)` with `a*x + b*y == g == gcd(a, b)` for non-negative `a` and `b`."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        quot = old_r // r
        old_r, r = r, old_r - quot * r
        old_x, x = x, old_x - quot * x
        old_y, y = y, old_y - quot * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Solve `a * x = 1 (mod m)` for x.

    Args:
        a: The value to invert.
        m: The modulus. Must be >= 1.

    Returns:
        The inverse, normalized into `[0, m)`.

    Raises:
        ValueError: If `m < 1`.
        NoModularInverseError: If `gcd(a, m) != 1`.
    """
    if m < 1:
        raise ValueError("Modulus must be positive.")
    if m == 1:
        return 0
    g, s, _ = eea(a % m, m)
    if g != 1:
        raise NoModularInverseError(f"No modular inverse: gcd({a}, {m}) = {g}")
    return s + m if s < 0 else s
