"""Core Key Generation Utility, mainly focusing on the generation of random large primes.

This module is responsible for generating the RSA key pairs of both key-size modes: probable primes of the requested
size for the secure profile and the publicly known textbook primes for the teaching profile.

Typical usage example:

    check_prime(9973)
    p = generate_large_prime(1024, pub=65537)
    (n, e), (_, d) = generate_key_pair("secure")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import warnings

from rsatrace.arith import mod_inverse
from rsatrace.arith import mod_pow
from rsatrace.arith import random_in_range
from rsatrace.errors import NoModularInverseError
from rsatrace.profiles import KeyProfile
from rsatrace.profiles import resolve_profile

logger = logging.getLogger(__name__)

DEFAULT_WITNESSES: int = 10
_SMALL_PRIMES: list[int] = []
_SMALL_PRIMES_CAP: int = 0


def _sieve(limit: int = 10000) -> list[int]:
    """Every prime up to `limit`, by a Sieve of Eratosthenes over the odd numbers only."""
    if limit < 2:
        return []
    odd_count = (limit - 1) // 2
    is_odd_prime = [True] * odd_count
    for idx in range(int(limit**0.5) // 2):
        if not is_odd_prime[idx]:
            continue
        step = 2 * idx + 3
        for multiple in range((step * step - 3) // 2, odd_count, step):
            is_odd_prime[multiple] = False
    return [2] + [2 * idx + 3 for idx, flag in enumerate(is_odd_prime) if flag]


def get_pre_primes(limit: int = 10000) -> list[int]:
    """Small primes used to pre-screen prime candidates.

    The table is sieved once and kept in `_SMALL_PRIMES`. A later request for a higher `limit` sieves again and
    replaces it, so the returned list may extend past `limit`.

    Raises:
        ValueError: If `limit` is negative.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    global _SMALL_PRIMES
    global _SMALL_PRIMES_CAP
    if limit > _SMALL_PRIMES_CAP or not _SMALL_PRIMES:
        _SMALL_PRIMES = _sieve(limit)
        _SMALL_PRIMES_CAP = limit
    return _SMALL_PRIMES


def _trial_division(candidate: int, limit: int = 10000) -> bool:
    """Cheap pre-screen: False if a small prime divides `candidate`, True if it may still be prime."""
    if candidate < 2:
        return False
    for prime in get_pre_primes(limit):
        if prime * prime > candidate:
            return True
        if candidate % prime == 0:
            return False
    return True


def is_probably_prime(n: int, witnesses: int = DEFAULT_WITNESSES) -> bool:
    """Perform the Miller-Rabin primality test.

    Writes `n - 1 = d * 2**r` with `d` odd, then checks `witnesses` random bases. A "composite" answer is always
    correct; a "probably prime" answer is wrong with probability at most `4**-witnesses`.

    Args:
        n: Integer to be tested.
        witnesses: Number of random bases to try. Defaults to 10.

    Returns:
        True if `n` is probably prime, False otherwise.
    """
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0:
        return False
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for _ in range(witnesses):
        a = random_in_range(2, n - 2)
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = mod_pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def check_prime(candidate: int, witnesses: int = DEFAULT_WITNESSES, limit: int = 10000) -> bool:
    """Performs a composite Primality test, using a limited amount of trial divisions, before a Miller-Rabin test.

    Args:
        candidate: The candidate prime to test.
        witnesses: Number of Miller-Rabin witnesses.
        limit: Upper bound of the small primes tried by trial division. Defaults to 10000.

    Returns:
        True if `candidate` is probably prime, False otherwise.
    """
    if not _trial_division(candidate, limit):
        return False
    return is_probably_prime(candidate, witnesses)


def generate_large_prime(bits: int, pub: int | None = None) -> int:
    """Generate a probable prime of exactly `bits` bits.

    Draws odd candidates with the top bit set until one passes `check_prime`. There is no cap on the number of
    attempts; the expected count grows linearly with `bits`.

    Args:
        bits: The size of the prime in bits. Must be >= 2.
        pub: Optional public exponent. Candidates `p` with `gcd(p - 1, pub) != 1` are skipped.

    Returns:
        A probable prime number.

    Raises:
        ValueError: If `bits` is below 2.
    """
    if bits < 2:
        raise ValueError("Prime size must be at least 2 bits.")
    top = 1 << (bits - 1)
    tries = 0
    while True:
        tries += 1
        candidate = random_in_range(top, (1 << bits) - 1) | top | 1
        if pub is not None and math.gcd(candidate - 1, pub) != 1:
            continue
        if check_prime(candidate):
            logger.debug("Found %d-bit probable prime after %d candidates", bits, tries)
            return candidate


def generate_primes(bits: int, pub: int | None = None) -> tuple[int, int]:
    """Generates a pair of distinct probable primes of `bits` bits each.

    Raises:
        ValueError: If `bits` is below 3, where only a single prime (3) exists.
    """
    if bits < 3:
        raise ValueError("Distinct primes need a size of at least 3 bits.")
    p = generate_large_prime(bits, pub)
    q = generate_large_prime(bits, pub)
    while p == q:  # Only plausible at toy sizes.
        q = generate_large_prime(bits, pub)
    return p, q


def choose_public_exponent(phi: int, profile: KeyProfile) -> int:
    """Pick the public exponent for a totient under the given profile.

    Profiles with a fixed exponent return it unchanged. Otherwise the smallest odd `e >= 3` coprime with `phi` is
    used.

    Raises:
        NoModularInverseError: If no odd exponent below `phi` is coprime with it.
    """
    if profile.pub_exp is not None:
        return profile.pub_exp
    for e in range(3, phi, 2):
        if math.gcd(e, phi) == 1:
            return e
    raise NoModularInverseError(f"No odd public exponent below {phi} is coprime with it.")


def generate_key_pair(mode: str | KeyProfile = "secure") -> tuple[tuple[int, int], tuple[int, int]]:
    """Generates an RSA key pair.

    Args:
        mode: Key-size mode name or profile. Defaults to "secure".

    Returns:
        A tuple of (public, private) sub-tuples (modulus, exponent).

    Raises:
        ConfigurationError: If `mode` is not a known key-size mode.
        NoModularInverseError: If the exponent is not invertible modulo the totient.
    """
    profile = resolve_profile(mode)
    if profile.fixed_primes is not None:
        p, q = profile.fixed_primes
    else:
        p, q = generate_primes(profile.prime_bits, profile.pub_exp)
    if not profile.secure:
        warnings.warn(f"The {profile.name} profile uses publicly known tiny primes and is not secure!",
                      RuntimeWarning)
    n = p * q
    phi = (p - 1) * (q - 1)
    e = choose_public_exponent(phi, profile)
    d = mod_inverse(e, phi)
    logger.debug("Built %s key pair: %d-bit modulus, e=%d", profile.name, n.bit_length(), e)
    del p, q, phi
    return (n, e), (n, d)
