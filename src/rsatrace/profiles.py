"""Key-size modes, expressed as profile objects carried alongside each key.

A profile fixes everything that differs between the insecure *teaching* setup and the *secure* one: how primes are
obtained, how the public exponent is chosen, and whether messages are padded byte chunks or bare characters. It is
resolved once when a key pair is built and travels with both keys from then on.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from rsatrace.errors import ConfigurationError


class KeyProfile(typing.NamedTuple):
    """Configuration of one key-size mode.

    Attributes:
        name: Mode name, as written into exported keys.
        prime_bits: Bit length of each generated prime. Ignored when `fixed_primes` is set.
        fixed_primes: Publicly known `(p, q)` used instead of random generation, or None.
        pub_exp: Fixed public exponent, or None to pick the smallest odd exponent coprime with the totient.
        padded: Whether PKCS#1 v1.5 padding is applied. Unpadded profiles encrypt per character.
        secure: False for profiles that must never protect real data.
    """
    name: str
    prime_bits: int
    fixed_primes: tuple[int, int] | None = None
    pub_exp: int | None = 65537
    padded: bool = True
    secure: bool = True


TEACHING = KeyProfile(name="teaching", prime_bits=4, fixed_primes=(13, 17), pub_exp=None, padded=False, secure=False)
SECURE = KeyProfile(name="secure", prime_bits=1024)

PROFILES: dict[str, KeyProfile] = {
    TEACHING.name: TEACHING,
    SECURE.name: SECURE,
}


def resolve_profile(mode: "str | KeyProfile") -> KeyProfile:
    """Turn a mode name (or an already built profile) into a profile.

    Raises:
        ConfigurationError: If the mode is not a known name.
    """
    if isinstance(mode, KeyProfile):
        return mode
    try:
        return PROFILES[mode]
    except (KeyError, TypeError) as err:
        raise ConfigurationError(f"Unknown key-size mode {mode!r}, expected one of {sorted(PROFILES)}") from err
