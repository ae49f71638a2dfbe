"""Exception hierarchy for the engine.

Everything derives from `ValueError`, so callers catching the builtin keep working while still being able to tell
input, arithmetic and format failures apart.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class ConfigurationError(ValueError):
    """Unknown key-size mode or otherwise unusable profile."""


class MessageError(ValueError):
    """Rejected plaintext or ciphertext input (empty, out of range, too large)."""


class NoModularInverseError(ValueError):
    """The value has no inverse under the given modulus, i.e. the two are not coprime."""


class FormatError(ValueError):
    """Base class for malformed encoded data."""


class PaddingError(FormatError):
    """PKCS#1 v1.5 padding could not be built or does not parse."""


class CiphertextFormatError(FormatError):
    """Delimiter-joined ciphertext is malformed."""


class KeyFormatError(FormatError):
    """Key export text is malformed or misses a field."""
