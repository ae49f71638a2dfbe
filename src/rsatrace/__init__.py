"""Educational RSA engine with a step-by-step trace of every operation.

Provides key generation under a "teaching" profile (tiny, publicly known primes, per-character encryption) and a
"secure" profile (1024-bit primes, PKCS#1 v1.5 padding), encryption and decryption pipelines that report each step
to an optional callback, and a readable key export format. Not a production cryptographic library.

Typical usage example:

    pair = KeyPair.generate("teaching")
    c = pair.public_key.encrypt("Hi", on_step=print)
    r = pair.private_key.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsatrace.arith import mod_inverse
from rsatrace.arith import mod_pow
from rsatrace.arith import random_in_range
from rsatrace.errors import CiphertextFormatError
from rsatrace.errors import ConfigurationError
from rsatrace.errors import FormatError
from rsatrace.errors import KeyFormatError
from rsatrace.errors import MessageError
from rsatrace.errors import NoModularInverseError
from rsatrace.errors import PaddingError
from rsatrace.keygen import generate_key_pair
from rsatrace.keygen import generate_large_prime
from rsatrace.keygen import is_probably_prime
from rsatrace.profiles import KeyProfile
from rsatrace.profiles import PROFILES
from rsatrace.rsa import KeyPair
from rsatrace.rsa import RSAPrivKey
from rsatrace.rsa import RSAPubKey
from rsatrace.trace import TraceStep

__version__ = "0.1.0"
__all__ = [
    "KeyPair",
    "RSAPrivKey",
    "RSAPubKey",
    "KeyProfile",
    "PROFILES",
    "TraceStep",
    "generate_key_pair",
    "generate_large_prime",
    "is_probably_prime",
    "mod_inverse",
    "mod_pow",
    "random_in_range",
    "CiphertextFormatError",
    "ConfigurationError",
    "FormatError",
    "KeyFormatError",
    "MessageError",
    "NoModularInverseError",
    "PaddingError",
]
