"""Conversions between integers, fixed-length octet strings and Base64 text.

Typical usage example:

    k = byte_length(n)
    block = integer_to_bytes(c, k)
    text = b64_enc(block)
    assert bytes_to_integer(b64_dec(text)) == c
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an integer in accordance to preset procedures.

    Args:
        msg: The bytes (AKA Octet String) to convert. Empty input yields 0.

    Returns:
        The representative integer.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int) -> bytes:
    """Converts an integer to a string, using a fixed-length byte representation.

    Args:
        msg: The integer to unmarshal. Must be non-negative.
        fixedlen: The target length of the byte string.

    Returns:
        The representative bytes, left-padded with zeros. (AKA Octet String)

    Raises:
        ValueError: If `msg` is negative or does not fit in `fixedlen` bytes.
    """
    if msg < 0:
        raise ValueError("Integer must be non-negative")
    if byte_length(msg) > fixedlen:
        raise ValueError(f"Integer too large for {fixedlen} bytes")
    return msg.to_bytes(fixedlen, byteorder="big", signed=False)


def byte_length(value: int) -> int:
    """Number of bytes needed to hold `value`, zero for zero."""
    return (value.bit_length() + 7) // 8


def fit_block(data: bytes, length: int) -> bytes:
    """Normalize `data` to exactly `length` bytes.

    Shorter input is left-padded with zeros, longer input keeps its rightmost `length` bytes. Used against encoders
    that drop or add leading zero octets.
    """
    if len(data) < length:
        return b"\x00" * (length - len(data)) + data
    return data[len(data) - length:]


def b64_enc(msg: bytes) -> str:
    """Encodes bytes into a base64 string.

    Args:
        msg: The bytes to encode.

    Returns:
        A base64 encoded ASCII string.
    """
    return base64.b64encode(msg).decode("ascii")


def b64_dec(msg: str) -> bytes:
    """Decodes a base64 encoded string into bytes.

    Args:
        msg: The base64 encoded string.

    Returns:
        The decoded bytes.

    Raises:
        binascii.Error: If `msg` contains characters outside the alphabet or is incorrectly padded.
    """
    return base64.b64decode(msg.encode("ascii"), validate=True)
