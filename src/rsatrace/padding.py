"""PKCS#1 v1.5 encryption padding (block type 2).

Encoded block layout for a `k`-byte modulus:

    0x00 || 0x02 || PS || 0x00 || M

where PS is at least eight random non-zero octets. A single block therefore carries at most `k - 11` message bytes.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from secrets import token_bytes

from rsatrace.errors import PaddingError

MIN_PADDING: int = 8
PADDING_OVERHEAD: int = MIN_PADDING + 3


def max_chunk_size(bsize: int) -> int:
    """Largest message length, in bytes, that fits a padded block of `bsize` bytes."""
    return bsize - PADDING_OVERHEAD


def _nonzero_bytes(length: int) -> bytes:
    ps = bytearray(token_bytes(length))
    for i, by in enumerate(ps):
        while by == 0:
            by = token_bytes(1)[0]
        ps[i] = by
    return bytes(ps)


def pad(message: bytes, bsize: int) -> bytes:
    """Pads the message to a full `bsize`-byte block.

    Args:
        message: The message bytes.
        bsize: The byte length of the modulus.

    Returns:
        The encoded block, exactly `bsize` bytes long.

    Raises:
        PaddingError: If the padding string would be shorter than eight bytes.
    """
    ps_len = bsize - len(message) - 3
    if ps_len < MIN_PADDING:
        raise PaddingError("Message too large for key size")
    return b"\x00\x02" + _nonzero_bytes(ps_len) + b"\x00" + message


def unpad(block: bytes) -> bytes:
    """Strips the padding from a decrypted block.

    Args:
        block: The full decrypted block, including the leading zero octet.

    Returns:
        The recovered message bytes.

    Raises:
        PaddingError: If the header is not `00 02`, or the separator is missing or leaves fewer than eight padding
            bytes.
    """
    if block[0:2] != b"\x00\x02":
        raise PaddingError("Invalid padding format")
    sep = block.find(b"\x00", 2)
    if sep < 2 + MIN_PADDING:
        raise PaddingError("Invalid padding: insufficient padding or missing separator")
    return block[sep + 1:]
