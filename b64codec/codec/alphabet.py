# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Standard base64 alphabet and its reverse lookup table."""


# type annotations
from typing import Final

# public interface
__all__ = ['ALPHABET', 'PAD', 'INVALID', 'DECODE_MAP', ]


# RFC 4648 standard alphabet (value -> character)
ALPHABET: Final[bytes] = (b'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                          b'abcdefghijklmnopqrstuvwxyz'
                          b'0123456789+/')


PAD: Final[int] = ord('=')


# Sentinel for characters outside the alphabet
INVALID: Final[int] = 0xFF


def _build_decode_map(alphabet: bytes) -> bytes:
    """Build 256-entry reverse table (character -> 6-bit value or INVALID)."""
    table = bytearray([INVALID]) * 256
    for value, char in enumerate(alphabet):
        table[char] = value
    return bytes(table)


# Character -> 6-bit value (note: the pad character maps to INVALID)
DECODE_MAP: Final[bytes] = _build_decode_map(ALPHABET)
