# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Output length calculations for sizing buffers ahead of a call."""


# public interface
__all__ = ['encode_len', 'decode_len', ]


def encode_len(length: int) -> int:
    """Exact number of characters needed to encode `length` bytes."""
    if length < 0:
        raise ValueError(f'Expected non-negative length, found {length}')
    return ((length + 2) // 3) * 4


def decode_len(length: int) -> int:
    """
    Upper bound on bytes produced by decoding `length` characters.

    The exact count depends on trailing padding and is only known
    after decoding (see `decode_into`).
    """
    if length < 0:
        raise ValueError(f'Expected non-negative length, found {length}')
    return (length // 4) * 3
