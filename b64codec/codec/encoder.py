# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Encode raw bytes as standard base64 text."""


# internal libs
from b64codec.codec.alphabet import ALPHABET, PAD
from b64codec.codec.length import encode_len
from b64codec.codec.buffer import Buffer, WritableBuffer, input_view, output_view

# public interface
__all__ = ['encode_into', 'encode', ]


def encode_into(output: WritableBuffer, data: Buffer, length: int = None) -> int:
    """
    Write the base64 form of `data` into `output`.

    Only the first `length` bytes of `data` are encoded (default all).
    The `output` buffer must hold at least `encode_len(length)` bytes.
    Returns the number of characters written, always `encode_len(length)`.
    """
    src = input_view(data, length)
    size = len(src)
    dst = output_view(output, encode_len(size))

    tail = size % 3
    j = 0
    for i in range(0, size - tail, 3):
        n = src[i] << 16 | src[i + 1] << 8 | src[i + 2]
        dst[j] = ALPHABET[n >> 18 & 0x3F]
        dst[j + 1] = ALPHABET[n >> 12 & 0x3F]
        dst[j + 2] = ALPHABET[n >> 6 & 0x3F]
        dst[j + 3] = ALPHABET[n & 0x3F]
        j += 4

    i = size - tail
    if tail == 1:
        n = src[i] << 16
        dst[j] = ALPHABET[n >> 18 & 0x3F]
        dst[j + 1] = ALPHABET[n >> 12 & 0x3F]
        dst[j + 2] = PAD
        dst[j + 3] = PAD
        j += 4
    elif tail == 2:
        n = src[i] << 16 | src[i + 1] << 8
        dst[j] = ALPHABET[n >> 18 & 0x3F]
        dst[j + 1] = ALPHABET[n >> 12 & 0x3F]
        dst[j + 2] = ALPHABET[n >> 6 & 0x3F]
        dst[j + 3] = PAD
        j += 4

    return j


def encode(data: Buffer) -> bytes:
    """Encode raw bytes `data` into a new base64 byte string."""
    src = input_view(data)
    output = bytearray(encode_len(len(src)))
    encode_into(output, src)
    return bytes(output)
