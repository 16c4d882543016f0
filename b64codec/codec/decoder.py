# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""
Decode standard base64 text back to raw bytes.

Input is consumed in groups of four characters. Each group is driven
through a small state machine (see `DecodeState`) so that a character
outside the alphabet, or a pad character anywhere other than the last
one or two positions of the final group, is rejected immediately.
Nothing is truncated or substituted on failure.

Unused low bits in a padded final group (e.g., "Zh==" versus "Zg==")
are ignored rather than rejected.
"""


# type annotations
from __future__ import annotations
from typing import Dict, List, Tuple, Union

# standard libs
import logging
from enum import Enum, auto

# internal libs
from b64codec.codec.alphabet import DECODE_MAP, INVALID, PAD
from b64codec.codec.length import decode_len
from b64codec.codec.buffer import Buffer, WritableBuffer, input_view, output_view
from b64codec.codec.exceptions import InvalidInputError

# public interface
__all__ = ['DecodeState', 'decode_into', 'decode', ]


# module level logger
log = logging.getLogger(__name__)


class DecodeState(Enum):
    """Position within a four-character group."""
    EXPECT_CHAR_1 = auto()
    EXPECT_CHAR_2 = auto()
    EXPECT_CHAR_3_OR_PAD = auto()
    EXPECT_CHAR_4_OR_PAD = auto()
    EXPECT_PAD = auto()
    DONE = auto()
    ERROR = auto()


# Transitions on a character from the alphabet
_ON_CHAR: Dict[DecodeState, DecodeState] = {
    DecodeState.EXPECT_CHAR_1: DecodeState.EXPECT_CHAR_2,
    DecodeState.EXPECT_CHAR_2: DecodeState.EXPECT_CHAR_3_OR_PAD,
    DecodeState.EXPECT_CHAR_3_OR_PAD: DecodeState.EXPECT_CHAR_4_OR_PAD,
    DecodeState.EXPECT_CHAR_4_OR_PAD: DecodeState.DONE,
}


# Transitions on a pad character (final group only)
_ON_PAD: Dict[DecodeState, DecodeState] = {
    DecodeState.EXPECT_CHAR_3_OR_PAD: DecodeState.EXPECT_PAD,
    DecodeState.EXPECT_CHAR_4_OR_PAD: DecodeState.DONE,
    DecodeState.EXPECT_PAD: DecodeState.DONE,
}


def _transition(state: DecodeState, char: int, final: bool) -> Tuple[DecodeState, int]:
    """Advance `state` on `char`, returning the next state and its 6-bit value (or INVALID)."""
    value = DECODE_MAP[char]
    if value != INVALID and state in _ON_CHAR:
        return _ON_CHAR[state], value
    if char == PAD and final and state in _ON_PAD:
        return _ON_PAD[state], INVALID
    return DecodeState.ERROR, INVALID


def _decode_group(src: memoryview, start: int, final: bool) -> List[int]:
    """Run the state machine over one group, returning its 6-bit values (2 to 4 of them)."""
    values = []
    state = DecodeState.EXPECT_CHAR_1
    for position in range(start, start + 4):
        char = src[position]
        state, value = _transition(state, char, final)
        if state is DecodeState.ERROR:
            if char == PAD:
                raise InvalidInputError.illegal_padding(position)
            raise InvalidInputError.illegal_data(position)
        if value != INVALID:
            values.append(value)
    return values


def _as_buffer(data: Union[str, Buffer], length: int = None) -> Buffer:
    if not isinstance(data, str):
        return data
    if length is not None and 0 <= length <= len(data):
        data = data[:length]  # characters past `length` are never decoded
    try:
        return data.encode('ascii')
    except UnicodeEncodeError as error:
        raise InvalidInputError.illegal_data(error.start) from error


def decode_into(output: WritableBuffer, data: Union[str, Buffer], length: int = None) -> int:
    """
    Write the raw bytes represented by base64 `data` into `output`.

    Only the first `length` characters of `data` are decoded (default all)
    and this must be a multiple of four. The `output` buffer must hold at least
    `decode_len(length)` bytes. Returns the exact number of bytes written.

    Raises:
        InvalidInputError: Illegal character, misplaced padding, or bad length.
    """
    src = input_view(_as_buffer(data, length), length)
    size = len(src)
    if size % 4 != 0:
        log.debug(f'Rejected base64 input with length {size}')
        raise InvalidInputError.bad_length(size)
    dst = output_view(output, decode_len(size))

    j = 0
    for start in range(0, size, 4):
        values = _decode_group(src, start, final=(start + 4 == size))
        dst[j] = (values[0] << 2 | values[1] >> 4) & 0xFF
        if len(values) > 2:
            dst[j + 1] = (values[1] << 4 | values[2] >> 2) & 0xFF
        if len(values) > 3:
            dst[j + 2] = (values[2] << 6 | values[3]) & 0xFF
        j += len(values) - 1

    return j


def decode(data: Union[str, Buffer]) -> bytes:
    """Decode base64 `data` (str or bytes) into a new byte string."""
    src = input_view(_as_buffer(data))
    output = bytearray(decode_len(len(src)))
    size = decode_into(output, src)
    return bytes(output[:size])
