# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Caller buffer contracts for the encoder and decoder."""


# type annotations
from typing import Union

# internal libs
from b64codec.codec.exceptions import BufferSizeError

# public interface
__all__ = ['Buffer', 'WritableBuffer', 'input_view', 'output_view', ]


# Anything supporting the buffer protocol with byte-sized items
Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _byte_view(data: Buffer) -> memoryview:
    view = memoryview(data)
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view


def input_view(data: Buffer, length: int = None) -> memoryview:
    """Read-only view of the first `length` bytes of `data` (default all)."""
    view = _byte_view(data)
    if length is None:
        return view
    if length < 0 or length > len(view):
        raise BufferSizeError(f'Input length {length} outside of buffer (size {len(view)})')
    return view[:length]


def output_view(output: WritableBuffer, required: int) -> memoryview:
    """Writable view of `output`, ensuring at least `required` bytes of capacity."""
    view = _byte_view(output)
    if view.readonly:
        raise TypeError(f'Output buffer must be writable ({type(output).__name__} is read-only)')
    if len(view) < required:
        raise BufferSizeError(f'Output buffer too small (need {required}, found {len(view)})')
    return view
