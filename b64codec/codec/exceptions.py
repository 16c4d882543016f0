# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the codec."""


# type annotations
from __future__ import annotations
from typing import Optional

# public interface
__all__ = ['DecodeError', 'InvalidInputError', 'BufferSizeError', ]


class DecodeError(ValueError):
    """Base class for failures to decode base64 input."""


class InvalidInputError(DecodeError):
    """Input is not well-formed padded base64 (alphabet, padding, or length)."""

    position: Optional[int]

    def __init__(self: InvalidInputError, message: str, position: int = None) -> None:
        """Initialize with `message` and the offending input `position`, if any."""
        super().__init__(message)
        self.position = position

    @classmethod
    def illegal_data(cls: type, position: int) -> InvalidInputError:
        """Character outside the alphabet at `position`."""
        return cls(f'illegal base64 data at input byte {position}', position)

    @classmethod
    def illegal_padding(cls: type, position: int) -> InvalidInputError:
        """Pad character where one is not allowed at `position`."""
        return cls(f'illegal padding at input byte {position}', position)

    @classmethod
    def bad_length(cls: type, length: int) -> InvalidInputError:
        """Input length is not a multiple of four."""
        return cls(f'input length should be divisible by 4 (found {length})')


class BufferSizeError(ValueError):
    """Caller-provided buffer does not satisfy the size contract."""
