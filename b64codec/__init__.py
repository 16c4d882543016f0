# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""
Standard base64 encoding and decoding.

Encode raw bytes into the RFC 4648 alphabet and decode that text back
to the original bytes, either into caller-sized buffers (`encode_into`,
`decode_into`) or as new byte strings (`encode`, `decode`).
"""


# standard libs
import sys

# external libs
from rich.traceback import install as enable_rich_tracebacks

# internal libs
from b64codec.__meta__ import (__appname__, __version__, __authors__, __developer__, __contact__,
                               __license__, __website__, __copyright__, __description__,
                               __keywords__, __ascii_art__)
from b64codec.codec import (encode_len, decode_len, encode_into, encode, decode_into, decode,
                            DecodeError, InvalidInputError, BufferSizeError)

# public interface
__all__ = ['encode_len', 'decode_len', 'encode_into', 'encode', 'decode_into', 'decode',
           'DecodeError', 'InvalidInputError', 'BufferSizeError',
           '__appname__', '__version__', '__authors__', '__developer__', '__contact__',
           '__license__', '__website__', '__copyright__', '__description__',
           '__keywords__', '__ascii_art__', ]


# Enable rich tracebacks for interactive shells
if sys.stdout.isatty() and hasattr(sys, 'ps1'):
    enable_rich_tracebacks()
