# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Buffer-level base64 encoder and decoder."""


# internal libs
from b64codec.codec.alphabet import ALPHABET, PAD, DECODE_MAP, INVALID
from b64codec.codec.length import encode_len, decode_len
from b64codec.codec.encoder import encode_into, encode
from b64codec.codec.decoder import decode_into, decode, DecodeState
from b64codec.codec.exceptions import DecodeError, InvalidInputError, BufferSizeError

# public interface
__all__ = ['ALPHABET', 'PAD', 'DECODE_MAP', 'INVALID',
           'encode_len', 'decode_len', 'encode_into', 'encode', 'decode_into', 'decode',
           'DecodeState', 'DecodeError', 'InvalidInputError', 'BufferSizeError', ]
