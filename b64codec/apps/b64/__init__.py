# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Encode or decode a file as standard base64."""


# type annotations
from __future__ import annotations
from typing import Dict, Callable, Tuple

# standard libs
import sys
import functools
from functools import cached_property

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface

# internal libs
from b64codec import __version__, __copyright__, __developer__
from b64codec.codec import (encode_len, decode_len, encode_into, decode_into,
                            DecodeError)
from b64codec.core.exceptions import log_exception, write_traceback
from b64codec.core.logging import Logger
from b64codec.core.profiler import profile

# public interface
__all__ = ['B64App', 'main', ]

# application logger
log = Logger.with_name('b64')


PROGRAM = 'b64'
MODES = ['encode', 'decode']
MODE_OPT = '{' + ' | '.join(MODES) + '}'

USAGE = f"""\
usage: {PROGRAM} [-h] [-v] {MODE_OPT} FILE [--profile [PATH]]
{__doc__}\
"""

EPILOG = f"""\
Copyright {__copyright__}
{__developer__}\
"""

HELP = f"""\
{USAGE}

arguments:
encode                 Write base64 text of FILE to stdout.
decode                 Write raw bytes of base64 FILE to stdout.
FILE                   Path to input file (read whole).

options:
    --profile [PATH]   Profile the conversion (print stats to stderr or dump to PATH).
-h, --help             Show this message and exit.
-v, --version          Show the version and exit.

{EPILOG}
"""


# logging setup for command-line interface
Application.log_critical = log.critical
Application.log_exception = log.critical


_runtime_error = functools.partial(log_exception, logger=log.critical, status=exit_status.runtime_error)


class B64App(Application):
    """Application class for the b64 command-line tool."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('-v', '--version', version=__version__, action='version')

    mode: str = None
    interface.add_argument('mode', choices=MODES)

    filepath: str = None
    interface.add_argument('filepath', metavar='FILE')

    profile_path: str = None
    interface.add_argument('--profile', nargs='?', const='-', default=None, dest='profile_path')

    exceptions = {
        DecodeError: _runtime_error,
        OSError: _runtime_error,
        Exception: functools.partial(write_traceback, logger=log),
    }

    def run(self: B64App) -> None:
        """Read input file, convert, and write result to stdout."""
        data = self.read_input()
        convert = self.modes[self.mode]
        if self.profile_path is not None:
            filename = None if self.profile_path == '-' else self.profile_path
            convert = profile(filename=filename)(convert)
        output, count = convert(data)
        stream = sys.stdout.buffer
        stream.write(output[:count])
        stream.flush()

    @cached_property
    def modes(self: B64App) -> Dict[str, Callable[[bytes], Tuple[bytearray, int]]]:
        """Map of names to conversion callbacks."""
        return {
            'encode': self.encode,
            'decode': self.decode,
        }

    def read_input(self: B64App) -> bytes:
        """Load the whole input file into memory."""
        with open(self.filepath, mode='rb') as stream:
            data = stream.read()
        log.debug(f'Read {len(data)} bytes ({self.filepath})')
        return data

    @staticmethod
    def encode(data: bytes) -> Tuple[bytearray, int]:
        """Encode `data` into a pre-sized buffer."""
        output = bytearray(encode_len(len(data)))
        count = encode_into(output, data, len(data))
        log.info(f'Encoded {len(data)} bytes ({count} characters)')
        return output, count

    @staticmethod
    def decode(data: bytes) -> Tuple[bytearray, int]:
        """Decode `data` into a pre-sized buffer."""
        output = bytearray(decode_len(len(data)))
        count = decode_into(output, data, len(data))
        log.info(f'Decoded {len(data)} characters ({count} bytes)')
        return output, count


def main() -> int:
    """Entry-point for `b64` console application."""
    return B64App.main(sys.argv[1:])
