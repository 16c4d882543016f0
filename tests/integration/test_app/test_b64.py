# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Integration tests for b64 command-line application."""


# type annotations
from __future__ import annotations

# standard libs
import os
import random
import logging

# external libs
from pytest import mark, fixture, CaptureFixture, LogCaptureFixture
from cmdkit.app import exit_status

# internal libs
from b64codec.apps.b64 import B64App
from b64codec.codec import DecodeError


@fixture
def make_file(tmp_path):
    """Factory writing `content` to a new file and returning its path."""

    def _make_file(content: bytes, name: str = 'input.dat') -> str:
        filepath = os.path.join(tmp_path, name)
        with open(filepath, mode='wb') as stream:
            stream.write(content)
        return filepath

    return _make_file


@mark.integration
class TestB64App:
    """Test encode/decode workflows."""

    @mark.parametrize('content, expected', [
        (b'', b''),
        (b'f', b'Zg=='),
        (b'foobar', b'Zm9vYmFy'),
    ])
    def test_encode(self: TestB64App, content: bytes, expected: bytes,
                    make_file, capsysbinary: CaptureFixture) -> None:
        """Encoded text of the file is written to stdout."""
        status = B64App.main(['encode', make_file(content)])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.success
        assert out == expected

    @mark.parametrize('content, expected', [
        (b'', b''),
        (b'Zm8=', b'fo'),
        (b'Zm9vYg==', b'foob'),
    ])
    def test_decode(self: TestB64App, content: bytes, expected: bytes,
                    make_file, capsysbinary: CaptureFixture) -> None:
        """Decoded bytes of the file are written to stdout."""
        status = B64App.main(['decode', make_file(content)])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.success
        assert out == expected

    def test_round_trip(self: TestB64App, make_file, capsysbinary: CaptureFixture) -> None:
        """Binary content survives encode then decode through files."""
        content = bytes(random.randrange(256) for _ in range(1000))
        assert B64App.main(['encode', make_file(content, 'raw.dat')]) == exit_status.success
        encoded, _ = capsysbinary.readouterr()
        assert B64App.main(['decode', make_file(encoded, 'raw.b64')]) == exit_status.success
        decoded, _ = capsysbinary.readouterr()
        assert decoded == content

    def test_decode_invalid(self: TestB64App, make_file, capsysbinary: CaptureFixture,
                            caplog: LogCaptureFixture) -> None:
        """Failure on illegal base64 input, nothing written to stdout."""
        with caplog.at_level(logging.DEBUG, logger='b64'):
            status = B64App.main(['decode', make_file(b'AB#D')])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.runtime_error
        assert out == b''
        assert ('b64', logging.CRITICAL, 'illegal base64 data at input byte 2') in caplog.record_tuples

    def test_decode_bad_length(self: TestB64App, make_file, capsysbinary: CaptureFixture,
                               caplog: LogCaptureFixture) -> None:
        """Trailing newline makes the input length invalid."""
        with caplog.at_level(logging.DEBUG, logger='b64'):
            status = B64App.main(['decode', make_file(b'Zm9v\n')])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.runtime_error
        assert out == b''
        assert ('b64', logging.CRITICAL, 'input length should be divisible by 4 (found 5)') in caplog.record_tuples

    def test_missing_file(self: TestB64App, tmp_path, capsysbinary: CaptureFixture,
                          caplog: LogCaptureFixture) -> None:
        """Failure on a file that does not exist."""
        with caplog.at_level(logging.DEBUG, logger='b64'):
            status = B64App.main(['encode', os.path.join(tmp_path, 'missing.dat')])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.runtime_error
        assert out == b''
        assert any(name == 'b64' and level == logging.CRITICAL
                   for name, level, message in caplog.record_tuples)

    def test_directory(self: TestB64App, tmp_path, capsysbinary: CaptureFixture,
                       caplog: LogCaptureFixture) -> None:
        """Failure on a directory in place of a file."""
        with caplog.at_level(logging.DEBUG, logger='b64'):
            status = B64App.main(['decode', str(tmp_path)])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.runtime_error
        assert out == b''
        assert any(name == 'b64' and level == logging.CRITICAL
                   for name, level, message in caplog.record_tuples)

    def test_exception_handlers(self: TestB64App) -> None:
        """Decode and file errors are handled by their base classes."""
        assert list(B64App.exceptions) == [DecodeError, OSError, Exception]

    def test_unknown_command(self: TestB64App, make_file, capsysbinary: CaptureFixture) -> None:
        """Failure on a command other than encode or decode."""
        status = B64App.main(['compress', make_file(b'foo')])
        out, err = capsysbinary.readouterr()
        assert status != exit_status.success
        assert out == b''

    def test_profile_to_file(self: TestB64App, tmp_path, make_file, capsysbinary: CaptureFixture) -> None:
        """Profile data is dumped when a path is given."""
        profile_path = os.path.join(tmp_path, 'b64.prof')
        status = B64App.main(['encode', make_file(b'foobar'), '--profile', profile_path])
        out, err = capsysbinary.readouterr()
        assert status == exit_status.success
        assert out == b'Zm9vYmFy'
        assert os.path.exists(profile_path)
