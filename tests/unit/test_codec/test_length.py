# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for output length calculations."""


# external libs
import pytest
from hypothesis import given, strategies as st

# internal libs
from b64codec.codec.length import encode_len, decode_len


@pytest.mark.unit
class TestEncodeLen:
    """Unit tests for encode_len."""

    @pytest.mark.parametrize('length, expected', [(0, 0), (1, 4), (2, 4), (3, 4), (4, 8), (5, 8), (6, 8), (7, 12)])
    def test_values(self, length: int, expected: int) -> None:
        assert encode_len(length) == expected

    @given(length=st.integers(min_value=0, max_value=10**9))
    def test_multiple_of_four(self, length: int) -> None:
        assert encode_len(length) % 4 == 0
        assert encode_len(length) == 4 * -(-length // 3)

    @staticmethod
    def test_negative_raises() -> None:
        with pytest.raises(ValueError) as exc_info:
            encode_len(-1)
        response, = exc_info.value.args
        assert response == 'Expected non-negative length, found -1'


@pytest.mark.unit
class TestDecodeLen:
    """Unit tests for decode_len."""

    @pytest.mark.parametrize('length, expected', [(0, 0), (3, 0), (4, 3), (7, 3), (8, 6), (12, 9)])
    def test_values(self, length: int, expected: int) -> None:
        assert decode_len(length) == expected

    @given(length=st.integers(min_value=0, max_value=10**6))
    def test_upper_bound(self, length: int) -> None:
        """Decoding an encoding never needs more room than decode_len allows."""
        assert decode_len(encode_len(length)) >= length

    @staticmethod
    def test_negative_raises() -> None:
        with pytest.raises(ValueError):
            decode_len(-4)
