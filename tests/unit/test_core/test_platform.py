# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for runtime files and folders."""


# standard libs
import os

# external libs
import pytest

# internal libs
from b64codec.core import platform
from b64codec.core.platform import path, default_path, file_permissions, check_private


@pytest.mark.unit
class TestPath:
    """Unit tests for site paths."""

    def test_default(self) -> None:
        assert default_path in (path.system, path.user)
        assert default_path is (path.system if platform.root else path.user)

    def test_local(self) -> None:
        assert path.local.config == os.path.join(platform.cwd, '.b64codec', 'config.toml')

    def test_public_interface(self) -> None:
        assert sorted(platform.__all__) == sorted(['cwd', 'home', 'root', 'path', 'default_path',
                                                   'file_permissions', 'check_private'])
        for name in platform.__all__:
            assert hasattr(platform, name)


@pytest.mark.unit
class TestCheckPrivate:
    """Unit tests for file permission checks."""

    def test_private(self, tmp_path) -> None:
        filepath = os.path.join(tmp_path, 'config.toml')
        open(filepath, mode='w').close()
        os.chmod(filepath, 0o600)
        assert file_permissions(filepath) == '-rw-------'
        assert check_private(filepath)

    def test_non_private(self, tmp_path) -> None:
        filepath = os.path.join(tmp_path, 'config.toml')
        open(filepath, mode='w').close()
        os.chmod(filepath, 0o644)
        assert file_permissions(filepath) == '-rw-r--r--'
        assert not check_private(filepath)
