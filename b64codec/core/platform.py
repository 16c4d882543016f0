# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Runtime files and folders."""


# standard libs
import os
import stat

# external libs
from cmdkit.config import Namespace

# public interface
__all__ = ['cwd', 'home', 'root', 'path', 'default_path', 'file_permissions', 'check_private']


cwd = os.getcwd()
home = os.path.expanduser('~')
root = hasattr(os, 'getuid') and os.getuid() == 0
path = Namespace({
    'system': {
        'log': '/var/log/b64codec',
        'config': '/etc/b64codec.toml'},
    'user': {
        'log': f'{home}/.b64codec/log',
        'config': f'{home}/.b64codec/config.toml'},
    'local': {
        'log': f'{cwd}/.b64codec/log',
        'config': f'{cwd}/.b64codec/config.toml'},
})


# NOTE: directories are created on first use (see `core.exceptions`)
default_path = path.system if root else path.user


def file_permissions(filepath: str) -> str:
    """File permissions mask as a string."""
    return stat.filemode(os.stat(filepath).st_mode)


def check_private(filepath: str) -> bool:
    """Check that `filepath` has '-rw-------' permissions."""
    return file_permissions(filepath) == '-rw-------'
