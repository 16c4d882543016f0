# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Common exceptions and error handling."""


# type annotations
from __future__ import annotations
from typing import Callable, Optional

# standard libs
import os
import sys
import datetime
import traceback
import logging

# external libs
from cmdkit.app import exit_status

# internal libs
from b64codec.core.ansi import Ansi, colorize
from b64codec.core.platform import default_path

# public interface
__all__ = ['log_exception', 'write_traceback', 'display_critical', ]


def log_exception(exc: Exception, logger: Callable[[str], None], status: int) -> int:
    """Log the exception and return `status`."""
    logger(str(exc))
    return status


def display_critical(message: str, module: str = None) -> None:
    """Print critical `message` to stderr (used before logging is configured)."""
    label = colorize('CRITICAL', Ansi.MAGENTA)
    module = '' if not module else colorize(f' [{module}]', Ansi.FAINT)
    print(f'{label}{module} {message}', file=sys.stderr)


def write_traceback(exc: Exception, logger: logging.Logger = None, module: str = None,
                    status: int = exit_status.uncaught_exception) -> int:
    """Write exception traceback to file and return exit `status`."""
    filepath = _traceback_path()
    with open(filepath, mode='w') as stream:
        print(''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)), file=stream)
    msg = str(exc).replace('\n', ' - ')
    if logger is None:
        display_critical(f'{exc.__class__.__name__}: {msg}', module=module)
        display_critical(f'Exception traceback written to {filepath}', module=module)
    else:
        logger.critical(f'{exc.__class__.__name__}: {msg}')
        logger.critical(f'Exception traceback written to {filepath}')
    return status


def _traceback_path(directory: Optional[str] = None) -> str:
    """Timestamped file path for a new traceback log."""
    directory = directory or default_path.log
    os.makedirs(directory, exist_ok=True)
    time = datetime.datetime.now().strftime('%Y%m%d-%H%M%S')
    return os.path.join(directory, f'exception-{time}.log')
