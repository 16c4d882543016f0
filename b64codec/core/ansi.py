# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""ANSI escape sequences for colorizing text output."""


# standard libs
from enum import Enum

# public interface
__all__ = ['Ansi', 'colorize', ]


class Ansi(Enum):
    """ANSI escape sequences for colors and styles."""
    NULL = ''
    RESET = '\033[0m'
    BOLD = '\033[1m'
    FAINT = '\033[2m'
    ITALIC = '\033[3m'
    UNDERLINE = '\033[4m'
    BLACK = '\033[30m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'


def colorize(text: str, color: Ansi) -> str:
    """Apply `color` code to the given `text`."""
    return color.value + text + Ansi.RESET.value
