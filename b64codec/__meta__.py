# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Package metadata for b64codec."""


__appname__     = 'b64codec'
__version__     = '0.3.0'
__authors__     = ['b64codec Developers',
                   ]
__developer__   = 'b64codec Developers'
__contact__     = ''
__license__     = 'Apache License 2.0'
__website__     = ''
__copyright__   = 'b64codec Developers 2019-2022'
__description__ = 'Standard base64 encoding and decoding over caller-sized buffers.'
__keywords__    = 'base64 rfc4648 codec encoding binary-to-text'
__ascii_art__   = r"""
    __   _____ __ __
   / /_ / ___// // /
  / __ \/ __ \/ // /_
 / /_/ / /_/ /__  __/
/_.___/\____/  /_/
"""
