# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Command-line applications."""
