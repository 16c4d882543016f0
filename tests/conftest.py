# SPDX-FileCopyrightText: 2019-2022 b64codec Developers
# SPDX-License-Identifier: Apache-2.0

"""Shared pytest configuration."""


def pytest_configure(config) -> None:
    """Register custom markers."""
    config.addinivalue_line('markers', 'unit: fast tests with no file system access')
    config.addinivalue_line('markers', 'integration: tests exercising applications and files')
