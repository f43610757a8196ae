"""Shared utilities for Americano Pairing."""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os

from americanopairing.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
)

_PACKAGE_LOGGER = "americanopairing"


def _configure_package_logger() -> logging.Logger:
    root = logging.getLogger(_PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger attached to the package logger.

    The package logger gets one stream handler the first time any module asks
    for a logger. Its level comes from the ``AMERICANO_LOG_LEVEL`` environment
    variable (default ``WARNING``).

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    _configure_package_logger()
    return logging.getLogger(name)
