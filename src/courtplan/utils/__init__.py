"""Shared helpers for Court Plan: logger setup and identifier generation."""

# Court Plan
# Copyright (C) 2025  Court Plan developers
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
import uuid

from courtplan.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "courtplan"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.handlers:
        return package_logger

    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    package_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the shared ``courtplan`` handler.

    The package logger is configured once, on first use. Its level is read
    from the ``COURTPLAN_LOG_LEVEL`` environment variable.

    Args:
        name: Logger name, normally the calling module's ``__name__``

    Returns:
        The named logger
    """
    _configure_package_logger()
    return logging.getLogger(name)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``player_3f2a...``.

    Args:
        prefix: Kind of object the identifier is for

    Returns:
        A new identifier, unique for the life of the process
    """
    return f"{prefix.lower()}_{uuid.uuid4().hex}"
