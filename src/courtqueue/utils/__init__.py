"""Shared utilities for Court Queue."""

# Court Queue
# Copyright (C) 2025  Court Queue developers
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

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "COURTQUEUE_LOG_LEVEL"
ROOT_LOGGER = "courtqueue"


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a Court Queue module.

    Only the package root logger gets a level, read once from the
    ``COURTQUEUE_LOG_LEVEL`` environment variable; module loggers inherit
    it. Output handling is left to the application (see
    :func:`configure_logging`).

    Args:
        name: Logger name, normally ``__name__`` of the calling module

    Returns:
        The module logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    level = os.environ.get(LOG_LEVEL_ENV)
    if level and root.level == logging.NOTSET:
        root.setLevel(level.upper())
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Send Court Queue log records to stderr at the given level."""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())


__all__ = ["setup_logger", "configure_logging"]
