"""Shared helpers for Dojo Draw: logging setup and identifier generation."""

# Dojo Draw
# Copyright (C) 2025  Dojo Draw developers
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
import uuid
from typing import Union

ROOT_LOGGER_NAME = "dojodraw"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # Attach the handler once, no matter how many modules ask for a logger
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the application's root logger.

    Args:
        name: Usually the calling module's ``__name__``

    Returns:
        Logger that propagates to the configured ``dojodraw`` root logger
    """
    _configure_root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of the application's root logger.

    Args:
        level: A ``logging`` level constant or its name (e.g. ``"DEBUG"``)
    """
    root = _configure_root_logger()
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``entrant_3f2a9c1e4b7d``.

    Args:
        prefix: Kind of object the id is for, usually its class name
    """
    return f"{prefix.lower()}_{uuid.uuid4().hex[:12]}"
