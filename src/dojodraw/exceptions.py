"""Exceptions for use in Dojo Draw"""

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


# ========== Base Application Exception ==========


class DojoDrawException(Exception):
    """Base exception for all Dojo Draw errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationError(DojoDrawException):
    """Raised when age or weight band configuration is invalid."""

    pass


# ========== Draw Exceptions ==========


class DrawException(DojoDrawException):
    """Base exception for grouping and bracket errors."""

    pass


class PreconditionViolation(DrawException):
    """Raised when a component receives input its contract rules out.

    Groups are never constructed empty and only Kumite groups reach the
    bracket builder, so this signals a broken upstream contract rather
    than a user error.
    """

    pass


# ========== Entrant Exceptions ==========


class EntrantException(DojoDrawException):
    """Base exception for entrant-related errors."""

    pass


class InvalidEntrantDataException(EntrantException):
    """Raised when an entrant record is invalid or incomplete."""

    pass


# ========== File/Resource Exceptions ==========


class ImportException(DojoDrawException):
    """Raised when an entrant list cannot be read."""

    pass


class RenderException(DojoDrawException):
    """Raised when a printable document cannot be produced."""

    pass
