"""Exceptions for use in Debate Pairing"""

# Debate Pairing
# Copyright (C) 2025  Debate Pairing developers
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

from typing import List, Optional


# ========== Base Application Exception ==========


class DebatePairingException(Exception):
    """Base exception for all Debate Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(DebatePairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing request is invalid (e.g. an odd pool)."""

    pass


class ConflictExhaustionException(PairingException):
    """Raised when a pairing has no conflict-free adjudicator left.

    Attributes
    ----------
    pairing_label : str
        Human readable description of the pairing that could not be covered.
    """

    def __init__(self, pairing_label: str):
        self.pairing_label = pairing_label
        super().__init__(
            f"No conflict-free adjudicator available for pairing {pairing_label}"
        )


# ========== Resource Exceptions ==========


class ResourceException(DebatePairingException):
    """Base exception for adjudicator and venue resource errors."""

    pass


class ResourceInsufficiencyException(ResourceException):
    """Raised when there are fewer adjudicators or venues than matches.

    Attributes
    ----------
    resource : str
        Which pool ran short ("adjudicators" or "venues").
    required : int
        Number of matches needing the resource.
    available : int
        Size of the pool.
    """

    def __init__(self, resource: str, required: int, available: int):
        self.resource = resource
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough {resource}: need {required}, have {available} "
            f"(short by {required - available})"
        )

    @property
    def shortfall(self) -> int:
        return self.required - self.available


# ========== Validation Exceptions ==========


class ValidationException(DebatePairingException):
    """Base exception for validation errors."""

    pass


class InputIntegrityException(ValidationException):
    """Raised by the roster pre-check when the input feeds contradict each other."""

    def __init__(self, issues: List[str], message: Optional[str] = None):
        self.issues = list(issues)
        if message is None:
            message = "Roster failed integrity checks:\n" + "\n".join(
                f"  - {issue}" for issue in self.issues
            )
        super().__init__(message)


# ========== Feed Exceptions ==========


class FeedException(DebatePairingException):
    """Raised when an input feed cannot be read."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DebatePairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
