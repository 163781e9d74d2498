"""
Custom exception hierarchy for the password audit.

Only conditions that abort a run are exceptions. A malformed line is not
one of them: the parsers return None and the pipeline moves on.
"""

from __future__ import annotations


class PasswordPolicyError(Exception):
    """Base exception for all fatal audit failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InputSourceError(PasswordPolicyError):
    """The input file could not be opened for reading."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INPUT_SOURCE_UNAVAILABLE", message, details)


class UnknownValidationModeError(PasswordPolicyError):
    """A configured mode name does not match any ValidationMode."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_VALIDATION_MODE", message, details)


class InvalidLogLevelError(PasswordPolicyError):
    """A configured log level is not a name the logging module knows."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_LOG_LEVEL", message, details)
