"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from PropOrderingUserError.

Programming errors and bugs should NOT inherit from PropOrderingUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations


class PropOrderingUserError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    configuration issues, unknown rules, unreadable files, etc.
    """
    pass


class ConfigError(PropOrderingUserError, ValueError):
    """Invalid configuration, reported once when rules are activated."""
    pass


__all__ = ["PropOrderingUserError", "ConfigError"]
