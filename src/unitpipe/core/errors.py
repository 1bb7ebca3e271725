"""
unitpipe.core.errors
====================

Exception types raised by the unit engine.

Each error also derives from the built-in exception that plain Python code
would raise for the same situation (``TypeError`` for mixing dimensions,
``ValueError`` for bad arguments and malformed input), so callers that only
catch built-ins keep working.
"""

from __future__ import annotations

from typing import Optional


class UnitpipeError(Exception):
    """Base class for every error raised by unitpipe."""


class IncompatibleUnitsError(UnitpipeError, TypeError):
    """Raised when an operation mixes units of different dimensions."""

    def __init__(self, message: str, left: Optional[str] = None, right: Optional[str] = None) -> None:
        super().__init__(message)
        self.left = left
        self.right = right


class InvalidArgumentError(UnitpipeError, ValueError):
    """Raised for arguments outside an operation's contract (e.g. ``unit.pow(0)``)."""


class UnitConflictError(UnitpipeError, ValueError):
    """Raised when registering a symbol that is already taken."""


class LexError(UnitpipeError, ValueError):
    """Raised by the unit expression lexer on an unrecognised character."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class ParseError(UnitpipeError, ValueError):
    """Raised when a token stream does not reduce to a complete unit expression."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


__all__ = [
    "UnitpipeError",
    "IncompatibleUnitsError",
    "InvalidArgumentError",
    "UnitConflictError",
    "LexError",
    "ParseError",
]
