#!/usr/bin/env python3
"""
Errors
======
Exception types raised while loading dialects and composing names.
"""

from typing import Optional


class NameKitError(Exception):
    """Base class for all namekit errors."""


class LoadError(NameKitError, OSError):
    """A dialect source could not be read."""


class ParseError(NameKitError, ValueError):
    """A non-blank dialect line could not be interpreted as a syllable."""

    def __init__(self, message: str, line: str = "",
                 source: Optional[str] = None, lineno: Optional[int] = None):
        self.line = line
        self.source = source
        self.lineno = lineno
        if source is not None and lineno is not None:
            message = f"{source}:{lineno}: {message}"
        super().__init__(message)


class EmptyPoolError(NameKitError, ValueError):
    """A dialect produced no syllables for one of the positional roles."""

    def __init__(self, role: str, source: Optional[str] = None):
        self.role = role
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"No {role} syllables{where}")


class CompositionError(NameKitError, RuntimeError):
    """No syllable in a pool may follow the previous syllable."""


class ConfigError(NameKitError, ValueError):
    """A setting in app.yaml has an unusable value."""
