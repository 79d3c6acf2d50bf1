#!/usr/bin/env python3
"""
Errors
======
Every failure a render can surface. All are ``ValueError`` subclasses so
callers that already guard builder input with ``except ValueError`` keep
working.
"""

from typing import Optional


class FluentCodeError(ValueError):
    """Base class for fluent code generation errors."""


class EmptySegments(FluentCodeError):
    """Render was called on a builder with no segments."""

    def __init__(self):
        super().__init__("No segments configured: add at least one word or digit group")


class InvalidBounds(FluentCodeError):
    """Both length bounds are set and ``min_length > max_length``."""

    def __init__(self, min_length: int, max_length: int):
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"Invalid length bounds: min_length {min_length} > max_length {max_length}"
        )


class LengthUnsatisfiable(FluentCodeError):
    """No candidate within the retry budget fit the length bounds."""

    def __init__(self,
                 min_length: Optional[int],
                 max_length: Optional[int],
                 attempts: int,
                 last_length: int,
                 best_length: int):
        self.min_length = min_length
        self.max_length = max_length
        self.attempts = attempts
        self.last_length = last_length
        self.best_length = best_length
        low = 0 if min_length is None else min_length
        high = "inf" if max_length is None else max_length
        super().__init__(
            f"No code of length [{low}, {high}] after {attempts} attempts "
            f"(last length {last_length}, closest {best_length})"
        )


class EmptyCorpus(FluentCodeError):
    """A category has no words to draw from."""

    def __init__(self, category, detail: str = ""):
        self.category = category
        label = getattr(category, 'name', category)
        message = f"No words available for category '{label}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownCategory(EmptyCorpus):
    """A category key that names no known part of speech or corpus."""

    def __init__(self, category):
        self.category = category
        FluentCodeError.__init__(self, f"Unknown category '{category}'")


__all__ = [
    'FluentCodeError',
    'EmptySegments',
    'InvalidBounds',
    'LengthUnsatisfiable',
    'EmptyCorpus',
    'UnknownCategory',
]
