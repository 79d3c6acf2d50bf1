#!/usr/bin/env python3
"""
Random Source
=============
Pseudo-random draws for word and digit selection.

Codes are memorable identifiers, not secrets: a plain ``random.Random``
is used rather than a CSPRNG. Each thread gets its own generator so
concurrent renders never share mutable random state.
"""

import random
import string
import threading
from typing import Any, Optional, Sequence


class CodeRandom:
    """
    Thin wrapper around ``random.Random`` with the draws a word pool needs.

    Usage:
        rng = CodeRandom(seed=42)
        rng.choice(["calm", "vivid"])
        rng.digits(6)
    """

    def __init__(self, seed: Optional[Any] = None):
        self._rng = random.Random(seed)

    def seed(self, value: Optional[Any] = None) -> None:
        """Reseed the generator (``None`` reseeds from system entropy)."""
        self._rng.seed(value)

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)

    def digits(self, count: int) -> str:
        """Return ``count`` characters, each uniform over 0-9."""
        if count <= 0:
            raise ValueError(f"Digit count must be positive, got {count}")
        return ''.join(self._rng.choice(string.digits) for _ in range(count))


# Per-thread instances
_local = threading.local()


def get_rng() -> CodeRandom:
    """Get the calling thread's random source, creating it on first use."""
    rng = getattr(_local, 'rng', None)
    if rng is None:
        rng = CodeRandom()
        _local.rng = rng
    return rng


def seed(value: Optional[Any] = None) -> None:
    """Reseed the calling thread's random source."""
    get_rng().seed(value)


__all__ = ['CodeRandom', 'get_rng', 'seed']
