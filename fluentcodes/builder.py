#!/usr/bin/env python3
"""
Code Builder
============
Accumulates an ordered list of segment requests (words by grammatical
category, digit groups) and renders them into a joined code.

Configuration calls return the builder so they chain:

    code = (CodeBuilder()
            .with_max_length(24)
            .adjective().noun().six_digits()
            .to_string())
    # 'hardy-lantern-402117'

Rendering never mutates the builder; each call draws fresh tokens. When
length bounds are set, the whole candidate is redrawn until it fits or
the attempt budget runs out.
"""

import copy
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .categories import GrammaticalCategory
from .errors import EmptySegments, InvalidBounds, LengthUnsatisfiable
from .settings import get_setting, require_setting
from .words import WordPool, get_pool

logger = logging.getLogger(__name__)


# =============================================================================
# Segment Requests
# =============================================================================

@dataclass(frozen=True)
class WordRequest:
    """One word drawn from a grammatical category."""
    category: GrammaticalCategory

    def __post_init__(self):
        object.__setattr__(self, 'category', GrammaticalCategory.parse(self.category))


@dataclass(frozen=True)
class DigitRequest:
    """One group of ``digit_count`` random digits."""
    digit_count: int

    def __post_init__(self):
        if isinstance(self.digit_count, bool) or not isinstance(self.digit_count, int):
            raise TypeError(f"digit_count must be an int, got {self.digit_count!r}")
        if self.digit_count <= 0:
            raise ValueError(f"digit_count must be positive, got {self.digit_count}")


SegmentRequest = Union[WordRequest, DigitRequest]


def _check_length(value: Optional[int], name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int or None, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


# =============================================================================
# Builder
# =============================================================================

class CodeBuilder:
    """
    Builder for fluent codes.

    Parameters
    ----------
    pool : WordPool, optional
        Source of words and digits. Defaults to the shared bundled pool.
    joiner : str, optional
        Separator between segments (default ``builder.joiner``, ``"-"``)
    min_length, max_length : int, optional
        Inclusive bounds on the whole code, joiners included. ``None``
        leaves that side open.
    max_attempts : int, optional
        Whole-candidate draws before giving up on the bounds
        (default ``builder.max_attempts``)

    Examples
    --------
        >>> CodeBuilder().adjective().verb().noun().adjective().to_string()
        'fluffy-vacuum-misuse-deadly'

        >>> CodeBuilder().with_joiner("_").noun().n_digits(4).to_string()
        'harbor_0917'
    """

    def __init__(self,
                 pool: Optional[WordPool] = None,
                 joiner: Optional[str] = None,
                 min_length: Optional[int] = None,
                 max_length: Optional[int] = None,
                 max_attempts: Optional[int] = None):
        self._pool = pool
        self._segments: List[SegmentRequest] = []
        self.joiner = get_setting('builder.joiner', '-') if joiner is None else joiner
        if min_length is None:
            min_length = get_setting('builder.min_length')
        if max_length is None:
            max_length = get_setting('builder.max_length')
        self.min_length = _check_length(min_length, 'min_length')
        self.max_length = _check_length(max_length, 'max_length')
        self.word_min_length: Optional[int] = None
        self.word_max_length: Optional[int] = None

        if max_attempts is None:
            max_attempts = int(require_setting('builder.max_attempts'))
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        parts = []
        for request in self._segments:
            if isinstance(request, WordRequest):
                parts.append(request.category.tag)
            else:
                parts.append(f"{request.digit_count}d")
        return (f"CodeBuilder(segments=[{', '.join(parts)}], joiner={self.joiner!r}, "
                f"min_length={self.min_length}, max_length={self.max_length})")

    @property
    def pool(self) -> WordPool:
        return self._pool if self._pool is not None else get_pool()

    @property
    def segments(self) -> Tuple[SegmentRequest, ...]:
        """Requested segments in render order."""
        return tuple(self._segments)

    def copy(self) -> "CodeBuilder":
        """Independent builder with the same configuration and pool."""
        clone = copy.copy(self)
        clone._segments = list(self._segments)
        return clone

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def with_min_length(self, length: Optional[int]) -> "CodeBuilder":
        """Minimum code length. Checked against the maximum only at render."""
        self.min_length = _check_length(length, 'min_length')
        return self

    def with_max_length(self, length: Optional[int]) -> "CodeBuilder":
        """Maximum code length. Checked against the minimum only at render."""
        self.max_length = _check_length(length, 'max_length')
        return self

    def with_joiner(self, joiner: str) -> "CodeBuilder":
        if not isinstance(joiner, str):
            raise TypeError(f"joiner must be a str, got {joiner!r}")
        self.joiner = joiner
        return self

    def with_word_length(self,
                         min_length: Optional[int] = None,
                         max_length: Optional[int] = None) -> "CodeBuilder":
        """Only draw words whose own length lies within these bounds."""
        self.word_min_length = _check_length(min_length, 'min_length')
        self.word_max_length = _check_length(max_length, 'max_length')
        return self

    def word(self, category) -> "CodeBuilder":
        """Append a word of any category (member, UD tag or name)."""
        self._segments.append(WordRequest(category))
        return self

    def n_digits(self, count: int) -> "CodeBuilder":
        """Append a group of ``count`` digits."""
        self._segments.append(DigitRequest(count))
        return self

    def six_digits(self) -> "CodeBuilder":
        return self.n_digits(6)

    def adjective(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.ADJECTIVE)

    def adposition(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.ADPOSITION)

    def adverb(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.ADVERB)

    def auxiliary(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.AUXILIARY)

    def coordinating_conjunction(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.COORDINATING_CONJUNCTION)

    def determiner(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.DETERMINER)

    def interjection(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.INTERJECTION)

    def noun(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.NOUN)

    def numeral(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.NUMERAL)

    def particle(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.PARTICLE)

    def pronoun(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.PRONOUN)

    def proper_noun(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.PROPER_NOUN)

    def punctuation(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.PUNCTUATION)

    def subordinating_conjunction(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.SUBORDINATING_CONJUNCTION)

    def symbol(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.SYMBOL)

    def verb(self) -> "CodeBuilder":
        return self.word(GrammaticalCategory.VERB)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _validate(self):
        if not self._segments:
            raise EmptySegments()
        if (self.min_length is not None and self.max_length is not None
                and self.min_length > self.max_length):
            raise InvalidBounds(self.min_length, self.max_length)

    def _fits(self, length: int) -> bool:
        if self.min_length is not None and length < self.min_length:
            return False
        if self.max_length is not None and length > self.max_length:
            return False
        return True

    def _distance(self, length: int) -> int:
        """How far a length falls outside the bounds (0 when it fits)."""
        if self.min_length is not None and length < self.min_length:
            return self.min_length - length
        if self.max_length is not None and length > self.max_length:
            return length - self.max_length
        return 0

    def _resolve(self, pool: WordPool, request: SegmentRequest) -> str:
        if isinstance(request, DigitRequest):
            return pool.random_digits(request.digit_count)
        return pool.random_word(
            request.category,
            min_length=self.word_min_length,
            max_length=self.word_max_length,
        )

    def render_tokens(self) -> List[str]:
        """
        Draw one token per segment, in order, satisfying the length bounds.

        Returns
        -------
        list[str]
            Tokens whose joined form fits ``[min_length, max_length]``

        Raises
        ------
        EmptySegments
            No segments configured
        InvalidBounds
            ``min_length > max_length``
        LengthUnsatisfiable
            No candidate fit within ``max_attempts`` draws
        EmptyCorpus
            A requested category has no words (not retried)
        """
        self._validate()
        pool = self.pool
        joiner_total = len(self.joiner) * (len(self._segments) - 1)

        best_length = None
        length = 0
        for attempt in range(1, self.max_attempts + 1):
            tokens = [self._resolve(pool, request) for request in self._segments]
            length = sum(len(t) for t in tokens) + joiner_total
            if self._fits(length):
                if attempt > 1:
                    logger.debug(f"Code fit length bounds on attempt {attempt}/{self.max_attempts}")
                return tokens
            if best_length is None or self._distance(length) < self._distance(best_length):
                best_length = length
            logger.debug(
                f"Attempt {attempt}/{self.max_attempts}: length {length} outside "
                f"[{self.min_length}, {self.max_length}]"
            )

        logger.warning(
            f"Gave up after {self.max_attempts} attempts: no code of length "
            f"[{self.min_length}, {self.max_length}] for {self!r}"
        )
        raise LengthUnsatisfiable(
            self.min_length,
            self.max_length,
            attempts=self.max_attempts,
            last_length=length,
            best_length=best_length,
        )

    def to_string(self) -> str:
        """Render a fresh code. See ``render_tokens`` for errors."""
        return self.joiner.join(self.render_tokens())

    render = to_string


# Alias for convenience
FluentCodes = CodeBuilder


__all__ = [
    'CodeBuilder',
    'FluentCodes',
    'WordRequest',
    'DigitRequest',
    'SegmentRequest',
]
