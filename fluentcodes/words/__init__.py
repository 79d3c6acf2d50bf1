#!/usr/bin/env python3
"""
Word Corpus & Pool
==================
Loads the bundled per-category word lists and draws random words and
digit groups from them.

Each category lives in its own YAML file named after the category
(``noun.yaml``, ``adjective.yaml``, ...) with a single ``words`` list.

Usage:
    from fluentcodes.words import get_pool
    from fluentcodes.categories import GrammaticalCategory

    pool = get_pool()
    pool.random_word(GrammaticalCategory.NOUN)   # 'lantern'
    pool.random_digits(6)                        # '048213'
"""

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from ..categories import GrammaticalCategory
from ..entropy import CodeRandom, get_rng
from ..errors import EmptyCorpus, UnknownCategory
from ..settings import get_setting, resolve_path


# =============================================================================
# Corpus Loading
# =============================================================================


def words_dir() -> Path:
    """Directory holding the word lists (``words.directory`` in app.yaml)."""
    return resolve_path(get_setting('words.directory', 'words'))


def _normalize(words: Iterable) -> Tuple[str, ...]:
    """Lowercase, strip and de-duplicate, keeping first-seen order."""
    seen = set()
    result = []
    for word in words:
        if word is None:
            continue
        word = str(word).strip().lower()
        if word and word not in seen:
            seen.add(word)
            result.append(word)
    return tuple(result)


@lru_cache(maxsize=None)
def load_words(category: GrammaticalCategory) -> Tuple[str, ...]:
    """Load one category's word list. Missing file means an empty list."""
    filepath = words_dir() / f'{category.name.lower()}.yaml'
    if not filepath.exists():
        return ()
    with open(filepath, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{filepath.name} must be a mapping with a 'words' list")
    return _normalize(data.get('words') or [])


@lru_cache(maxsize=1)
def load_corpus() -> Mapping[GrammaticalCategory, Tuple[str, ...]]:
    """Load every category's word list into a read-only mapping."""
    return MappingProxyType({
        category: load_words(category) for category in GrammaticalCategory
    })


# =============================================================================
# Word Pool
# =============================================================================

class WordPool:
    """
    Supplies random words by category and random digit strings.

    Draws are independent: nothing is remembered between calls, so the
    same word can come back twice in one code.

    Parameters
    ----------
    corpus : mapping, optional
        Category (member, tag or name) to word sequence. Defaults to the
        bundled corpus.
    rng : CodeRandom, optional
        Random source. Defaults to the calling thread's shared source.
    """

    def __init__(self,
                 corpus: Optional[Mapping] = None,
                 rng: Optional[CodeRandom] = None):
        if corpus is None:
            self._corpus = load_corpus()
        else:
            self._corpus = MappingProxyType({
                GrammaticalCategory.parse(key): _normalize(words)
                for key, words in corpus.items()
            })
        self._rng = rng

    @property
    def rng(self) -> CodeRandom:
        return self._rng if self._rng is not None else get_rng()

    def _words(self, category) -> Tuple[str, ...]:
        category = GrammaticalCategory.parse(category)
        if category not in self._corpus:
            raise UnknownCategory(category.name.lower())
        return self._corpus[category]

    def random_word(self,
                    category,
                    min_length: Optional[int] = None,
                    max_length: Optional[int] = None) -> str:
        """
        Draw one word of the given category, uniformly at random.

        Parameters
        ----------
        category : GrammaticalCategory or str
            Part of speech to draw from
        min_length, max_length : int, optional
            Only consider words whose length lies within these bounds

        Raises
        ------
        EmptyCorpus
            If the category (after length filtering) has no words
        UnknownCategory
            If the category is not part of this pool's corpus
        """
        category = GrammaticalCategory.parse(category)
        words = self._words(category)
        if not words:
            raise EmptyCorpus(category)
        if min_length is not None or max_length is not None:
            low = 0 if min_length is None else min_length
            words = [w for w in words
                     if len(w) >= low and (max_length is None or len(w) <= max_length)]
            if not words:
                high = '' if max_length is None else max_length
                raise EmptyCorpus(category, f"no words of length {low}..{high}")
        return self.rng.choice(words)

    def random_digits(self, count: int) -> str:
        """Draw ``count`` digits, each uniform over 0-9 (leading zeros kept)."""
        return self.rng.digits(count)

    def categories(self) -> List[GrammaticalCategory]:
        """Categories with at least one word."""
        return [c for c, words in self._corpus.items() if words]

    def size(self, category) -> int:
        """Number of words available for a category."""
        return len(self._words(category))

    def stats(self) -> Dict[str, int]:
        """Word count per category tag."""
        return {c.tag: len(words) for c, words in self._corpus.items()}


# Singleton pool
_pool = None


def get_pool() -> WordPool:
    """Get the shared pool over the bundled corpus."""
    global _pool
    if _pool is None:
        _pool = WordPool()
    return _pool


__all__ = [
    'WordPool',
    'get_pool',
    'load_corpus',
    'load_words',
    'words_dir',
]
