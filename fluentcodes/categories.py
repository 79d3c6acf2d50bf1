#!/usr/bin/env python3
"""
Grammatical Categories
======================
Part-of-speech tags used to key the word corpora.

Tags follow the Universal Dependencies POS set:
https://universaldependencies.org/u/pos/
"""

from enum import Enum

from .errors import UnknownCategory


class GrammaticalCategory(Enum):
    """Part-of-speech class of a corpus word. Value is the UD tag."""
    ADJECTIVE = "adj"
    ADPOSITION = "adp"
    ADVERB = "adv"
    AUXILIARY = "aux"
    COORDINATING_CONJUNCTION = "cconj"
    DETERMINER = "det"
    INTERJECTION = "intj"
    NOUN = "noun"
    NUMERAL = "num"
    PARTICLE = "part"
    PRONOUN = "pron"
    PROPER_NOUN = "propn"
    PUNCTUATION = "punct"
    SUBORDINATING_CONJUNCTION = "sconj"
    SYMBOL = "sym"
    VERB = "verb"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "GrammaticalCategory":
        """
        Resolve a category from a member, a UD tag or a member name.

        Parameters
        ----------
        value : GrammaticalCategory or str
            e.g. ``GrammaticalCategory.NOUN``, ``"noun"``, ``"propn"``,
            ``"proper_noun"`` or ``"Proper-Noun"``

        Raises
        ------
        UnknownCategory
            If the value names no category
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value:
                    return member
            key = key.replace('-', '_').replace(' ', '_').upper()
            if key in cls.__members__:
                return cls.__members__[key]
        raise UnknownCategory(value)


__all__ = ['GrammaticalCategory']
