#!/usr/bin/env python3
"""
fluentcodes - Human-Readable Code Generator
===========================================

Generates memorable identifiers such as ``fluffy-vacuum-misuse-deadly``
from random words picked by part of speech, plus optional digit groups.

Quick Start
-----------
    from fluentcodes import CodeBuilder, generate_code_with_four_words

    generate_code_with_four_words()
    # 'fluffy-vacuum-misuse-deadly'

    (CodeBuilder()
        .with_min_length(3).with_max_length(40)
        .with_joiner("_")
        .adverb().verb().noun().six_digits()
        .to_string())
    # 'gently_paint_lantern_887709'

Modules
-------
    fluentcodes.builder    - CodeBuilder and segment requests
    fluentcodes.presets    - Named code layouts
    fluentcodes.words      - Bundled word corpus and WordPool
    fluentcodes.categories - Grammatical categories (UD POS tags)
    fluentcodes.errors     - Error taxonomy
    fluentcodes.entropy    - Random source

Word categories follow https://universaldependencies.org/u/pos/
"""

__version__ = "0.1.0"
__author__ = "fluentcodes"

from .categories import GrammaticalCategory
from .errors import (
    FluentCodeError,
    EmptySegments,
    InvalidBounds,
    LengthUnsatisfiable,
    EmptyCorpus,
    UnknownCategory,
)
from .entropy import CodeRandom, get_rng, seed
from .words import WordPool, get_pool, load_corpus
from .builder import (
    CodeBuilder,
    FluentCodes,
    WordRequest,
    DigitRequest,
    SegmentRequest,
)
from .presets import (
    PRESETS,
    preset_builder,
    generate_code,
    generate_code_with_four_words,
    generate_code_with_three_words_and_six_digits,
    list_presets,
)

__all__ = [
    '__version__',
    # Builder
    'CodeBuilder',
    'FluentCodes',
    'WordRequest',
    'DigitRequest',
    'SegmentRequest',
    'GrammaticalCategory',
    # Presets
    'PRESETS',
    'preset_builder',
    'generate_code',
    'generate_code_with_four_words',
    'generate_code_with_three_words_and_six_digits',
    'list_presets',
    # Word pool
    'WordPool',
    'get_pool',
    'load_corpus',
    # Randomness
    'CodeRandom',
    'get_rng',
    'seed',
    # Errors
    'FluentCodeError',
    'EmptySegments',
    'InvalidBounds',
    'LengthUnsatisfiable',
    'EmptyCorpus',
    'UnknownCategory',
]
