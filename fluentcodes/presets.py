#!/usr/bin/env python3
"""
Presets
=======
Named segment layouts for common code shapes.

Usage:
    from fluentcodes.presets import generate_code, list_presets

    generate_code()                               # 'fluffy-vacuum-misuse-deadly'
    generate_code("three_words_and_six_digits")   # 'calmer-taints-fourty-887709'
"""

from typing import Optional

from .builder import CodeBuilder
from .words import WordPool


# =============================================================================
# Preset Catalogue
# =============================================================================
# Each segment is a UD category tag or an int (digit group of that width).

PRESETS = {
    "four_words": {
        "segments": ["adj", "verb", "noun", "adj"],
        "description": "Adjective, verb, noun, adjective",
    },
    "three_words_and_six_digits": {
        "segments": ["adj", "verb", "noun", 6],
        "description": "Adjective, verb, noun and a six digit group",
    },
    "two_words": {
        "segments": ["adj", "noun"],
        "description": "Adjective and noun, container-name style",
    },
    "three_words": {
        "segments": ["adj", "noun", "verb"],
        "description": "Adjective, noun, verb",
    },
    "word_and_six_digits": {
        "segments": ["noun", 6],
        "description": "Noun and a six digit group",
    },
}

DEFAULT_PRESET = "four_words"


def preset_builder(name: str, pool: Optional[WordPool] = None) -> CodeBuilder:
    """
    Fresh builder loaded with a preset's segments.

    Raises
    ------
    ValueError
        If the preset name is not found
    """
    preset = PRESETS.get(name)
    if preset is None:
        available = ', '.join(sorted(PRESETS.keys()))
        raise ValueError(f"Unknown preset '{name}'. Available presets: {available}")

    builder = CodeBuilder(pool=pool)
    for segment in preset["segments"]:
        if isinstance(segment, int):
            builder.n_digits(segment)
        else:
            builder.word(segment)
    return builder


def generate_code(preset: str = DEFAULT_PRESET,
                  joiner: str = None,
                  min_length: int = None,
                  max_length: int = None,
                  pool: WordPool = None) -> str:
    """Render one code from a named preset."""
    builder = preset_builder(preset, pool=pool)
    if joiner is not None:
        builder.with_joiner(joiner)
    if min_length is not None:
        builder.with_min_length(min_length)
    if max_length is not None:
        builder.with_max_length(max_length)
    return builder.to_string()


def generate_code_with_four_words(**options) -> str:
    """e.g. ``fluffy-vacuum-misuse-deadly``"""
    return generate_code("four_words", **options)


def generate_code_with_three_words_and_six_digits(**options) -> str:
    """e.g. ``calmer-taints-fourty-887709``"""
    return generate_code("three_words_and_six_digits", **options)


def list_presets() -> dict:
    """List all presets with their segments and descriptions."""
    return {
        name: {
            "segments": list(p["segments"]),
            "description": p["description"],
        }
        for name, p in PRESETS.items()
    }


__all__ = [
    "PRESETS",
    "DEFAULT_PRESET",
    "preset_builder",
    "generate_code",
    "generate_code_with_four_words",
    "generate_code_with_three_words_and_six_digits",
    "list_presets",
]
