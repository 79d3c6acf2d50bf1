"""
Tests for the Word Pool
=======================
Tests for corpus loading, category parsing, word and digit draws, and the
per-thread random source.
"""

import pytest
import sys
import threading
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fluentcodes import (
    CodeRandom,
    EmptyCorpus,
    GrammaticalCategory,
    UnknownCategory,
    WordPool,
    get_pool,
    get_rng,
    load_corpus,
)
from fluentcodes.settings import get_setting, require_setting


class TestGrammaticalCategory:
    """Tests for category parsing."""

    def test_sixteen_categories(self):
        assert len(GrammaticalCategory) == 16

    @pytest.mark.parametrize("value,expected", [
        ("adj", GrammaticalCategory.ADJECTIVE),
        ("ADJ", GrammaticalCategory.ADJECTIVE),
        ("adjective", GrammaticalCategory.ADJECTIVE),
        ("proper_noun", GrammaticalCategory.PROPER_NOUN),
        ("Proper-Noun", GrammaticalCategory.PROPER_NOUN),
        ("cconj", GrammaticalCategory.COORDINATING_CONJUNCTION),
        (GrammaticalCategory.VERB, GrammaticalCategory.VERB),
    ])
    def test_parse(self, value, expected):
        assert GrammaticalCategory.parse(value) is expected

    @pytest.mark.parametrize("value", ["gerund", "", 3, None])
    def test_parse_unknown(self, value):
        with pytest.raises(UnknownCategory):
            GrammaticalCategory.parse(value)

    def test_unknown_is_empty_corpus(self):
        """Callers catching EmptyCorpus also catch UnknownCategory."""
        assert issubclass(UnknownCategory, EmptyCorpus)
        assert issubclass(UnknownCategory, ValueError)


class TestBundledCorpus:
    """Tests for the bundled word lists."""

    def test_every_category_has_words(self):
        corpus = load_corpus()
        for category in GrammaticalCategory:
            assert corpus[category], f"{category.tag} has no words"

    def test_words_are_normalized(self):
        for words in load_corpus().values():
            assert len(words) == len(set(words))
            for word in words:
                assert word == word.strip().lower()

    def test_yaml_keywords_stay_strings(self):
        """Words like 'on' and 'no' are not read as booleans."""
        corpus = load_corpus()
        assert "on" in corpus[GrammaticalCategory.PARTICLE]
        assert "no" in corpus[GrammaticalCategory.DETERMINER]

    def test_corpus_read_only(self):
        with pytest.raises(TypeError):
            load_corpus()[GrammaticalCategory.NOUN] = ()

    def test_shared_pool(self):
        assert get_pool() is get_pool()
        assert set(get_pool().categories()) == set(GrammaticalCategory)


class TestWordPool:
    """Tests for WordPool draws."""

    @pytest.fixture
    def pool(self):
        return WordPool(
            corpus={"noun": ["Ox", "harbor", "harbor", " lantern "], "verb": []},
            rng=CodeRandom(seed=3),
        )

    def test_injected_corpus_normalized(self, pool):
        assert pool.size("noun") == 3
        assert pool.stats() == {"noun": 3, "verb": 0}

    def test_random_word_from_category(self, pool):
        for _ in range(20):
            assert pool.random_word(GrammaticalCategory.NOUN) in ("ox", "harbor", "lantern")

    def test_random_word_covers_corpus(self, pool):
        seen = {pool.random_word("noun") for _ in range(200)}
        assert seen == {"ox", "harbor", "lantern"}

    def test_empty_category(self, pool):
        with pytest.raises(EmptyCorpus) as exc:
            pool.random_word("verb")
        assert exc.value.category is GrammaticalCategory.VERB

    def test_absent_category(self, pool):
        with pytest.raises(UnknownCategory):
            pool.random_word("adj")

    def test_length_filter(self, pool):
        for _ in range(20):
            assert pool.random_word("noun", min_length=6, max_length=6) == "harbor"

    def test_length_filter_no_match(self, pool):
        with pytest.raises(EmptyCorpus):
            pool.random_word("noun", min_length=8)

    def test_categories_skips_empty(self, pool):
        assert pool.categories() == [GrammaticalCategory.NOUN]

    @pytest.mark.parametrize("count", [1, 6, 32])
    def test_random_digits(self, pool, count):
        digits = pool.random_digits(count)
        assert len(digits) == count
        assert digits.isdigit()

    def test_digits_keep_leading_zeros(self, pool):
        """Leading zeros are part of the fixed width."""
        draws = [pool.random_digits(3) for _ in range(500)]
        assert any(d.startswith("0") for d in draws)
        assert all(len(d) == 3 for d in draws)

    def test_invalid_digit_count(self, pool):
        with pytest.raises(ValueError):
            pool.random_digits(0)


class TestRandomSource:
    """Tests for the random source."""

    def test_seed_reproducibility(self):
        rng1 = CodeRandom(seed=99)
        rng2 = CodeRandom(seed=99)
        assert [rng1.digits(6) for _ in range(5)] == [rng2.digits(6) for _ in range(5)]

    def test_seeded_pools_agree(self):
        corpus = {"noun": ["ox", "harbor", "lantern", "comet"]}
        pool1 = WordPool(corpus=corpus, rng=CodeRandom(seed=5))
        pool2 = WordPool(corpus=corpus, rng=CodeRandom(seed=5))
        assert ([pool1.random_word("noun") for _ in range(10)]
                == [pool2.random_word("noun") for _ in range(10)])

    def test_choice_empty(self):
        with pytest.raises(IndexError):
            CodeRandom().choice([])

    def test_rng_per_thread(self):
        """Each thread gets its own random source."""
        main_rng = get_rng()
        assert get_rng() is main_rng
        seen = []
        thread = threading.Thread(target=lambda: seen.append(get_rng()))
        thread.start()
        thread.join()
        assert seen and seen[0] is not main_rng


class TestSettings:
    """Tests for the bundled app.yaml."""

    def test_builder_defaults(self):
        assert get_setting("builder.joiner") == "-"
        assert get_setting("builder.max_attempts") > 0

    def test_missing_setting_default(self):
        assert get_setting("builder.nope", "x") == "x"

    def test_require_missing_setting(self):
        with pytest.raises(ValueError):
            require_setting("builder.nope")
