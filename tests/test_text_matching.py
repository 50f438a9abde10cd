"""
Unit tests for the typed-answer comparison helpers.
Run: python -m pytest tests/test_text_matching.py -v
"""

import pytest

from ulpan_app.modules.exercises.engine.text_matching import (
    is_fuzzy_match,
    normalize,
    skeleton,
    split_alternatives,
    strip_spaces,
)


class TestNormalize:

    def test_lowercases_and_drops_spaces_and_punctuation(self):
        assert normalize('  Hello, World! ') == 'helloworld'

    def test_strips_niqqud(self):
        # shin + shin dot + qamats, lamed, vav + holam, final mem
        pointed = "\u05e9\u05c1\u05b8\u05dc\u05d5\u05b9\u05dd"
        assert normalize(pointed) == 'שלום'

    def test_hebrew_punctuation_removed(self):
        assert normalize('בית\u05beספר.') == 'ביתספר'

    def test_none_and_empty(self):
        assert normalize('') == ''
        assert normalize(None) == ''

    def test_only_punctuation_normalizes_to_empty(self):
        assert normalize('?! ...') == ''


class TestFuzzyMatch:

    def test_skeleton_collapses_every_confusable_pair(self):
        assert skeleton('חכטסאו') == 'הקתשעב'

    def test_tet_and_tav_match(self):
        assert is_fuzzy_match('ביט', 'בית')

    def test_het_and_he_match(self):
        assert is_fuzzy_match('להם', 'לחם')

    def test_unrelated_letters_do_not_match(self):
        assert not is_fuzzy_match('בית', 'בות')

    def test_length_must_agree(self):
        assert not is_fuzzy_match('בי', 'בית')


class TestAlternatives:

    def test_split_trims_and_drops_empty(self):
        assert split_alternatives('שלום; היי ;') == ['שלום', 'היי']

    def test_single_alternative(self):
        assert split_alternatives('בית') == ['בית']

    def test_empty_text(self):
        assert split_alternatives('') == []

    def test_strip_spaces(self):
        assert strip_spaces('אני  לא יודע') == 'אנילאיודע'


SAMPLES = [
    '',
    'Hello, World!',
    '  thank YOU! ',
    "שָׁלוֹם",
    'בית־ספר.',
    'אני לא יודע;אני לא יודעת',
    'מה שלומך?',
    'חכטסאו',
    'הקתשעב',
    '?! ...',
    "בְּרֵאשִׁית, בָּרָא!",
]


class TestIdempotence:

    @pytest.mark.parametrize('text', SAMPLES)
    def test_normalize_is_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    @pytest.mark.parametrize('text', SAMPLES)
    def test_skeleton_is_idempotent(self, text):
        once = skeleton(text)
        assert skeleton(once) == once

    @pytest.mark.parametrize('text', SAMPLES)
    def test_skeleton_of_normalized_is_stable(self, text):
        once = skeleton(normalize(text))
        assert skeleton(normalize(once)) == once
