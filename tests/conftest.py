import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ulpan_app import create_app
from ulpan_app.config import BASE_DIR, Config
from ulpan_app.modules.content import (
    VERB_FORM_LABELS,
    ArabicLetter,
    ArabicWord,
    DataPools,
    HardEnglishWord,
    Phrase,
    PrepositionCategory,
    PrepositionPair,
    PrepositionSentence,
    VerbConjugation,
    VerbForm,
    VocabItem,
)


class TestConfig(Config):
    TESTING = True
    CONTENT_DIR = os.path.join(BASE_DIR, 'content')
    LOG_DIR = None
    LOG_LEVEL = 'WARNING'
    CANCEL_STALE_TIMERS = False


class ManualClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_verb(infinitive='לכתוב', example_slot='past_third_masculine'):
    forms = {}
    for index, (slot, label) in enumerate(VERB_FORM_LABELS):
        example = 'הוא ______ שיר.' if slot == example_slot else None
        forms[slot] = VerbForm(
            target_text=f'כתב{index}' if slot != example_slot else 'כתב',
            source_text=label,
            pronunciation=f'katav{index}',
            example_sentence=example,
        )
    return VerbConjugation(infinitive=infinitive, infinitive_english='to write', forms=forms)


def build_pools(**overrides):
    words = tuple(
        VocabItem(source_text=english, target_text=hebrew)
        for hebrew, english in [
            ('בית', 'house'), ('ספר', 'book'), ('מים', 'water'), ('לחם', 'bread'),
            ('כלב', 'dog'), ('חתול', 'cat'), ('ילד', 'boy'), ('ילדה', 'girl'),
            ('עיר', 'city'), ('טוב', 'good'), ('שולחן', 'table'), ('תודה', 'thanks'),
        ]
    )
    place = PrepositionCategory(
        name='מקום',
        english_name='Place',
        prepositions=(
            PrepositionPair('ב', 'in'),
            PrepositionPair('על', 'on'),
            PrepositionPair('ליד', 'next to'),
            PrepositionPair('בין', 'between'),
            PrepositionPair('מתחת ל', 'under'),
        ),
    )
    pools = dict(
        words=words,
        phrases=(
            Phrase('Good morning', 'בוקר טוב'),
            Phrase('How are you?', 'מה שלומך'),
        ),
        preposition_categories=(place,),
        preposition_sentences=(
            PrepositionSentence('The book is on the table.', 'הספר ___ השולחן.', 'על', 'מקום'),
        ),
        verbs=(make_verb(),),
        arabic_letters=(
            ArabicLetter('alif', 'a', {'isolated': 'ا'}),
            ArabicLetter('ba', 'b', {'isolated': 'ب', 'start': 'بـ'}),
            ArabicLetter('ta', 't', {'isolated': 'ت', 'start': 'تـ'}),
        ),
        arabic_words=(
            ArabicWord('بيت', 'bayt', 'house'),
            ArabicWord('كتاب', 'kitaab', 'book'),
        ),
        hard_english_words=(
            HardEnglishWord('ephemeral', 'Lasting for a very short time.'),
            HardEnglishWord('laconic', 'Using very few words.'),
            HardEnglishWord('obsequious', 'Excessively eager to please.'),
        ),
    )
    pools.update(overrides)
    return DataPools(**pools)


@pytest.fixture
def pools():
    return build_pools()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def app(clock):
    app = create_app(TestConfig)
    app.extensions['ulpan_sessions'].clock = clock
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
