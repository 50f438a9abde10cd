# File: ulpan_app/modules/content/models.py
"""
Content records
===============
Read-only vocabulary and grammar records the exercise engine samples from.

Every record that can appear as a choice option exposes ``identity``: two
records with the same identity are the same answer as far as scoring goes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class VocabItem:
    """A single word: English prompt and Hebrew target."""

    source_text: str
    target_text: str
    root: Optional[Tuple[str, ...]] = None
    construction: Optional[str] = None

    @property
    def identity(self) -> str:
        return self.target_text


@dataclass(frozen=True)
class Phrase:
    """A phrase; ``target_text`` may list alternatives separated by ``;``."""

    source_text: str
    target_text: str
    construction: Optional[str] = None

    @property
    def identity(self) -> str:
        return self.target_text


@dataclass(frozen=True)
class PrepositionPair:
    target_text: str
    source_text: str


@dataclass(frozen=True)
class PrepositionCategory:
    name: str
    english_name: str
    prepositions: Tuple[PrepositionPair, ...] = ()


@dataclass(frozen=True)
class PrepositionSentence:
    """A sentence with a blank where ``correct_preposition`` belongs."""

    source_text: str
    target_text_with_blank: str
    correct_preposition: str
    category_name: str


@dataclass(frozen=True)
class VerbForm:
    target_text: str
    source_text: str
    pronunciation: str
    example_sentence: Optional[str] = None


# Conjugation slots in presentation order with their person/tense label.
VERB_FORM_LABELS: Tuple[Tuple[str, str], ...] = (
    ('past_first_singular', 'I (past)'),
    ('past_second_masculine', 'you masculine (past)'),
    ('past_second_feminine', 'you feminine (past)'),
    ('past_third_masculine', 'he (past)'),
    ('past_third_feminine', 'she (past)'),
    ('past_first_plural', 'we (past)'),
    ('past_second_plural', 'you plural (past)'),
    ('past_third_plural', 'they (past)'),
    ('present_masculine_singular', 'masculine singular (present)'),
    ('present_feminine_singular', 'feminine singular (present)'),
    ('present_masculine_plural', 'masculine plural (present)'),
    ('present_feminine_plural', 'feminine plural (present)'),
    ('future_first_singular', 'I (future)'),
    ('future_second_masculine', 'you masculine (future)'),
    ('future_second_feminine', 'you feminine (future)'),
    ('future_third_masculine', 'he (future)'),
    ('future_third_feminine', 'she (future)'),
    ('future_first_plural', 'we (future)'),
    ('future_second_plural', 'you plural (future)'),
    ('future_third_plural', 'they (future)'),
)


@dataclass(frozen=True)
class VerbConjugation:
    infinitive: str
    infinitive_english: str
    forms: Mapping[str, VerbForm] = field(default_factory=dict, hash=False)
    root: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, 'forms', MappingProxyType(dict(self.forms)))

    @property
    def identity(self) -> str:
        return self.infinitive

    def labeled_forms(self) -> list:
        """Forms present on this verb as ``(slot, label, form)`` in schema order."""
        return [
            (slot, label, self.forms[slot])
            for slot, label in VERB_FORM_LABELS
            if slot in self.forms
        ]


@dataclass(frozen=True)
class ArabicLetter:
    name: str
    sound: str
    forms: Mapping[str, str] = field(default_factory=dict, hash=False)  # isolated/start/middle/end

    def __post_init__(self):
        object.__setattr__(self, 'forms', MappingProxyType(dict(self.forms)))

    @property
    def identity(self) -> str:
        return self.name

    @property
    def display(self) -> str:
        return self.forms.get('start') or self.forms.get('isolated') or self.name


@dataclass(frozen=True)
class ArabicWord:
    arabic: str
    pronunciation: str
    english: str

    @property
    def identity(self) -> str:
        return self.arabic


@dataclass(frozen=True)
class HardEnglishWord:
    word: str
    definition: str

    @property
    def identity(self) -> str:
        return self.word


@dataclass(frozen=True)
class DataPools:
    """Read-only bundle of every content pool, passed explicitly to the engine."""

    words: Tuple[VocabItem, ...] = ()
    phrases: Tuple[Phrase, ...] = ()
    preposition_categories: Tuple[PrepositionCategory, ...] = ()
    preposition_sentences: Tuple[PrepositionSentence, ...] = ()
    verbs: Tuple[VerbConjugation, ...] = ()
    arabic_letters: Tuple[ArabicLetter, ...] = ()
    arabic_words: Tuple[ArabicWord, ...] = ()
    hard_english_words: Tuple[HardEnglishWord, ...] = ()

    def category_named(self, name: str) -> Optional[PrepositionCategory]:
        for category in self.preposition_categories:
            if category.name == name:
                return category
        return None

    def counts(self) -> Dict[str, int]:
        return {
            'words': len(self.words),
            'phrases': len(self.phrases),
            'preposition_categories': len(self.preposition_categories),
            'preposition_sentences': len(self.preposition_sentences),
            'verbs': len(self.verbs),
            'arabic_letters': len(self.arabic_letters),
            'arabic_words': len(self.arabic_words),
            'hard_english_words': len(self.hard_english_words),
        }
