"""
Exercise generation engine.
Pure logic, no Flask, no I/O: everything comes from the ``DataPools`` handle.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ...content.models import DataPools
from ..schemas import (
    ArabicWordToEnglish,
    DefinitionToWord,
    EnglishToTarget,
    Exercise,
    ExerciseKind,
    LabeledForm,
    LetterToSound,
    PhraseOrder,
    PhraseTyping,
    PrepositionChoice,
    TargetToEnglish,
    TypingPractice,
    VerbConjugationPrompt,
)
from .selector import select_options

logger = logging.getLogger(__name__)

VERB_PROMPT_TEMPLATE = "Type the form for {label}:"


@dataclass(frozen=True)
class GeneratorOptions:
    """Option counts per choice exercise (correct answer included)."""

    word_choices: int = 10
    letter_choices: int = 10
    arabic_word_choices: int = 10
    definition_choices: int = 10
    preposition_choices: int = 4

    @classmethod
    def from_config(cls, config) -> 'GeneratorOptions':
        return cls(
            word_choices=config.get('WORD_CHOICE_OPTIONS', cls.word_choices),
            letter_choices=config.get('LETTER_CHOICE_OPTIONS', cls.letter_choices),
            arabic_word_choices=config.get('ARABIC_WORD_CHOICE_OPTIONS', cls.arabic_word_choices),
            definition_choices=config.get('DEFINITION_CHOICE_OPTIONS', cls.definition_choices),
            preposition_choices=config.get('PREPOSITION_OPTIONS', cls.preposition_choices),
        )


class ExerciseGenerator:
    """
    Builds one randomized exercise of a requested kind.

    ``generate`` returns ``None`` when the pool the kind needs is empty (or
    otherwise unusable); callers fall back to another kind.
    """

    def __init__(
        self,
        pools: DataPools,
        options: Optional[GeneratorOptions] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.pools = pools
        self.options = options or GeneratorOptions()
        self.rng = rng or random.Random()
        self._builders: Dict[ExerciseKind, Callable[[], Optional[Exercise]]] = {
            ExerciseKind.ENGLISH_TO_TARGET: self.generate_english_to_target,
            ExerciseKind.TARGET_TO_ENGLISH: self.generate_target_to_english,
            ExerciseKind.PHRASE_ORDER: self.generate_phrase_order,
            ExerciseKind.TYPING_PRACTICE: self.generate_typing_practice,
            ExerciseKind.PHRASE_TYPING: self.generate_phrase_typing,
            ExerciseKind.PREPOSITION_CHOICE: self.generate_preposition_choice,
            ExerciseKind.VERB_CONJUGATION: self.generate_verb_conjugation,
            ExerciseKind.LETTER_TO_SOUND: self.generate_letter_to_sound,
            ExerciseKind.ARABIC_WORD_TO_ENGLISH: self.generate_arabic_word_to_english,
            ExerciseKind.DEFINITION_TO_WORD: self.generate_definition_to_word,
        }

    def generate(self, kind: ExerciseKind) -> Optional[Exercise]:
        try:
            builder = self._builders.get(ExerciseKind(kind))
        except ValueError:
            logger.warning("Unknown exercise kind %r.", kind)
            return None
        exercise = builder() if builder else None
        if exercise is None:
            logger.debug("No %s exercise could be generated.", kind)
        return exercise

    # ── choice exercises ─────────────────────────────────────────────

    def _choose(self, pool):
        return self.rng.choice(pool) if pool else None

    def generate_english_to_target(self) -> Optional[EnglishToTarget]:
        word = self._choose(self.pools.words)
        if word is None:
            return None
        choices = select_options(word, self.pools.words, self.options.word_choices, self.rng)
        return EnglishToTarget(question=word, choices=tuple(choices))

    def generate_target_to_english(self) -> Optional[TargetToEnglish]:
        word = self._choose(self.pools.words)
        if word is None:
            return None
        choices = select_options(word, self.pools.words, self.options.word_choices, self.rng)
        return TargetToEnglish(question=word, choices=tuple(choices))

    def generate_letter_to_sound(self) -> Optional[LetterToSound]:
        letter = self._choose(self.pools.arabic_letters)
        if letter is None:
            return None
        choices = select_options(letter, self.pools.arabic_letters, self.options.letter_choices, self.rng)
        return LetterToSound(question=letter, choices=tuple(choices))

    def generate_arabic_word_to_english(self) -> Optional[ArabicWordToEnglish]:
        word = self._choose(self.pools.arabic_words)
        if word is None:
            return None
        choices = select_options(word, self.pools.arabic_words, self.options.arabic_word_choices, self.rng)
        return ArabicWordToEnglish(question=word, choices=tuple(choices))

    def generate_definition_to_word(self) -> Optional[DefinitionToWord]:
        word = self._choose(self.pools.hard_english_words)
        if word is None:
            return None
        choices = select_options(word, self.pools.hard_english_words, self.options.definition_choices, self.rng)
        return DefinitionToWord(question=word, choices=tuple(choices))

    def generate_preposition_choice(self) -> Optional[PrepositionChoice]:
        sentence = self._choose(self.pools.preposition_sentences)
        if sentence is None:
            return None
        category = self.pools.category_named(sentence.category_name)
        if category is None:
            logger.warning("Unknown preposition category %r.", sentence.category_name)
            return None

        category_mates = [p.target_text for p in category.prepositions]
        choices = select_options(
            sentence.correct_preposition,
            category_mates,
            self.options.preposition_choices,
            self.rng,
        )
        return PrepositionChoice(sentence=sentence, choices=tuple(choices))

    # ── ordering / typing exercises ──────────────────────────────────

    def generate_phrase_order(self) -> Optional[PhraseOrder]:
        phrase = self._choose(self.pools.phrases)
        if phrase is None:
            return None
        tokens = [token for token in phrase.target_text.split() if token]
        self.rng.shuffle(tokens)
        return PhraseOrder(phrase=phrase, shuffled_tokens=tuple(tokens))

    def generate_typing_practice(self) -> Optional[TypingPractice]:
        word = self._choose(self.pools.words)
        if word is None:
            return None
        return TypingPractice(question=word, target_to_source=self.rng.random() < 0.5)

    def generate_phrase_typing(self) -> Optional[PhraseTyping]:
        phrase = self._choose(self.pools.phrases)
        if phrase is None:
            return None
        return PhraseTyping(phrase=phrase)

    def generate_verb_conjugation(self) -> Optional[VerbConjugationPrompt]:
        verb = self._choose(self.pools.verbs)
        if verb is None:
            return None

        forms = [LabeledForm(slot, label, form) for slot, label, form in verb.labeled_forms()]
        if len(forms) < 2:
            return None

        from_index = self.rng.randrange(len(forms))
        to_index = self.rng.choice([i for i in range(len(forms)) if i != from_index])
        to_form = forms[to_index]

        return VerbConjugationPrompt(
            verb=verb,
            from_form=forms[from_index],
            to_form=to_form,
            prompt=VERB_PROMPT_TEMPLATE.format(label=to_form.label),
        )
