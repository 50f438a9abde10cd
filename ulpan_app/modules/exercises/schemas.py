# File: ulpan_app/modules/exercises/schemas.py
"""
Exercise DTOs
=============
An exercise is one value of a closed set of variants. Each variant carries
its question payload (and, for choice variants, the option list) and knows
how to serialise itself for the presentation layer. Answers are never part
of the serialised form.

Answer payloads form a matching sum type: ``SelectedOption`` for choice
variants, ``OrderedTokens`` for phrase ordering and ``TypedText`` for the
typing variants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from ..content.models import (
    ArabicLetter,
    ArabicWord,
    HardEnglishWord,
    Phrase,
    PrepositionSentence,
    VerbConjugation,
    VerbForm,
    VocabItem,
)


class ExerciseKind(str, Enum):
    ENGLISH_TO_TARGET = 'english_to_target'
    TARGET_TO_ENGLISH = 'target_to_english'
    PHRASE_ORDER = 'phrase_order'
    TYPING_PRACTICE = 'typing_practice'
    PHRASE_TYPING = 'phrase_typing'
    PREPOSITION_CHOICE = 'preposition_choice'
    VERB_CONJUGATION = 'verb_conjugation'
    LETTER_TO_SOUND = 'letter_to_sound'
    ARABIC_WORD_TO_ENGLISH = 'arabic_word_to_english'
    DEFINITION_TO_WORD = 'definition_to_word'


# Kinds answered by typing; these carry the attempt limit.
TYPED_KINDS = frozenset({
    ExerciseKind.TYPING_PRACTICE,
    ExerciseKind.PHRASE_TYPING,
    ExerciseKind.VERB_CONJUGATION,
})


# ── exercise variants ────────────────────────────────────────────────


def word_hint(word: VocabItem) -> Optional[Dict[str, Any]]:
    """Root letters and construction note, only when the word has both."""
    if not word.root or not word.construction:
        return None
    return {'root': list(word.root), 'construction': word.construction}


@dataclass(frozen=True)
class Exercise(ABC):
    kind: ClassVar[ExerciseKind]

    @property
    def options(self) -> Tuple[Any, ...]:
        return ()

    def answer_details(self) -> Optional[Dict[str, Any]]:
        """Extra answer fields shown alongside a revealed answer."""
        return None

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class ChoiceExercise(Exercise):
    """Pick the option whose identity matches the question item."""

    question: Any
    choices: Tuple[Any, ...] = ()

    @property
    def options(self) -> Tuple[Any, ...]:
        return self.choices

    @abstractmethod
    def prompt_text(self) -> str:
        ...

    @abstractmethod
    def option_dict(self, option: Any) -> Dict[str, Any]:
        ...

    def hint(self) -> Optional[Dict[str, Any]]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'kind': self.kind.value,
            'prompt': self.prompt_text(),
            'options': [
                dict(index=i, **self.option_dict(option))
                for i, option in enumerate(self.choices)
            ],
        }
        hint = self.hint()
        if hint:
            data['hint'] = hint
        return data


@dataclass(frozen=True)
class EnglishToTarget(ChoiceExercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.ENGLISH_TO_TARGET
    question: VocabItem

    def prompt_text(self) -> str:
        return self.question.source_text

    def option_dict(self, option: VocabItem) -> Dict[str, Any]:
        return {'text': option.target_text}

    def hint(self) -> Optional[Dict[str, Any]]:
        return word_hint(self.question)


@dataclass(frozen=True)
class TargetToEnglish(ChoiceExercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.TARGET_TO_ENGLISH
    question: VocabItem

    def prompt_text(self) -> str:
        return self.question.target_text

    def option_dict(self, option: VocabItem) -> Dict[str, Any]:
        return {'text': option.source_text}

    def hint(self) -> Optional[Dict[str, Any]]:
        return word_hint(self.question)


@dataclass(frozen=True)
class LetterToSound(ChoiceExercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.LETTER_TO_SOUND
    question: ArabicLetter

    def prompt_text(self) -> str:
        return self.question.display

    def option_dict(self, option: ArabicLetter) -> Dict[str, Any]:
        return {'text': option.sound}


@dataclass(frozen=True)
class ArabicWordToEnglish(ChoiceExercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.ARABIC_WORD_TO_ENGLISH
    question: ArabicWord

    def prompt_text(self) -> str:
        return self.question.arabic

    def option_dict(self, option: ArabicWord) -> Dict[str, Any]:
        return {'text': option.pronunciation, 'secondary': option.english}


@dataclass(frozen=True)
class DefinitionToWord(ChoiceExercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.DEFINITION_TO_WORD
    question: HardEnglishWord

    def prompt_text(self) -> str:
        return self.question.definition

    def option_dict(self, option: HardEnglishWord) -> Dict[str, Any]:
        return {'text': option.word}


@dataclass(frozen=True)
class PhraseOrder(Exercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.PHRASE_ORDER
    phrase: Phrase
    shuffled_tokens: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'hint': self.phrase.source_text,
            'tokens': list(self.shuffled_tokens),
        }


@dataclass(frozen=True)
class TypingPractice(Exercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.TYPING_PRACTICE
    question: VocabItem
    target_to_source: bool = False

    @property
    def prompt_text(self) -> str:
        return self.question.target_text if self.target_to_source else self.question.source_text

    @property
    def answer_text(self) -> str:
        return self.question.source_text if self.target_to_source else self.question.target_text

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'kind': self.kind.value,
            'prompt': self.prompt_text,
            'direction': 'target_to_source' if self.target_to_source else 'source_to_target',
        }
        hint = word_hint(self.question)
        if hint:
            data['hint'] = hint
        return data


@dataclass(frozen=True)
class PhraseTyping(Exercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.PHRASE_TYPING
    phrase: Phrase

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'prompt': self.phrase.source_text}


@dataclass(frozen=True)
class PrepositionChoice(Exercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.PREPOSITION_CHOICE
    sentence: PrepositionSentence
    choices: Tuple[str, ...] = ()

    @property
    def options(self) -> Tuple[str, ...]:
        return self.choices

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'sentence': self.sentence.target_text_with_blank,
            'translation': self.sentence.source_text,
            'options': [{'index': i, 'text': text} for i, text in enumerate(self.choices)],
        }


@dataclass(frozen=True)
class LabeledForm:
    slot: str
    label: str
    form: VerbForm


@dataclass(frozen=True)
class VerbConjugationPrompt(Exercise):
    kind: ClassVar[ExerciseKind] = ExerciseKind.VERB_CONJUGATION
    verb: VerbConjugation
    from_form: LabeledForm
    to_form: LabeledForm
    prompt: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'infinitive': self.verb.infinitive,
            'infinitive_english': self.verb.infinitive_english,
            'from': {
                'label': self.from_form.label,
                'text': self.from_form.form.target_text,
                'pronunciation': self.from_form.form.pronunciation,
                'english': self.from_form.form.source_text,
            },
            'prompt': self.prompt,
            'to_label': self.to_form.label,
            'to_english': self.to_form.form.source_text,
            'example_sentence': self.to_form.form.example_sentence,
        }

    def answer_details(self) -> Dict[str, Any]:
        form = self.to_form.form
        return {
            'text': form.target_text,
            'pronunciation': form.pronunciation,
            'english': form.source_text,
        }


# ── answer payloads ──────────────────────────────────────────────────


@dataclass(frozen=True)
class SelectedOption:
    """The option object the learner picked (an item, or a preposition string)."""

    option: Any


@dataclass(frozen=True)
class OrderedTokens:
    tokens: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'tokens', tuple(self.tokens))


@dataclass(frozen=True)
class TypedText:
    text: str = ''


Answer = Union[SelectedOption, OrderedTokens, TypedText]


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of ``AnswerEvaluator.evaluate``.

    ``is_close_match`` is only ever true together with ``is_correct``: the
    answer was accepted through the confusable-letter comparison rather than
    exact equality. ``expected`` is the answer text to show the learner.
    """

    is_correct: bool
    is_close_match: bool = False
    expected: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_correct': self.is_correct,
            'is_close_match': self.is_close_match,
            'expected': self.expected,
        }
