"""
Answer evaluation engine.
Pure logic, no Flask, no I/O.

``AnswerEvaluator.evaluate`` matches on the exercise variant and the answer
payload together. A payload of the wrong shape for the exercise is simply
an incorrect answer.
"""

from __future__ import annotations

from typing import Iterable

from ..schemas import (
    Answer,
    ChoiceExercise,
    EvaluationResult,
    Exercise,
    OrderedTokens,
    PhraseOrder,
    PhraseTyping,
    PrepositionChoice,
    SelectedOption,
    TypedText,
    TypingPractice,
    VerbConjugationPrompt,
)
from .selector import item_identity
from .text_matching import (
    is_fuzzy_match,
    normalize,
    split_alternatives,
    strip_spaces,
)

BLANK_PLACEHOLDER = '______'

INCORRECT = EvaluationResult(is_correct=False)


def verb_target_text(exercise: VerbConjugationPrompt) -> str:
    """The example sentence with the blank filled, or the bare form."""
    form = exercise.to_form.form
    if form.example_sentence:
        return form.example_sentence.replace(BLANK_PLACEHOLDER, form.target_text)
    return form.target_text


def match_typed(typed: str, alternatives: Iterable[str], allow_fuzzy: bool, expected: str) -> EvaluationResult:
    """
    Compare typed text with each acceptable alternative.

    Exact (normalized) equality wins; otherwise, when ``allow_fuzzy`` is set,
    the first alternative with the same confusable-letter skeleton is
    accepted as a close match.
    """
    normalized_input = normalize(typed)
    for alternative in alternatives:
        normalized_target = normalize(alternative)
        if not normalized_target:
            continue
        if normalized_input == normalized_target:
            return EvaluationResult(is_correct=True, expected=expected)
        if allow_fuzzy and is_fuzzy_match(normalized_input, normalized_target):
            return EvaluationResult(is_correct=True, is_close_match=True, expected=expected)
    return EvaluationResult(is_correct=False, expected=expected)


class AnswerEvaluator:
    @staticmethod
    def expected_answer(exercise: Exercise) -> str:
        """Display text of the correct answer, shown on reveal or close match."""
        if isinstance(exercise, ChoiceExercise):
            option = exercise.option_dict(exercise.question)
            return option['text']
        if isinstance(exercise, PrepositionChoice):
            return exercise.sentence.correct_preposition
        if isinstance(exercise, PhraseOrder):
            return exercise.phrase.target_text
        if isinstance(exercise, TypingPractice):
            return exercise.answer_text
        if isinstance(exercise, PhraseTyping):
            return exercise.phrase.target_text
        if isinstance(exercise, VerbConjugationPrompt):
            return verb_target_text(exercise)
        return ''

    @staticmethod
    def evaluate(exercise: Exercise, answer: Answer) -> EvaluationResult:
        if isinstance(exercise, ChoiceExercise):
            if not isinstance(answer, SelectedOption):
                return INCORRECT
            is_correct = item_identity(answer.option) == item_identity(exercise.question)
            return EvaluationResult(is_correct=is_correct)

        if isinstance(exercise, PrepositionChoice):
            if not isinstance(answer, SelectedOption):
                return INCORRECT
            return EvaluationResult(is_correct=answer.option == exercise.sentence.correct_preposition)

        if isinstance(exercise, PhraseOrder):
            if not isinstance(answer, OrderedTokens) or not all(isinstance(t, str) for t in answer.tokens):
                return INCORRECT
            return AnswerEvaluator._evaluate_phrase_order(exercise, answer)

        if not isinstance(answer, TypedText) or not isinstance(answer.text, str):
            return INCORRECT

        if isinstance(exercise, TypingPractice):
            return match_typed(
                answer.text,
                split_alternatives(exercise.answer_text),
                allow_fuzzy=not exercise.target_to_source,
                expected=exercise.answer_text,
            )

        if isinstance(exercise, PhraseTyping):
            target = exercise.phrase.target_text.strip()
            return match_typed(answer.text, [target], allow_fuzzy=True, expected=exercise.phrase.target_text)

        if isinstance(exercise, VerbConjugationPrompt):
            target = verb_target_text(exercise)
            return match_typed(answer.text, split_alternatives(target), allow_fuzzy=True, expected=target)

        return INCORRECT

    @staticmethod
    def _evaluate_phrase_order(exercise: PhraseOrder, answer: OrderedTokens) -> EvaluationResult:
        constructed = strip_spaces(' '.join(answer.tokens))
        for alternative in split_alternatives(exercise.phrase.target_text):
            if constructed == strip_spaces(alternative):
                return EvaluationResult(is_correct=True, expected=exercise.phrase.target_text)
        return EvaluationResult(is_correct=False, expected=exercise.phrase.target_text)
