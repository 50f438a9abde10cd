"""Pure exercise logic: generation, option selection and answer evaluation."""

from .evaluator import AnswerEvaluator, match_typed, verb_target_text
from .generator import ExerciseGenerator, GeneratorOptions
from .selector import item_identity, select_options
from .text_matching import is_fuzzy_match, normalize, skeleton, split_alternatives

__all__ = [
    'AnswerEvaluator',
    'ExerciseGenerator',
    'GeneratorOptions',
    'is_fuzzy_match',
    'item_identity',
    'match_typed',
    'normalize',
    'select_options',
    'skeleton',
    'split_alternatives',
    'verb_target_text',
]
