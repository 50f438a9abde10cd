"""Content records and the JSON loader that fills them."""

from .loader import load_pools
from .models import (
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

__all__ = [
    "VERB_FORM_LABELS",
    "ArabicLetter",
    "ArabicWord",
    "DataPools",
    "HardEnglishWord",
    "Phrase",
    "PrepositionCategory",
    "PrepositionPair",
    "PrepositionSentence",
    "VerbConjugation",
    "VerbForm",
    "VocabItem",
    "load_pools",
]
