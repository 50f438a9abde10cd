# File: ulpan_app/modules/content/loader.py
"""
Loads the bundled JSON content files into ``DataPools``.

Loading problems are never fatal: a missing or unreadable file produces an
empty pool, a malformed record is skipped. The engine treats an empty pool
as a normal (degenerate) input.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

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

logger = logging.getLogger(__name__)

T = TypeVar('T')

CONTENT_FILES = {
    'words': 'words.json',
    'phrases': 'phrases.json',
    'preposition_categories': 'prepositions.json',
    'preposition_sentences': 'preposition_sentences.json',
    'verbs': 'verbs.json',
    'arabic_letters': 'arabic_letters.json',
    'arabic_words': 'arabic_words.json',
    'hard_english_words': 'hard_english_words.json',
}


def _camel(slot: str) -> str:
    head, *rest = slot.split('_')
    return head + ''.join(part.title() for part in rest)


def _optional_tuple(value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


# ── record parsers ──────────────────────────────────────────────────


def parse_word(data: Dict[str, Any]) -> VocabItem:
    return VocabItem(
        source_text=data['english'],
        target_text=data['hebrew'],
        root=_optional_tuple(data.get('root')),
        construction=data.get('construction'),
    )


def parse_phrase(data: Dict[str, Any]) -> Phrase:
    return Phrase(
        source_text=data['english'],
        target_text=data['hebrew'],
        construction=data.get('construction'),
    )


def parse_preposition_category(data: Dict[str, Any]) -> PrepositionCategory:
    return PrepositionCategory(
        name=data['category'],
        english_name=data.get('categoryEnglish', ''),
        prepositions=tuple(
            PrepositionPair(target_text=p['hebrew'], source_text=p['english'])
            for p in data.get('prepositions', [])
        ),
    )


def parse_preposition_sentence(data: Dict[str, Any]) -> PrepositionSentence:
    return PrepositionSentence(
        source_text=data['english'],
        target_text_with_blank=data['hebrew'],
        correct_preposition=data['correctPreposition'],
        category_name=data['category'],
    )


def parse_verb_form(data: Dict[str, Any]) -> VerbForm:
    return VerbForm(
        target_text=data['hebrew'],
        source_text=data['english'],
        pronunciation=data.get('pronunciation', ''),
        example_sentence=data.get('exampleSentence'),
    )


def parse_verb(data: Dict[str, Any]) -> VerbConjugation:
    forms = {}
    for slot, _label in VERB_FORM_LABELS:
        raw = data.get(_camel(slot))
        if raw is None:
            raise KeyError(_camel(slot))
        forms[slot] = parse_verb_form(raw)
    return VerbConjugation(
        infinitive=data['infinitive'],
        infinitive_english=data['infinitiveEnglish'],
        forms=forms,
        root=_optional_tuple(data.get('root')),
    )


def parse_arabic_letter(data: Dict[str, Any]) -> ArabicLetter:
    return ArabicLetter(
        name=data['name'],
        sound=data['sound'],
        forms={str(k): str(v) for k, v in (data.get('forms') or {}).items()},
    )


def parse_arabic_word(data: Dict[str, Any]) -> ArabicWord:
    return ArabicWord(
        arabic=data['arabic'],
        pronunciation=data.get('pronunciation', ''),
        english=data['english'],
    )


def parse_hard_english_word(data: Dict[str, Any]) -> HardEnglishWord:
    return HardEnglishWord(word=data['word'], definition=data['definition'])


PARSERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    'words': parse_word,
    'phrases': parse_phrase,
    'preposition_categories': parse_preposition_category,
    'preposition_sentences': parse_preposition_sentence,
    'verbs': parse_verb,
    'arabic_letters': parse_arabic_letter,
    'arabic_words': parse_arabic_word,
    'hard_english_words': parse_hard_english_word,
}


# ── file loading ────────────────────────────────────────────────────


def read_records(path: str) -> List[Dict[str, Any]]:
    """Return the list of JSON objects in ``path`` or ``[]`` on any problem."""
    if not os.path.exists(path):
        logger.warning("Content file %s not found, using an empty pool.", path)
        return []
    try:
        with open(path, encoding='utf-8') as handle:
            payload = json.load(handle)
    except (OSError, ValueError) as e:
        logger.error("Failed to load %s: %s", path, e)
        return []
    if not isinstance(payload, list):
        logger.error("Skipping %s: expected a JSON list, got %s.", path, type(payload).__name__)
        return []
    return payload


def parse_records(records: List[Any], parser: Callable[[Dict[str, Any]], T], source: str = '') -> Tuple[T, ...]:
    parsed = []
    for index, record in enumerate(records):
        try:
            parsed.append(parser(record))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed record #%d in %s: %r", index, source or '<memory>', e)
    return tuple(parsed)


def load_pools(directory: str) -> DataPools:
    """Read every content file found in ``directory``."""
    pools = {}
    for pool_name, file_name in CONTENT_FILES.items():
        path = os.path.join(directory, file_name)
        pools[pool_name] = parse_records(read_records(path), PARSERS[pool_name], file_name)

    result = DataPools(**pools)
    _warn_orphan_sentences(result)
    logger.info("Loaded content pools from %s: %s", directory, result.counts())
    return result


def _warn_orphan_sentences(pools: DataPools) -> None:
    known = {category.name for category in pools.preposition_categories}
    for sentence in pools.preposition_sentences:
        if sentence.category_name not in known:
            logger.warning(
                "Preposition sentence %r references unknown category %r.",
                sentence.source_text,
                sentence.category_name,
            )
