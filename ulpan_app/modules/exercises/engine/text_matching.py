"""
Pure text comparison helpers for typed answers.
No Flask, no I/O.
"""

import re
import unicodedata
from typing import List

# Hebrew cantillation marks and vowel points (niqqud)
_NIQQUD = re.compile('[\u0591-\u05C7]')

# Letters commonly confused when typing Hebrew by ear, mapped to one
# representative. Applied in this order as plain substring replacements.
CONFUSABLE_LETTERS = (
    ('ח', 'ה'),  # Het / He
    ('כ', 'ק'),  # Kaf / Qof
    ('ט', 'ת'),  # Tet / Tav
    ('ס', 'ש'),  # Samekh / Shin (Sin)
    ('א', 'ע'),  # Aleph / Ayin
    ('ו', 'ב'),  # Vav / Vet
)

ALTERNATIVE_SEPARATOR = ';'


def _is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith('P')


def normalize(text: str) -> str:
    """Lowercase, then drop whitespace, punctuation and Hebrew diacritics."""
    lowered = (text or '').lower()
    kept = ''.join(ch for ch in lowered if not ch.isspace() and not _is_punctuation(ch))
    return _NIQQUD.sub('', kept)


def skeleton(text: str) -> str:
    """Collapse confusable letters onto their representative."""
    for letter, representative in CONFUSABLE_LETTERS:
        text = text.replace(letter, representative)
    return text


def is_fuzzy_match(a: str, b: str) -> bool:
    return skeleton(a) == skeleton(b)


def split_alternatives(text: str) -> List[str]:
    """Split ``a;b`` into trimmed, non-empty alternatives."""
    return [part.strip() for part in (text or '').split(ALTERNATIVE_SEPARATOR) if part.strip()]


def strip_spaces(text: str) -> str:
    return text.replace(' ', '')
