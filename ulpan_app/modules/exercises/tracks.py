# File: ulpan_app/modules/exercises/tracks.py
"""
Practice tracks: named presets binding a kind rotation, a fallback kind
and the feedback delay used for correct choice answers.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .schemas import ExerciseKind
from .session.rotation import RandomRotation, RoundRobinRotation, SingleKindRotation


@dataclass(frozen=True)
class TrackDefinition:
    name: str
    title: str
    kinds: Tuple[ExerciseKind, ...]
    fallback_kind: ExerciseKind
    choice_delay: float = 1.5
    randomized: bool = False

    def build_rotation(self, rng: Optional[random.Random] = None):
        if len(self.kinds) == 1:
            return SingleKindRotation(self.kinds[0])
        if self.randomized:
            return RandomRotation(self.kinds, rng=rng)
        return RoundRobinRotation(self.kinds)

    def to_dict(self):
        return {
            'name': self.name,
            'title': self.title,
            'kinds': [kind.value for kind in self.kinds],
            'fallback_kind': self.fallback_kind.value,
        }


HEBREW_TRACK = TrackDefinition(
    name='hebrew',
    title='Hebrew',
    kinds=(
        ExerciseKind.ENGLISH_TO_TARGET,
        ExerciseKind.TARGET_TO_ENGLISH,
        ExerciseKind.PHRASE_ORDER,
        ExerciseKind.TYPING_PRACTICE,
        ExerciseKind.PHRASE_TYPING,
        ExerciseKind.PREPOSITION_CHOICE,
        ExerciseKind.VERB_CONJUGATION,
    ),
    fallback_kind=ExerciseKind.ENGLISH_TO_TARGET,
    choice_delay=1.5,
)

ARABIC_TRACK = TrackDefinition(
    name='arabic',
    title='Arabic',
    kinds=(ExerciseKind.LETTER_TO_SOUND, ExerciseKind.ARABIC_WORD_TO_ENGLISH),
    fallback_kind=ExerciseKind.LETTER_TO_SOUND,
    choice_delay=1.0,
    randomized=True,
)

HARD_ENGLISH_TRACK = TrackDefinition(
    name='hard_english',
    title='Hard English',
    kinds=(ExerciseKind.DEFINITION_TO_WORD,),
    fallback_kind=ExerciseKind.DEFINITION_TO_WORD,
    choice_delay=1.0,
)

TRACKS: Dict[str, TrackDefinition] = {
    track.name: track for track in (HEBREW_TRACK, ARABIC_TRACK, HARD_ENGLISH_TRACK)
}

DEFAULT_TRACK = HEBREW_TRACK.name


def get_track(name: str) -> Optional[TrackDefinition]:
    return TRACKS.get(name)


def list_tracks() -> List[TrackDefinition]:
    return list(TRACKS.values())
