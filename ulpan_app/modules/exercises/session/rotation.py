"""
Exercise-kind rotation strategies.

A rotation answers one question: which kind comes next. The Hebrew track
cycles deterministically so every kind gets even coverage over a long
session; the Arabic track flips a fair coin between its two kinds.
"""

import random
from typing import Iterable, Optional

from ..schemas import ExerciseKind


class RoundRobinRotation:
    """Counter-driven cycle: the first call yields the first kind."""

    def __init__(self, kinds: Iterable[ExerciseKind]):
        self.kinds = tuple(kinds)
        if not self.kinds:
            raise ValueError("A rotation needs at least one exercise kind.")
        self.counter = 0

    def next_kind(self) -> ExerciseKind:
        self.counter += 1
        return self.kinds[(self.counter - 1) % len(self.kinds)]


class RandomRotation:
    def __init__(self, kinds: Iterable[ExerciseKind], rng: Optional[random.Random] = None):
        self.kinds = tuple(kinds)
        if not self.kinds:
            raise ValueError("A rotation needs at least one exercise kind.")
        self.rng = rng or random.Random()

    def next_kind(self) -> ExerciseKind:
        return self.rng.choice(self.kinds)


class SingleKindRotation:
    def __init__(self, kind: ExerciseKind):
        self.kind = ExerciseKind(kind)

    def next_kind(self) -> ExerciseKind:
        return self.kind
