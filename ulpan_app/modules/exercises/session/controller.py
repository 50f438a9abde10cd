# File: ulpan_app/modules/exercises/session/controller.py
# Practice Session Controller - sequences generation, evaluation and feedback timers.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ....core.scheduler import TimerQueue
from ....core.signals import answer_evaluated, answer_revealed, exercise_generated
from ..engine.evaluator import AnswerEvaluator
from ..engine.generator import ExerciseGenerator
from ..engine.selector import item_identity
from ..schemas import (
    Answer,
    ChoiceExercise,
    EvaluationResult,
    Exercise,
    ExerciseKind,
    PhraseOrder,
    PrepositionChoice,
    SelectedOption,
    TYPED_KINDS,
)

logger = logging.getLogger(__name__)

MSG_CORRECT = "Correct!"
MSG_CLOSE = "Close! Correct: {answer}"
MSG_TRY_AGAIN = "Try again!"
MSG_REVEALED = "Correct answer shown"


class SessionPhase(str, Enum):
    IDLE = 'idle'
    AWAITING_ANSWER = 'awaiting_answer'
    ANSWERED = 'answered'
    REVEALED = 'revealed'


@dataclass(frozen=True)
class SessionSettings:
    """Feedback delays (seconds) and limits for one session."""

    choice_delay: float = 1.5
    typed_delay: float = 0.5
    close_match_delay: float = 2.5
    phrase_order_delay: float = 0.5
    wrong_feedback_delay: float = 1.0
    max_typing_attempts: int = 3
    cancel_stale_timers: bool = False

    @classmethod
    def from_config(cls, config, choice_delay: Optional[float] = None) -> 'SessionSettings':
        return cls(
            choice_delay=cls.choice_delay if choice_delay is None else choice_delay,
            max_typing_attempts=config.get('MAX_TYPING_ATTEMPTS', cls.max_typing_attempts),
            cancel_stale_timers=bool(config.get('CANCEL_STALE_TIMERS', cls.cancel_stale_timers)),
        )


@dataclass
class SessionState:
    """Everything the presentation layer needs to render a session."""

    correct_count: int = 0
    wrong_count: int = 0
    exercise: Optional[Exercise] = None
    exercise_id: int = 0
    feedback_message: Optional[str] = None
    is_correct: bool = False
    is_close_match: bool = False
    typing_attempts: int = 0
    reveal_answer: bool = False
    show_feedback: bool = False
    selected_option: Any = None
    phase: SessionPhase = SessionPhase.IDLE

    def reset_for_exercise(self) -> None:
        self.feedback_message = None
        self.show_feedback = False
        self.selected_option = None
        self.typing_attempts = 0
        self.reveal_answer = False
        self.is_close_match = False

    def selected_index(self) -> Optional[int]:
        if self.selected_option is None or self.exercise is None:
            return None
        for index, option in enumerate(self.exercise.options):
            if item_identity(option) == item_identity(self.selected_option):
                return index
        return None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'phase': self.phase.value,
            'exercise_id': self.exercise_id,
            'exercise': self.exercise.to_dict() if self.exercise else None,
            'stats': {'correct': self.correct_count, 'wrong': self.wrong_count},
            'feedback_message': self.feedback_message,
            'is_correct': self.is_correct,
            'is_close_match': self.is_close_match,
            'typing_attempts': self.typing_attempts,
            'reveal_answer': self.reveal_answer,
            'show_feedback': self.show_feedback,
            'selected_index': self.selected_index(),
        }
        if self.reveal_answer and self.exercise is not None:
            data['correct_answer'] = AnswerEvaluator.expected_answer(self.exercise)
            details = self.exercise.answer_details()
            if details:
                data['answer_details'] = details
        return data


class SessionController:
    """
    Drives one practice session.

    Per exercise: ``awaiting_answer`` → ``answered`` (correct, locked until the
    advance timer fires) or back to ``awaiting_answer`` (wrong). Typed kinds
    reveal the answer after ``max_typing_attempts`` failures and wait in
    ``revealed`` for ``acknowledge()``; ``give_up()`` does the same at once.

    Deferred callbacks go through the ``TimerQueue`` keyed by exercise id.
    They fire unconditionally unless ``cancel_stale_timers`` is set, in which
    case advancing cancels the previous exercise's pending tasks.
    """

    def __init__(
        self,
        generator: ExerciseGenerator,
        rotation,
        scheduler: TimerQueue,
        settings: Optional[SessionSettings] = None,
        fallback_kind: ExerciseKind = ExerciseKind.ENGLISH_TO_TARGET,
        track: Optional[str] = None,
        evaluator: Optional[AnswerEvaluator] = None,
    ) -> None:
        self.generator = generator
        self.rotation = rotation
        self.scheduler = scheduler
        self.settings = settings or SessionSettings()
        self.fallback_kind = ExerciseKind(fallback_kind)
        self.track = track
        self.evaluator = evaluator or AnswerEvaluator()
        self.state = SessionState()

    @property
    def phase(self) -> SessionPhase:
        return self.state.phase

    # ── lifecycle ────────────────────────────────────────────────────

    def next_exercise(self) -> Optional[Exercise]:
        state = self.state
        if self.settings.cancel_stale_timers and state.exercise_id:
            self.scheduler.cancel_keyed(state.exercise_id)

        state.reset_for_exercise()

        kind = self.rotation.next_kind()
        exercise = self.generator.generate(kind)
        fallback = False
        if exercise is None and kind != self.fallback_kind:
            logger.info("Falling back from %s to %s.", kind.value, self.fallback_kind.value)
            exercise = self.generator.generate(self.fallback_kind)
            fallback = True

        state.exercise = exercise
        if exercise is None:
            logger.warning("No exercise available for track %s; session is idle.", self.track)
            state.phase = SessionPhase.IDLE
            return None

        state.exercise_id += 1
        state.phase = SessionPhase.AWAITING_ANSWER
        exercise_generated.send(self, exercise=exercise, exercise_id=state.exercise_id, fallback=fallback)
        return exercise

    def submit(self, answer: Answer) -> Optional[EvaluationResult]:
        """Evaluate an answer; ``None`` when the session is not accepting input."""
        state = self.state
        if state.phase != SessionPhase.AWAITING_ANSWER or state.exercise is None:
            logger.debug("Ignoring submission in phase %s.", state.phase.value)
            return None

        exercise = state.exercise
        result = self.evaluator.evaluate(exercise, answer)

        if result.is_correct:
            self._handle_correct(exercise, answer, result)
        else:
            self._handle_wrong(exercise, answer)

        answer_evaluated.send(
            self,
            exercise=exercise,
            exercise_id=state.exercise_id,
            result=result,
            attempts=state.typing_attempts,
        )
        return result

    def give_up(self) -> bool:
        state = self.state
        if state.phase != SessionPhase.AWAITING_ANSWER or state.exercise is None:
            return False
        state.wrong_count += 1
        state.is_correct = False
        self._reveal('give_up')
        return True

    def acknowledge(self) -> Optional[Exercise]:
        """Leave the revealed state and move on."""
        if self.state.phase != SessionPhase.REVEALED:
            return None
        return self.next_exercise()

    def clear_feedback(self) -> None:
        state = self.state
        state.show_feedback = False
        state.selected_option = None
        state.feedback_message = None

    def run_due(self) -> int:
        return self.scheduler.run_due()

    # ── internals ────────────────────────────────────────────────────

    def _schedule(self, delay: float, callback) -> None:
        self.scheduler.schedule(delay, callback, key=self.state.exercise_id)

    def _handle_correct(self, exercise: Exercise, answer: Answer, result: EvaluationResult) -> None:
        state = self.state
        settings = self.settings
        state.correct_count += 1
        state.is_correct = True
        state.is_close_match = result.is_close_match
        state.phase = SessionPhase.ANSWERED

        if result.is_close_match:
            state.feedback_message = MSG_CLOSE.format(answer=result.expected)
        else:
            state.feedback_message = MSG_CORRECT

        if isinstance(exercise, ChoiceExercise):
            state.selected_option = answer.option if isinstance(answer, SelectedOption) else None
            state.show_feedback = True
            delay = settings.choice_delay
        elif isinstance(exercise, PrepositionChoice) or exercise.kind in TYPED_KINDS:
            state.show_feedback = True
            delay = settings.close_match_delay if result.is_close_match else settings.typed_delay
        else:
            delay = settings.phrase_order_delay

        self._schedule(delay, self.next_exercise)

    def _handle_wrong(self, exercise: Exercise, answer: Answer) -> None:
        state = self.state
        state.wrong_count += 1
        state.is_correct = False
        state.is_close_match = False
        state.feedback_message = MSG_TRY_AGAIN

        if isinstance(exercise, ChoiceExercise):
            state.selected_option = answer.option if isinstance(answer, SelectedOption) else None
            state.show_feedback = True
            self._schedule(self.settings.wrong_feedback_delay, self.clear_feedback)
        elif exercise.kind in TYPED_KINDS:
            state.typing_attempts += 1
            if state.typing_attempts >= self.settings.max_typing_attempts:
                self._reveal('attempt_limit')
            else:
                self._schedule(self.settings.wrong_feedback_delay, self.clear_feedback)
        elif isinstance(exercise, PrepositionChoice):
            state.show_feedback = True
            self._schedule(self.settings.wrong_feedback_delay, self.clear_feedback)
        elif isinstance(exercise, PhraseOrder):
            self._schedule(self.settings.wrong_feedback_delay, self.clear_feedback)

    def _reveal(self, reason: str) -> None:
        state = self.state
        state.reveal_answer = True
        state.feedback_message = MSG_REVEALED
        state.phase = SessionPhase.REVEALED
        logger.debug("Answer revealed for exercise %s (%s).", state.exercise_id, reason)
        answer_revealed.send(self, exercise=state.exercise, exercise_id=state.exercise_id, reason=reason)

    def to_dict(self) -> Dict[str, Any]:
        data = self.state.to_dict()
        data['track'] = self.track
        return data
