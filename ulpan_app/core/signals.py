"""
Central Signal Registry for practice sessions.

Uses blinker (Flask's signalling backend) so that listeners such as
loggers, statistics or a future UI bridge can react to session events
without the controller importing them.

Usage:
    # Publisher (sender)
    from ulpan_app.core.signals import answer_evaluated
    answer_evaluated.send(controller, exercise=..., result=...)

    # Subscriber
    @answer_evaluated.connect
    def on_answer_evaluated(sender, **kwargs):
        ...
"""
from blinker import Namespace

practice_signals = Namespace()

# Fired when a session controller is created for a track
# Payload: track (str)
session_started = practice_signals.signal('session_started')

# Fired when a new exercise becomes current
# Payload: exercise, exercise_id (int), fallback (bool)
exercise_generated = practice_signals.signal('exercise_generated')

# Fired after every evaluated submission
# Payload: exercise, exercise_id, result (EvaluationResult), attempts (int)
answer_evaluated = practice_signals.signal('answer_evaluated')

# Fired when the correct answer is revealed (give up or attempt limit)
# Payload: exercise, exercise_id, reason ('give_up' | 'attempt_limit')
answer_revealed = practice_signals.signal('answer_revealed')
