"""Session orchestration: kind rotation, per-session controller and registry."""

from .controller import (
    SessionController,
    SessionPhase,
    SessionSettings,
    SessionState,
)
from .registry import PracticeSession, SessionRegistry
from .rotation import RandomRotation, RoundRobinRotation, SingleKindRotation

__all__ = [
    'PracticeSession',
    'RandomRotation',
    'RoundRobinRotation',
    'SessionController',
    'SessionPhase',
    'SessionRegistry',
    'SessionSettings',
    'SessionState',
    'SingleKindRotation',
]
