# File: ulpan_app/modules/exercises/session/registry.py
# In-process store of live practice sessions, one timer queue each.

from __future__ import annotations

import logging
import random
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional
from uuid import uuid4

from ....core.scheduler import TimerQueue
from ....core.signals import session_started
from ...content.models import DataPools
from ..engine.generator import ExerciseGenerator, GeneratorOptions
from .controller import SessionController, SessionSettings

if TYPE_CHECKING:
    from ..tracks import TrackDefinition

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT = 3600.0


@dataclass
class PracticeSession:
    session_id: str
    track: TrackDefinition
    controller: SessionController
    scheduler: TimerQueue
    last_access: float = 0.0

    def run_due(self) -> int:
        return self.scheduler.run_due()

    def to_dict(self):
        data = self.controller.to_dict()
        data['session_id'] = self.session_id
        return data


class SessionRegistry:
    """
    Holds sessions keyed by a short random id.

    The lock only guards the mapping; a session itself is driven by one
    request at a time.
    """

    def __init__(
        self,
        pools: DataPools,
        config=None,
        clock: Callable[[], float] = time.monotonic,
        rng_factory: Callable[[], random.Random] = random.Random,
    ) -> None:
        self.pools = pools
        self.config = config or {}
        self.clock = clock
        self.rng_factory = rng_factory
        self.idle_timeout = self.config.get('SESSION_IDLE_TIMEOUT', DEFAULT_IDLE_TIMEOUT)
        self._sessions: Dict[str, PracticeSession] = {}
        self._lock = threading.Lock()

    def _new_id(self) -> str:
        session_id = uuid4().hex[:8]
        while session_id in self._sessions:
            session_id = uuid4().hex[:8]
        return session_id

    def create(self, track: TrackDefinition) -> PracticeSession:
        rng = self.rng_factory()
        scheduler = TimerQueue(clock=self.clock)
        generator = ExerciseGenerator(
            self.pools,
            options=GeneratorOptions.from_config(self.config),
            rng=rng,
        )
        controller = SessionController(
            generator,
            track.build_rotation(rng),
            scheduler,
            settings=SessionSettings.from_config(self.config, choice_delay=track.choice_delay),
            fallback_kind=track.fallback_kind,
            track=track.name,
        )

        self.prune_idle()
        with self._lock:
            session = PracticeSession(self._new_id(), track, controller, scheduler, last_access=self.clock())
            self._sessions[session.session_id] = session

        session_started.send(controller, track=track.name)
        controller.next_exercise()
        logger.info("Started %s session %s.", track.name, session.session_id)
        return session

    def get(self, session_id: str) -> Optional[PracticeSession]:
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_access = self.clock()
        return session

    def prune_idle(self) -> int:
        """Drop sessions not touched for ``idle_timeout`` seconds."""
        if not self.idle_timeout:
            return 0
        cutoff = self.clock() - self.idle_timeout
        with self._lock:
            stale = [sid for sid, s in self._sessions.items() if s.last_access <= cutoff]
            expired = [self._sessions.pop(sid) for sid in stale]
        for session in expired:
            session.scheduler.clear()
        if expired:
            logger.info("Pruned %d idle practice sessions.", len(expired))
        return len(expired)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.scheduler.clear()
        return True

    def __len__(self) -> int:
        return len(self._sessions)
