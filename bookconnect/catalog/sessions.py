"""
Per-browser-session catalogue state.

Each session owns one ``CatalogController`` and the ``ListView`` it
renders into. Sessions live in memory only and disappear with the
process. The store holds at most ``max_sessions`` of them; creating one
more evicts the least recently used session. All transitions on a
session are serialised with its lock so that one request runs to
completion before the next one starts.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from ..models import CatalogDataset
from .controller import CatalogController
from .render import ListView
from .schemas import Theme


logger = logging.getLogger(__name__)

SESSION_COOKIE = "bookconnect_session"
DEFAULT_MAX_SESSIONS = 1000


@dataclass
class CatalogSession:
    id: str
    controller: CatalogController
    view: ListView
    theme: Optional[Theme] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class SessionStore:
    def __init__(
        self, dataset: CatalogDataset, max_sessions: int = DEFAULT_MAX_SESSIONS
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.dataset = dataset
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, CatalogSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def get_or_create(self, session_id: Optional[str]) -> CatalogSession:
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return self._sessions[session_id]

            while len(self._sessions) >= self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.info("Evicted catalogue session %s", evicted_id)

            new_id = uuid.uuid4().hex
            view = ListView()
            controller = CatalogController(self.dataset, view)
            controller.initialize()
            session = CatalogSession(id=new_id, controller=controller, view=view)
            self._sessions[new_id] = session
            logger.info("Created catalogue session %s", new_id)
            return session
