from __future__ import annotations

from dataclasses import dataclass, field
import logging
import secrets
import threading
import time
from typing import Callable, Optional

from itsdangerous import BadSignature, URLSafeSerializer

from .editor import EditorDraft
from .navigation import NavigationController

logger = logging.getLogger(__name__)


@dataclass
class PortalSession:
    controller: NavigationController = field(default_factory=NavigationController)
    draft: EditorDraft | None = None
    last_seen: float = field(default_factory=time.monotonic)


class SessionRegistry:
    """Per-browser view state, keyed by a signed session id cookie.

    Sessions live in process memory only. A session is dropped once it has
    been idle for longer than ``max_age_seconds``; every resolve counts as
    activity.
    """

    def __init__(self, secret_key: str, max_age_seconds: int, clock: Callable[[], float] | None = None) -> None:
        self._serializer = URLSafeSerializer(secret_key, salt="newsflow-session")
        self._max_age_seconds = max_age_seconds
        self._clock = clock or time.monotonic
        self._sessions: dict[str, PortalSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def verify_token(self, token: str) -> Optional[str]:
        try:
            payload = self._serializer.loads(token)
        except BadSignature:
            return None
        return payload.get("sid") if isinstance(payload, dict) else None

    def _is_idle(self, session: PortalSession, now: float) -> bool:
        return now - session.last_seen > self._max_age_seconds

    def _prune(self, now: float) -> None:
        stale = [sid for sid, s in self._sessions.items() if self._is_idle(s, now)]
        for sid in stale:
            del self._sessions[sid]
        if stale:
            logger.info("Dropped %d idle sessions", len(stale))

    def resolve(self, token: str | None) -> tuple[PortalSession, str]:
        """Return the session for ``token``, or a fresh one with a new token."""
        now = self._clock()
        sid = self.verify_token(token) if token else None
        with self._lock:
            self._prune(now)
            if sid and sid in self._sessions:
                session = self._sessions[sid]
                session.last_seen = now
                return session, token  # type: ignore[return-value]

            sid = secrets.token_urlsafe(16)
            session = PortalSession(last_seen=now)
            self._sessions[sid] = session
        return session, self._serializer.dumps({"sid": sid})
