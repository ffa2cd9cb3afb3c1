'''
----------------------------
Server-side login sessions
Held in process memory, lost on restart
----------------------------
'''

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)


@dataclass(frozen = True)
class Session:
    sid: str
    user_id: int
    expires_at: datetime


def _utcnow():
    return datetime.now(timezone.utc)


class SessionStore:
    """Maps opaque session ids to the user they were issued for.

    Every session expires a fixed ``max_age`` after it was created; reads never
    extend it. Expired entries are dropped when they are looked up and swept
    whenever a new session is issued.
    """

    def __init__(self, max_age = timedelta(hours = 1), clock = _utcnow):
        self.max_age = max_age
        self.clock = clock
        self._sessions = {}

    def init_app(self, app):
        # Resources and the access gate look the store up from here
        app.extensions["session_store"] = self

    def create(self, user_id):
        self.purge_expired()
        sid = secrets.token_urlsafe(32)
        session = Session(sid = sid, user_id = user_id, expires_at = self.clock() + self.max_age)
        self._sessions[sid] = session
        return session

    def get(self, sid):
        if not sid:
            return None
        session = self._sessions.get(sid)
        if session is None:
            return None
        if session.expires_at <= self.clock():
            self._sessions.pop(sid, None)
            return None
        return session

    def purge_expired(self):
        now = self.clock()
        expired = [sid for sid, session in list(self._sessions.items()) if session.expires_at <= now]
        for sid in expired:
            self._sessions.pop(sid, None)
        if expired:
            logger.debug("Purged %d expired sessions", len(expired))
        return len(expired)

    def __len__(self):
        return len(self._sessions)
