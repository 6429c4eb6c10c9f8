"""
Array Session Store
Stores sessions in memory (for testing only)
"""
import time
from typing import Any, Dict
from larasession.session.store import SessionStore


class ArraySessionStore(SessionStore):
    """
    In-memory session storage

    WARNING: Not suitable for production use.
    Sessions are lost when the application restarts.
    """

    def __init__(self):
        """Initialize array session store"""
        self._sessions: Dict[str, Dict[str, Any]] = {}

    def _is_expired(self, record: Dict[str, Any], now: float = None) -> bool:
        return record['expire_at'] < (now if now is not None else time.time())

    async def read(self, session_id: str) -> Dict[Any, Any]:
        """Read session from memory"""
        record = self._sessions.get(session_id)
        if record is None:
            return {}

        if self._is_expired(record):
            del self._sessions[session_id]
            return {}

        return record['data'].copy()

    async def write(self, session_id: str, data: Dict[Any, Any], lifetime: int) -> bool:
        """Write session to memory"""
        self._sessions[session_id] = {
            'data': data.copy(),
            'expire_at': time.time() + lifetime,
        }
        return True

    async def destroy(self, session_id: str) -> bool:
        """Delete session from memory"""
        self._sessions.pop(session_id, None)
        return True

    async def gc(self, max_lifetime: int) -> int:
        """Drop expired sessions"""
        now = time.time()
        expired = [sid for sid, record in self._sessions.items() if self._is_expired(record, now)]
        for session_id in expired:
            del self._sessions[session_id]
        return len(expired)

    async def exists(self, session_id: str) -> bool:
        """Check if an unexpired session exists in memory"""
        record = self._sessions.get(session_id)
        return record is not None and not self._is_expired(record)

    def clear_all(self):
        """Clear all sessions (useful for testing)"""
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
