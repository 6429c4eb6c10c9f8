"""
File Session Store
Stores sessions as JSON files in the filesystem
"""
import json
import time
from pathlib import Path
from typing import Any, Dict, Union
from larasession.session.store import SessionStore
from larasession.logging import getLogger

logger = getLogger(__name__)


class FileSessionStore(SessionStore):
    """File-based session storage"""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize file session store

        Args:
            path: Path to session storage directory
        """
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)

    def _get_session_file(self, session_id: str) -> Path:
        """Get path to session file"""
        return self.path / f"session_{session_id}.json"

    @staticmethod
    def _encode(data: Dict[Any, Any]) -> Dict[str, Any]:
        # JSON object keys are strings, so integer keys get their own object
        encoded: Dict[str, Any] = {'data': {}, '_int_data': {}}
        for key, value in data.items():
            bucket = '_int_data' if isinstance(key, int) and not isinstance(key, bool) else 'data'
            encoded[bucket][str(key)] = value
        return encoded

    @staticmethod
    def _decode(payload: Dict[str, Any]) -> Dict[Any, Any]:
        data: Dict[Any, Any] = dict(payload.get('data', {}))
        for key, value in payload.get('_int_data', {}).items():
            data[int(key)] = value
        return data

    async def read(self, session_id: str) -> Dict[Any, Any]:
        """Read session from file"""
        session_file = self._get_session_file(session_id)

        if not session_file.exists():
            return {}

        try:
            with open(session_file, 'r') as f:
                payload = json.load(f)

            if payload.get('_expire_at', 0) < time.time():
                await self.destroy(session_id)
                return {}

            return self._decode(payload)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Unreadable session file {session_file.name}: {e}")
            return {}

    async def write(self, session_id: str, data: Dict[Any, Any], lifetime: int) -> bool:
        """Write session to file"""
        session_file = self._get_session_file(session_id)
        now = time.time()

        try:
            payload = self._encode(data)
            payload['_created_at'] = now
            payload['_expire_at'] = now + lifetime
            content = json.dumps(payload, indent=2)

            with open(session_file, 'w') as f:
                f.write(content)

            return True
        except (IOError, TypeError, ValueError) as e:
            logger.error(f"Failed to write session file {session_file.name}: {e}")
            return False

    async def destroy(self, session_id: str) -> bool:
        """Delete session file"""
        session_file = self._get_session_file(session_id)

        try:
            if session_file.exists():
                session_file.unlink()
            return True
        except IOError as e:
            logger.error(f"Failed to delete session file {session_file.name}: {e}")
            return False

    async def gc(self, max_lifetime: int) -> int:
        """Remove expired session files"""
        current_time = time.time()
        deleted = 0

        for session_file in self.path.glob('session_*.json'):
            try:
                with open(session_file, 'r') as f:
                    payload = json.load(f)
                expired = payload.get('_expire_at', 0) < current_time
            except (json.JSONDecodeError, IOError):
                # Corrupted file
                expired = True

            if expired:
                try:
                    session_file.unlink()
                    deleted += 1
                except FileNotFoundError:
                    # Removed by a concurrent request
                    pass

        return deleted

    async def exists(self, session_id: str) -> bool:
        """Check if session file exists"""
        return self._get_session_file(session_id).exists()
