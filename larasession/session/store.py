"""
Session Store Interface
Base class for all session storage drivers
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class SessionStore(ABC):
    """Base session store interface"""

    @abstractmethod
    async def read(self, session_id: str) -> Dict[Any, Any]:
        """
        Read session data from storage

        Args:
            session_id: Session identifier

        Returns:
            Session data dictionary (empty if missing or expired)
        """
        pass

    @abstractmethod
    async def write(self, session_id: str, data: Dict[Any, Any], lifetime: int) -> bool:
        """
        Write session data to storage

        Args:
            session_id: Session identifier
            data: Session data to store
            lifetime: Seconds until the record expires

        Returns:
            True if successful
        """
        pass

    @abstractmethod
    async def destroy(self, session_id: str) -> bool:
        """
        Delete session from storage

        Args:
            session_id: Session identifier

        Returns:
            True if successful
        """
        pass

    @abstractmethod
    async def gc(self, max_lifetime: int) -> int:
        """
        Garbage collection - remove expired sessions

        Args:
            max_lifetime: Maximum session lifetime in seconds

        Returns:
            Number of sessions deleted
        """
        pass

    @abstractmethod
    async def exists(self, session_id: str) -> bool:
        """
        Check if session exists

        Args:
            session_id: Session identifier

        Returns:
            True if session exists
        """
        pass

    def generate_id(self) -> str:
        """
        Generate a new session identifier

        Returns:
            URL-safe random id
        """
        from larasession.defaults import DEFAULT_SESSION_ID_LENGTH
        from larasession.support import Crypto
        return Crypto.generate_token(DEFAULT_SESSION_ID_LENGTH)
