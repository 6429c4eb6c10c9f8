"""
Session
Object-oriented facade over an injected session store and cookie channel
"""
import time
from typing import Any, Dict, Hashable, Mapping, Optional, Union
from larasession.session.cookie_params import CookieParameters
from larasession.session.cookies import CookieChannel, ArrayCookieChannel
from larasession.session.options import (
    SessionOptions,
    is_valid_session_id,
    validate_session_id,
    validate_session_name,
)
from larasession.session.status import SessionStatus
from larasession.session.store import SessionStore
from larasession.logging import getLogger

logger = getLogger(__name__)

Key = Union[str, int]


class Session:
    """
    Session facade

    Exposes a typed, chainable API over a SessionStore and a CookieChannel:
    - status(), is_active(), is_none(), is_disabled()
    - start(), close(), destroy(), regenerate_id()
    - get(), get_all(), set(), put(), put_all(), has(), remove(), clear()
    - use_cookies(), cookie_params(), set_cookie_params(), destroy_cookie()

    Data access never raises when no session is active: reads return the
    default, writes are ignored.

    Example:
        session = Session(FileSessionStore(path), SanicCookieChannel(request))
        await session.start()
        session.set('name', 'Bob').set('surname', 'Marley')
        await session.close()
    """

    def __init__(
        self,
        store: SessionStore,
        cookies: Optional[CookieChannel] = None,
        options: Optional[SessionOptions] = None
    ):
        """
        Initialize session facade

        Args:
            store: Session storage driver
            cookies: Channel carrying the identifier cookie
            options: Configuration applied before start() (copied, never mutated)
        """
        self.store = store
        self.cookies = cookies if cookies is not None else ArrayCookieChannel()
        self.options = options.copy() if options is not None else SessionOptions()
        self._id: Optional[str] = self.options.id
        self._data: Optional[Dict[Key, Any]] = None

        if self.options.cookie_params is not None:
            self.cookies.set_params(self.options.cookie_params)

    # === State ===

    def status(self) -> SessionStatus:
        """
        Return the session status:

        - ACTIVE    if sessions are enabled and one exists.
        - NONE      if sessions are enabled but none exists.
        - DISABLED  if sessions are disabled.
        """
        if not self.options.enabled:
            return SessionStatus.DISABLED
        if self._data is not None:
            return SessionStatus.ACTIVE
        return SessionStatus.NONE

    def is_active(self) -> bool:
        return self.status() is SessionStatus.ACTIVE

    def is_none(self) -> bool:
        return self.status() is SessionStatus.NONE

    def is_disabled(self) -> bool:
        return self.status() is SessionStatus.DISABLED

    def exists(self) -> bool:
        """Alias for is_active()"""
        return self.is_active()

    def enabled(self) -> bool:
        """True if sessions are enabled, whether or not one exists"""
        return not self.is_disabled()

    # === Lifecycle ===

    async def start(self) -> bool:
        """
        Start a new session or resume an existing one

        The id is taken from the options, then from the identifier cookie,
        and is generated otherwise.

        Returns:
            True if a session is active afterwards
        """
        status = self.status()
        if status is SessionStatus.DISABLED:
            logger.warning("Cannot start session: sessions are disabled")
            return False
        if status is SessionStatus.ACTIVE:
            return True

        incoming_id = self._incoming_id()
        session_id = self._id or incoming_id
        if not session_id:
            session_id = await self._new_id()

        try:
            data = await self.store.read(session_id)
        except OSError as e:
            logger.error(f"Failed to start session: {e}")
            return False

        self._id = session_id
        self._data = data

        if session_id != incoming_id or self.cookie_params().lifetime > 0:
            self._send_cookie()

        return True

    async def close(self) -> bool:
        """
        Write the session data and release the session for this request

        Data stays in the store; data access is unavailable until start()
        is called again.

        Returns:
            True if the data was written
        """
        if not self.is_active():
            return False

        data, self._data = self._data, None

        try:
            written = await self.store.write(self._id, data, self.options.lifetime)
        except OSError as e:
            logger.error(f"Failed to write session: {e}")
            return False

        if not written:
            logger.warning("Session store refused to write session data")
        return written

    async def destroy(self) -> bool:
        """
        Destroy all of the data associated with the current session

        Does not expire the session cookie, see destroy_cookie().

        Returns:
            True if the store removed the session
        """
        if not self.is_active():
            logger.warning("Trying to destroy an uninitialized session")
            return False

        try:
            destroyed = await self.store.destroy(self._id)
        except OSError as e:
            logger.error(f"Failed to destroy session: {e}")
            destroyed = False

        self._data = None
        self._id = None
        self.options.id = None
        return destroyed

    # === Identity ===

    def id(self) -> str:
        """Return the current session id, or '' if there is none"""
        return self._id or ''

    def set_id(self, new_id: str) -> bool:
        """
        Set the session id. Only effective BEFORE start().

        Args:
            new_id: The new id. Allowed characters are [A-Za-z0-9,_-]

        Returns:
            False if a session is already active (nothing changes)
        """
        validate_session_id(new_id)
        if self._refuse_while_active('set_id'):
            return False

        self.options.with_id(new_id)
        self._id = new_id
        return True

    def name(self) -> str:
        """Return the session name, used as the cookie name"""
        return self.options.name

    def set_name(self, new_name: str) -> bool:
        """
        Set the session name. Only effective BEFORE start().

        Args:
            new_name: The new name. Allowed characters are [A-Za-z0-9_-]

        Returns:
            False if a session is already active (nothing changes)
        """
        validate_session_name(new_name)
        if self._refuse_while_active('set_name'):
            return False

        self.options.with_name(new_name)
        return True

    async def regenerate_id(self, delete_old: bool = False) -> bool:
        """
        Replace the current session id with a newly generated one

        Args:
            delete_old: Whether to delete the old session record

        Returns:
            True if the session now has a new id
        """
        if not self.is_active():
            logger.warning("Cannot regenerate id: no active session")
            return False

        old_id = self._id
        try:
            new_id = await self._new_id()

            if delete_old:
                if not await self.store.destroy(old_id):
                    logger.warning("Failed to delete old session while regenerating id")
                    return False
            elif not await self.store.write(old_id, self._data, self.options.lifetime):
                logger.warning("Failed to keep old session while regenerating id")
                return False
        except OSError as e:
            logger.error(f"Failed to regenerate session id: {e}")
            return False

        self._id = new_id
        if self.options.id is not None:
            self.options.id = new_id
        self._send_cookie()
        return True

    # === Data ===

    def get(self, key: Key, default: Any = None) -> Any:
        """
        Return the value of a given key, or the default if it doesn't exist

        Args:
            key: Session key
            default: Value returned when the key or the session is missing
        """
        if self._data is None:
            return default
        return self._data.get(key, default)

    def get_all(self) -> Dict[Key, Any]:
        """Return a copy of all session data ({} without an active session)"""
        if self._data is None:
            return {}
        return dict(self._data)

    def set(self, key: Key, value: Any) -> 'Session':
        """
        Set the value for a given key (chainable)

        Example:
            session.set('name', 'Bob').set('surname', 'Marley')
        """
        if self._data is not None:
            self._data[key] = value
        return self

    def put(self, key: Key, value: Any) -> 'Session':
        """Alias for set()"""
        return self.set(key, value)

    def put_all(self, values: Mapping[Key, Any]) -> 'Session':
        """Set every key and value of a mapping (chainable)"""
        for key, value in values.items():
            self.set(key, value)
        return self

    def has(self, key: Key) -> bool:
        """Check if the session holds the given key"""
        return self._data is not None and key in self._data

    def remove(self, key: Key) -> bool:
        """
        Remove a given key from the session

        Returns:
            True if the key was present
        """
        if not self.has(key):
            return False
        del self._data[key]
        return True

    def clear(self) -> None:
        """Remove all session data, keeping the session itself"""
        if self._data is not None:
            self._data.clear()

    # === Cookies ===

    def use_cookies(self) -> bool:
        """Return True whether the session uses cookies"""
        return bool(self.cookies.use_cookies)

    def cookie_params(self) -> CookieParameters:
        """Return the session cookie attributes"""
        return self.cookies.get_params()

    def set_cookie_params(self, params: Optional[CookieParameters] = None, **attributes) -> bool:
        """
        Set the session cookie attributes. Only effective BEFORE start().

        Either pass a CookieParameters instance or keyword attributes
        (lifetime, path, domain, secure, http_only, same_site); missing
        keyword attributes keep their current values.

        Example:
            session.set_cookie_params(lifetime=3600, path='/', secure=True)

        Returns:
            False if a session is already active (nothing changes)
        """
        if params is None:
            params = self.cookie_params().replace(**attributes)
        elif attributes:
            params = params.replace(**attributes)

        if self._refuse_while_active('set_cookie_params'):
            return False

        self.options.with_cookie_params(params)
        self.cookies.set_params(params)
        return True

    def destroy_cookie(self) -> bool:
        """
        Expire the session cookie on the client

        Returns:
            False if cookies are not in use, otherwise the emission result
        """
        if not self.use_cookies():
            return False

        from larasession.defaults import COOKIE_EXPIRED_OFFSET
        expiration = time.time() - COOKIE_EXPIRED_OFFSET
        return self.cookies.emit(self.name(), '', expiration, self.cookie_params())

    # === Internals ===

    def _incoming_id(self) -> Optional[str]:
        """Session id sent by the client, if cookies are used and it is well formed"""
        if not self.use_cookies():
            return None

        session_id = self.cookies.read(self.name())
        if session_id is not None and not is_valid_session_id(session_id):
            logger.warning("Discarding malformed session id from cookie")
            return None
        return session_id

    async def _new_id(self) -> str:
        session_id = self.store.generate_id()
        while await self.store.exists(session_id):
            session_id = self.store.generate_id()
        return session_id

    def _send_cookie(self) -> bool:
        if not self.use_cookies():
            return False

        params = self.cookie_params()
        expires = time.time() + params.lifetime if params.lifetime > 0 else None
        return self.cookies.emit(self.name(), self._id, expires, params)

    def _refuse_while_active(self, operation: str) -> bool:
        if self.is_active():
            logger.warning(f"Session.{operation}() ignored: must be called before start()")
            return True
        return False

    # === Dictionary Interface ===

    def __getitem__(self, key: Key) -> Any:
        """Dictionary-style get"""
        return self.get(key)

    def __setitem__(self, key: Key, value: Any) -> None:
        """Dictionary-style set"""
        self.set(key, value)

    def __delitem__(self, key: Key) -> None:
        """Dictionary-style delete"""
        self.remove(key)

    def __contains__(self, key: Hashable) -> bool:
        """Dictionary-style contains"""
        return self.has(key)

    def __len__(self) -> int:
        return len(self._data) if self._data is not None else 0

    def __repr__(self) -> str:
        """String representation"""
        short_id = f"{self._id[:8]}..." if self._id else None
        return f"<Session name={self.name()} id={short_id} status={self.status().value} keys={len(self)}>"
