"""
Cookie Channel Interface
Base class for everything that carries the session identifier cookie
"""
from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Optional
from larasession.session.cookie_params import CookieParameters
from larasession.support import Crypto
from larasession.logging import getLogger

logger = getLogger(__name__)


class QueuedCookie(NamedTuple):
    """A cookie waiting to be written to the response"""
    name: str
    value: str
    expires: Optional[float]
    params: CookieParameters


class CookieChannel(ABC):
    """
    Base cookie channel

    Holds the cookie-use switch and the cookie attributes, reads incoming
    cookies and queues outgoing ones until the response headers are written.
    When a secret key is given, values are signed with itsdangerous on the
    way out and verified on the way in.
    """

    def __init__(
        self,
        use_cookies: bool = True,
        params: Optional[CookieParameters] = None,
        secret_key: Optional[str] = None
    ):
        self.use_cookies = use_cookies
        self._params = params or CookieParameters()
        self._secret_key = secret_key
        self.queued: List[QueuedCookie] = []
        self.headers_sent = False

    # === Attributes ===

    def get_params(self) -> CookieParameters:
        """Get the current cookie attributes"""
        return self._params

    def set_params(self, params: CookieParameters) -> None:
        """Replace the cookie attributes"""
        self._params = params

    # === Incoming ===

    @abstractmethod
    def _read_raw(self, name: str) -> Optional[str]:
        """
        Read a raw cookie value from the incoming request

        Args:
            name: Cookie name

        Returns:
            Raw cookie value or None
        """
        pass

    def read(self, name: str) -> Optional[str]:
        """
        Read a cookie value, verifying its signature when signing is enabled

        Args:
            name: Cookie name

        Returns:
            Cookie value, or None if missing or tampered with
        """
        raw = self._read_raw(name)
        if not raw:
            return None

        if self._secret_key:
            value = Crypto.unsign_value(raw, self._secret_key)
            if value is None:
                logger.warning(f"Rejected cookie '{name}' with a bad signature")
            return value

        return raw

    # === Outgoing ===

    def emit(
        self,
        name: str,
        value: str,
        expires: Optional[float] = None,
        params: Optional[CookieParameters] = None
    ) -> bool:
        """
        Queue a cookie for the response

        Args:
            name: Cookie name
            value: Cookie value ('' when expiring a cookie)
            expires: UNIX timestamp, or None for a browser-session cookie
            params: Cookie attributes (default: current attributes)

        Returns:
            False if the response headers were already sent
        """
        if self.headers_sent:
            logger.warning(f"Cannot send cookie '{name}': headers already sent")
            return False

        if value and self._secret_key:
            value = Crypto.sign_value(value, self._secret_key)

        # A later cookie with the same name replaces the earlier one
        self.queued = [cookie for cookie in self.queued if cookie.name != name]
        self.queued.append(QueuedCookie(name, value, expires, params or self._params))
        return True

    @abstractmethod
    def flush(self, response: Any = None) -> Any:
        """
        Write queued cookies and mark the headers as sent

        Args:
            response: Response object to write to (if the channel needs one)

        Returns:
            The response
        """
        pass

    def mark_headers_sent(self) -> None:
        """Refuse further cookies for this response"""
        self.headers_sent = True
