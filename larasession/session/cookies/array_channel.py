"""
Array Cookie Channel
Keeps cookies in memory (for testing and non-HTTP use)
"""
from typing import Any, Dict, List, Optional
from larasession.session.cookies.channel import CookieChannel, QueuedCookie
from larasession.session.cookie_params import CookieParameters


class ArrayCookieChannel(CookieChannel):
    """In-memory cookie channel"""

    def __init__(
        self,
        incoming: Optional[Dict[str, str]] = None,
        use_cookies: bool = True,
        params: Optional[CookieParameters] = None,
        secret_key: Optional[str] = None
    ):
        """
        Initialize array cookie channel

        Args:
            incoming: Cookies "sent by the client"
            use_cookies: Whether the session uses cookies at all
            params: Cookie attributes
            secret_key: Secret for signed cookie values
        """
        super().__init__(use_cookies=use_cookies, params=params, secret_key=secret_key)
        self.incoming: Dict[str, str] = dict(incoming or {})
        self.sent: List[QueuedCookie] = []

    def _read_raw(self, name: str) -> Optional[str]:
        return self.incoming.get(name)

    def flush(self, response: Any = None) -> Any:
        """Move queued cookies to `sent`"""
        self.sent.extend(self.queued)
        self.queued = []
        self.mark_headers_sent()
        return response

    def last(self, name: str) -> Optional[QueuedCookie]:
        """Most recent queued or sent cookie with the given name"""
        for cookie in reversed(self.sent + self.queued):
            if cookie.name == name:
                return cookie
        return None
