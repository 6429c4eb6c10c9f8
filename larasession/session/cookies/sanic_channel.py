"""
Sanic Cookie Channel
Reads the identifier cookie from a Sanic request and writes it to the response
"""
from datetime import datetime, timezone
import time
from typing import Optional
from sanic import Request
from sanic.response import HTTPResponse
from larasession.session.cookies.channel import CookieChannel
from larasession.session.cookie_params import CookieParameters


class SanicCookieChannel(CookieChannel):
    """Cookie channel bound to one Sanic request/response cycle"""

    def __init__(
        self,
        request: Request,
        use_cookies: bool = True,
        params: Optional[CookieParameters] = None,
        secret_key: Optional[str] = None
    ):
        super().__init__(use_cookies=use_cookies, params=params, secret_key=secret_key)
        self.request = request

    @classmethod
    def from_request(cls, request: Request, **kwargs) -> 'SanicCookieChannel':
        """Create a channel for the given request"""
        return cls(request, **kwargs)

    def _read_raw(self, name: str) -> Optional[str]:
        return self.request.cookies.get(name)

    def flush(self, response: HTTPResponse = None) -> HTTPResponse:
        """
        Write queued cookies to the response

        Args:
            response: Sanic response

        Returns:
            The same response
        """
        if response is None:
            return response

        now = time.time()
        for cookie in self.queued:
            params = cookie.params
            max_age = None
            expires = None

            if cookie.expires is not None:
                expires = datetime.fromtimestamp(cookie.expires, tz=timezone.utc)
                max_age = max(0, int(cookie.expires - now))

            response.add_cookie(
                cookie.name,
                cookie.value,
                path=params.path,
                domain=params.domain or None,
                secure=params.secure,
                httponly=params.http_only,
                samesite=params.same_site,
                max_age=max_age,
                expires=expires,
            )

        self.queued = []
        self.mark_headers_sent()
        return response
