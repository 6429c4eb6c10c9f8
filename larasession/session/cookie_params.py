"""
Cookie Parameters
Attributes used when transmitting the session identifier cookie
"""
from typing import Any, Dict, Optional
from larasession.exceptions import InvalidCookieParametersException

SAME_SITE_VALUES = ('Lax', 'Strict', 'None')


class CookieParameters:
    """
    Immutable value object describing the session cookie

    Attributes:
        lifetime: Lifetime of the cookie in seconds (0 = until the browser closes)
        path: Path on the domain where the cookie will work ('/' for all paths)
        domain: Cookie domain, prefix with a dot to cover subdomains
        secure: Only send the cookie over secure connections
        http_only: Hide the cookie from client-side scripts
        same_site: 'Lax', 'Strict', 'None' or None to omit the attribute
    """

    __slots__ = ('lifetime', 'path', 'domain', 'secure', 'http_only', 'same_site')

    def __init__(
        self,
        lifetime: int = None,
        path: str = None,
        domain: str = None,
        secure: bool = None,
        http_only: bool = None,
        same_site: Optional[str] = 'default'
    ):
        from larasession.defaults import (
            DEFAULT_COOKIE_LIFETIME, DEFAULT_COOKIE_PATH, DEFAULT_COOKIE_DOMAIN,
            DEFAULT_COOKIE_SECURE, DEFAULT_COOKIE_HTTP_ONLY, DEFAULT_COOKIE_SAME_SITE
        )
        if lifetime is None:
            lifetime = DEFAULT_COOKIE_LIFETIME
        if path is None:
            path = DEFAULT_COOKIE_PATH
        if domain is None:
            domain = DEFAULT_COOKIE_DOMAIN
        if secure is None:
            secure = DEFAULT_COOKIE_SECURE
        if http_only is None:
            http_only = DEFAULT_COOKIE_HTTP_ONLY
        if same_site == 'default':
            same_site = DEFAULT_COOKIE_SAME_SITE

        if isinstance(lifetime, bool) or not isinstance(lifetime, int):
            raise InvalidCookieParametersException(
                f"Cookie lifetime must be an integer, got {lifetime!r}"
            )
        if lifetime < 0:
            raise InvalidCookieParametersException(
                f"Cookie lifetime must be >= 0, got {lifetime}"
            )
        if same_site is not None:
            same_site = same_site.capitalize()
            if same_site not in SAME_SITE_VALUES:
                raise InvalidCookieParametersException(
                    f"Cookie same_site must be one of {', '.join(SAME_SITE_VALUES)}"
                )

        object.__setattr__(self, 'lifetime', lifetime)
        object.__setattr__(self, 'path', path)
        object.__setattr__(self, 'domain', domain)
        object.__setattr__(self, 'secure', bool(secure))
        object.__setattr__(self, 'http_only', bool(http_only))
        object.__setattr__(self, 'same_site', same_site)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CookieParameters is immutable, use replace()")

    def replace(self, **changes) -> 'CookieParameters':
        """
        Return a copy with some attributes changed

        Example:
            secure_params = params.replace(secure=True, same_site='Strict')
        """
        values = {name: getattr(self, name) for name in self.__slots__}
        values.update(changes)
        return CookieParameters(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Return the attributes keyed the way cookie headers name them"""
        return {
            'lifetime': self.lifetime,
            'path': self.path,
            'domain': self.domain,
            'secure': self.secure,
            'httponly': self.http_only,
            'samesite': self.same_site,
        }

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CookieParameters):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self) -> int:
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __repr__(self) -> str:
        attrs = ', '.join(f'{name}={getattr(self, name)!r}' for name in self.__slots__)
        return f'CookieParameters({attrs})'
