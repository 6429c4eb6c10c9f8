"""
Session Options
Configuration collected before a session is started
"""
import re
from typing import Optional
from larasession.exceptions import InvalidSessionIdentifierException, SessionConfigurationException
from larasession.session.cookie_params import CookieParameters

SESSION_ID_PATTERN = re.compile(r'^[A-Za-z0-9,_-]{1,128}$')
SESSION_NAME_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')


def is_valid_session_id(session_id: str) -> bool:
    """Check a session id against the allowed alphabet"""
    return isinstance(session_id, str) and bool(SESSION_ID_PATTERN.match(session_id))


def validate_session_id(session_id: str) -> str:
    """Return the id unchanged or raise InvalidSessionIdentifierException"""
    if not is_valid_session_id(session_id):
        raise InvalidSessionIdentifierException(
            "Session id may only contain [A-Za-z0-9,_-] and be 1-128 characters long"
        )
    return session_id


def validate_session_name(name: str) -> str:
    """Return the name unchanged or raise InvalidSessionIdentifierException"""
    if not isinstance(name, str) or not SESSION_NAME_PATTERN.match(name) or name.isdigit():
        raise InvalidSessionIdentifierException(
            "Session name may only contain [A-Za-z0-9_-] and cannot be numeric"
        )
    return name


def validate_lifetime(lifetime: int) -> int:
    """Return the store-side lifetime unchanged or raise SessionConfigurationException"""
    if isinstance(lifetime, bool) or not isinstance(lifetime, int) or lifetime < 0:
        raise SessionConfigurationException(f"Session lifetime must be an integer >= 0, got {lifetime!r}")
    return lifetime


class SessionOptions:
    """
    Two-phase session configuration

    Everything that must be decided before start() lives here: the session
    id, the cookie name, the store-side lifetime and the cookie attributes.
    Each Session works on its own copy, so one instance can configure many
    facades without them affecting each other.

    Example:
        options = SessionOptions() \\
            .with_name('app_session') \\
            .with_cookie_params(CookieParameters(lifetime=3600, secure=True))
        session = Session(store, cookies, options)
    """

    def __init__(
        self,
        id: Optional[str] = None,
        name: str = None,
        lifetime: int = None,
        enabled: bool = True,
        cookie_params: Optional[CookieParameters] = None
    ):
        from larasession.defaults import DEFAULT_SESSION_COOKIE_NAME, DEFAULT_SESSION_LIFETIME
        self.id = validate_session_id(id) if id is not None else None
        self.name = validate_session_name(name if name is not None else DEFAULT_SESSION_COOKIE_NAME)
        self.lifetime = validate_lifetime(lifetime if lifetime is not None else DEFAULT_SESSION_LIFETIME)
        self.enabled = enabled
        self.cookie_params = cookie_params

    @classmethod
    def from_config(cls) -> 'SessionOptions':
        """
        Build options from Config ('session.*' keys), falling back to .env

        Returns:
            SessionOptions instance
        """
        from larasession.support import Config, EnvHelper
        from larasession import defaults

        cookie_params = CookieParameters(
            lifetime=int(Config.get(
                'session.COOKIE_LIFETIME',
                EnvHelper.get_int('SESSION_COOKIE_LIFETIME', defaults.DEFAULT_COOKIE_LIFETIME)
            )),
            path=Config.get(
                'session.COOKIE_PATH',
                EnvHelper.get('SESSION_COOKIE_PATH', defaults.DEFAULT_COOKIE_PATH)
            ),
            domain=Config.get(
                'session.COOKIE_DOMAIN',
                EnvHelper.get('SESSION_COOKIE_DOMAIN', defaults.DEFAULT_COOKIE_DOMAIN)
            ),
            secure=Config.get(
                'session.COOKIE_SECURE',
                EnvHelper.get_bool('SESSION_COOKIE_SECURE', defaults.DEFAULT_COOKIE_SECURE)
            ),
            http_only=Config.get(
                'session.COOKIE_HTTP_ONLY',
                EnvHelper.get_bool('SESSION_COOKIE_HTTP_ONLY', defaults.DEFAULT_COOKIE_HTTP_ONLY)
            ),
            same_site=Config.get(
                'session.COOKIE_SAME_SITE',
                EnvHelper.get('SESSION_COOKIE_SAME_SITE', defaults.DEFAULT_COOKIE_SAME_SITE)
            ),
        )

        return cls(
            name=Config.get(
                'session.COOKIE_NAME',
                EnvHelper.get('SESSION_COOKIE_NAME', defaults.DEFAULT_SESSION_COOKIE_NAME)
            ),
            lifetime=int(Config.get(
                'session.LIFETIME',
                EnvHelper.get_int('SESSION_LIFETIME', defaults.DEFAULT_SESSION_LIFETIME)
            )),
            enabled=Config.get('session.ENABLED', EnvHelper.get_bool('SESSION_ENABLED', True)),
            cookie_params=cookie_params,
        )

    def copy(self) -> 'SessionOptions':
        """Return an independent copy (CookieParameters are immutable and shared)"""
        return SessionOptions(
            id=self.id,
            name=self.name,
            lifetime=self.lifetime,
            enabled=self.enabled,
            cookie_params=self.cookie_params,
        )

    # === Builder ===

    def with_id(self, session_id: str) -> 'SessionOptions':
        """Use an explicit session id instead of the cookie (chainable)"""
        self.id = validate_session_id(session_id)
        return self

    def with_name(self, name: str) -> 'SessionOptions':
        """Set the cookie/parameter name (chainable)"""
        self.name = validate_session_name(name)
        return self

    def with_lifetime(self, lifetime: int) -> 'SessionOptions':
        """Set the store-side lifetime in seconds (chainable)"""
        self.lifetime = validate_lifetime(lifetime)
        return self

    def with_cookie_params(self, params: CookieParameters) -> 'SessionOptions':
        """Set the cookie attributes (chainable)"""
        self.cookie_params = params
        return self

    def disabled(self) -> 'SessionOptions':
        """Disable sessions for every facade built from these options (chainable)"""
        self.enabled = False
        return self

    def __repr__(self) -> str:
        return (
            f"<SessionOptions name={self.name!r} lifetime={self.lifetime} "
            f"enabled={self.enabled} has_id={self.id is not None}>"
        )
