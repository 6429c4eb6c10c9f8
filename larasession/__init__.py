"""
Larasession
Laravel-style session facade for Sanic applications
"""
from larasession.session import (
    Session,
    SessionStatus,
    CookieParameters,
    SessionOptions,
    SessionStore,
    FileSessionStore,
    ArraySessionStore,
    CookieChannel,
    ArrayCookieChannel,
    SanicCookieChannel,
)
from larasession.middleware import SessionMiddleware

__version__ = '1.0.0'

__all__ = [
    'Session',
    'SessionStatus',
    'CookieParameters',
    'SessionOptions',
    'SessionStore',
    'FileSessionStore',
    'ArraySessionStore',
    'CookieChannel',
    'ArrayCookieChannel',
    'SanicCookieChannel',
    'SessionMiddleware',
]
