"""
Session Management Package
Object-oriented session facade for Sanic
"""
from larasession.session.session import Session
from larasession.session.status import SessionStatus
from larasession.session.cookie_params import CookieParameters
from larasession.session.options import SessionOptions
from larasession.session.store import SessionStore
from larasession.session.stores import FileSessionStore, ArraySessionStore
from larasession.session.cookies import (
    CookieChannel,
    ArrayCookieChannel,
    SanicCookieChannel,
)

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
]
