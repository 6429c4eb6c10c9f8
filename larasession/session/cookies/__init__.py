"""
Cookie Channels
"""
from larasession.session.cookies.channel import CookieChannel, QueuedCookie
from larasession.session.cookies.array_channel import ArrayCookieChannel
from larasession.session.cookies.sanic_channel import SanicCookieChannel

__all__ = [
    'CookieChannel',
    'QueuedCookie',
    'ArrayCookieChannel',
    'SanicCookieChannel',
]
