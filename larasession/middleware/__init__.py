"""
Middleware Package
"""
from larasession.middleware.base_middleware import Middleware
from larasession.middleware.session_middleware import SessionMiddleware

__all__ = [
    'Middleware',
    'SessionMiddleware',
]
