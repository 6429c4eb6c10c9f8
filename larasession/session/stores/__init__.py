"""
Session Stores
"""
from larasession.session.stores.file_store import FileSessionStore
from larasession.session.stores.array_store import ArraySessionStore

__all__ = [
    'FileSessionStore',
    'ArraySessionStore',
]
