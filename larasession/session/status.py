"""
Session Status
Tri-state availability of a session
"""
from enum import Enum


class SessionStatus(Enum):
    """Session availability"""

    # Sessions are enabled and one exists
    ACTIVE = "active"

    # Sessions are enabled but none exists
    NONE = "none"

    # Sessions are disabled by configuration
    DISABLED = "disabled"
