"""
Custom Exception Classes
Session configuration errors with HTTP status codes
"""
from typing import Optional


class SessionException(Exception):
    """Base exception for all session exceptions"""
    status_code = 500
    message = "A session error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class InvalidCookieParametersException(SessionException):
    """
    Invalid cookie parameters

    Raised when session cookie attributes are out of range

    Example:
        raise InvalidCookieParametersException("Cookie lifetime must be >= 0")
    """
    message = "Invalid session cookie parameters"


class InvalidSessionIdentifierException(SessionException):
    """
    Invalid session id or name

    Raised when a session id or name contains disallowed characters

    Example:
        raise InvalidSessionIdentifierException("Session id contains invalid characters")
    """
    status_code = 400
    message = "Invalid session identifier"


class SessionConfigurationException(SessionException):
    """
    Session misconfiguration

    Raised when the session middleware cannot be built from configuration

    Example:
        raise SessionConfigurationException("APP_SECRET_KEY is required for signed cookies")
    """
    message = "Session configuration error"
