"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in .env or other config files
"""

# ============================================================================
# SESSION DEFAULTS
# ============================================================================

DEFAULT_SESSION_LIFETIME = 7200  # seconds (2 hours)
DEFAULT_SESSION_COOKIE_NAME = 'framework_session'
DEFAULT_SESSION_ID_LENGTH = 40
DEFAULT_SESSION_LOTTERY = [2, 100]  # [chances, out_of] for garbage collection
DEFAULT_SESSION_DRIVER = 'file'
DEFAULT_SESSION_FILES = 'storage/sessions'

# ============================================================================
# SESSION COOKIE DEFAULTS
# ============================================================================

DEFAULT_COOKIE_LIFETIME = 0  # seconds (0 = until the browser closes)
DEFAULT_COOKIE_PATH = '/'
DEFAULT_COOKIE_DOMAIN = ''
DEFAULT_COOKIE_SECURE = False
DEFAULT_COOKIE_HTTP_ONLY = False
DEFAULT_COOKIE_SAME_SITE = 'Lax'

# Offset used to expire cookies on the client
COOKIE_EXPIRED_OFFSET = 12960000  # seconds (150 days)

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_PATH = 'storage/logs'
