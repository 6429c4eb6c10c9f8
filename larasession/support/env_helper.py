"""
EnvHelper - Read .env files programmatically
Laravel-style environment variable access
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        lifetime = EnvHelper.get_int('SESSION_LIFETIME', 7200)
        secure = EnvHelper.get_bool('SESSION_COOKIE_SECURE', False)

        if EnvHelper.has('APP_SECRET_KEY'):
            ...
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path: Union[str, Path, None] = None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
        """
        if env_path is None:
            env_path = Path.cwd() / '.env'

        cls._env_path = Path(env_path)
        cls._loaded = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to initialized path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True
            if not cls._env_path.exists():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            driver = EnvHelper.get('SESSION_DRIVER', 'file')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """Get boolean environment variable"""
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        """Get integer environment variable"""
        value = cls.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            return default

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable exists"""
        if not cls._loaded:
            cls.load()

        return key in os.environ
