"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Optional, Dict


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        lifetime = Config.get('session.lifetime')
        cookie = Config.get('session.COOKIE_NAME', 'framework_session')

        # Set runtime value
        Config.set('session.driver', 'array')

        # Check existence
        if Config.has('app.APP_SECRET_KEY'):
            ...

    Config files should be in config/ directory:
        config/
        ├── app.py
        └── session.py
    """

    _lock = threading.Lock()
    _package: str = 'config'
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'session.lifetime')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        # Runtime overrides win over config files
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)
        if value is None:
            return default

        for part in path:
            value = cls._lookup(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _lookup(container: Any, part: str) -> Any:
        """Case-insensitive attribute or key lookup"""
        if isinstance(container, dict):
            for dict_key in container.keys():
                if str(dict_key).lower() == part:
                    return container[dict_key]
            return _MISSING

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return getattr(container, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from the config package

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'{cls._package}.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                cls._loaded[file_name] = None

    @classmethod
    def use_package(cls, package: str):
        """
        Load config files from another package (default: 'config')

        Args:
            package: Dotted package name holding config modules
        """
        with cls._lock:
            cls._package = package
            cls._loaded.clear()

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('session.lifetime', 60)
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """Get the whole config module for a file, or None"""
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()


class _Missing:
    def __repr__(self):
        return '<missing>'


_MISSING = _Missing()
