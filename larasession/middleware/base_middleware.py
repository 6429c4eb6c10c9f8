"""
Base Middleware Class
Abstract base class for all middlewares
"""
from abc import ABC, abstractmethod
from sanic import Request
from typing import Optional, Dict, Any


class Middleware(ABC):
    """
    Base middleware class

    Middlewares can:
    - Inspect/modify requests before they reach routes
    - Inspect/modify responses before they're sent
    - Short-circuit requests (return response early)

    Configuration:
    Subclasses can set these class variables for automatic configuration:
    - ENABLED_CONFIG_KEY: Config key to check if middleware is enabled
    - CONFIG_MAPPING: Dict mapping constructor params to (config key, default)
      or (config key, default, .env key)
    - DEFAULT_ENABLED: Default enabled state if config key not found
    - STATIC_PARAMS: Static parameters that don't come from config
    """

    ENABLED_CONFIG_KEY: str = None
    CONFIG_MAPPING: Dict[str, tuple] = {}
    DEFAULT_ENABLED: bool = True
    STATIC_PARAMS: Dict[str, Any] = {}

    @classmethod
    def _is_enabled(cls) -> bool:
        """
        Hook for custom enabled check logic

        By default, checks ENABLED_CONFIG_KEY from config.
        """
        from larasession.support import Config

        if cls.ENABLED_CONFIG_KEY:
            return Config.get(cls.ENABLED_CONFIG_KEY, cls.DEFAULT_ENABLED)

        return cls.DEFAULT_ENABLED

    @classmethod
    def _register_middleware(cls) -> Optional['Middleware']:
        """
        Factory method to create middleware instance from configuration

        1. Check if it should be enabled (via _is_enabled hook)
        2. Load constructor parameters from CONFIG_MAPPING
        3. Return configured instance or None if disabled
        """
        if not cls._is_enabled():
            return None

        config_params = {
            param_name: cls._resolve_config(*mapping)
            for param_name, mapping in cls.CONFIG_MAPPING.items()
        }

        all_params = {**config_params, **cls.STATIC_PARAMS}
        return cls(**all_params)

    @staticmethod
    def _resolve_config(config_key: str, default: Any, env_key: Optional[str] = None) -> Any:
        """
        Read a config value, falling back to an .env variable, then the default

        The .env value is cast to the type of the default (bool, int or str).
        """
        from larasession.support import Config, EnvHelper

        if env_key:
            if isinstance(default, bool):
                default = EnvHelper.get_bool(env_key, default)
            elif isinstance(default, int):
                default = EnvHelper.get_int(env_key, default)
            else:
                default = EnvHelper.get(env_key, default)

        return Config.get(config_key, default)

    @abstractmethod
    async def before_request(self, request: Request):
        """
        Called before the request reaches the route handler

        Returns:
            None: Continue to next middleware/route
            HTTPResponse: Short-circuit and return response immediately
        """
        pass

    async def after_response(self, request: Request, response):
        """
        Called after the route handler, before sending response

        Returns:
            response: Modified or original response
        """
        return response

    def register(self, app) -> 'Middleware':
        """
        Attach this middleware to a Sanic app

        Args:
            app: Sanic application
        """
        app.on_request(self.before_request)
        app.on_response(self.after_response)
        return self
