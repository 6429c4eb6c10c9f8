"""
Session Middleware
Starts and closes sessions automatically
"""
import asyncio
import random
from pathlib import Path
from typing import Optional, Set
from sanic import Request
from larasession.exceptions import SessionConfigurationException
from larasession.logging import LoggerConfig, getLogger
from larasession.middleware.base_middleware import Middleware
from larasession.session import (
    Session,
    SessionOptions,
    SessionStore,
    FileSessionStore,
    ArraySessionStore,
    SanicCookieChannel,
)
from larasession.support import Config

logger = getLogger(__name__)


class SessionMiddleware(Middleware):
    """
    Session management middleware

    Session name, lifetime, enabled flag and cookie attributes come from
    SessionOptions.from_config(). The keys below only pick the store and
    how cookies are carried.
    """

    @staticmethod
    def _get_config_defaults():
        from larasession import defaults
        return {
            'driver': ('session.DRIVER', defaults.DEFAULT_SESSION_DRIVER, 'SESSION_DRIVER'),
            'use_cookies': ('session.USE_COOKIES', True, 'SESSION_USE_COOKIES'),
            'sign_cookies': ('session.SIGN_COOKIES', False, 'SESSION_SIGN_COOKIES'),
            'secret_key': ('app.APP_SECRET_KEY', None, 'APP_SECRET_KEY'),
            'files': ('session.FILES', defaults.DEFAULT_SESSION_FILES, 'SESSION_FILES'),
            'lottery': ('session.SESSION_LOTTERY', defaults.DEFAULT_SESSION_LOTTERY),
        }

    CONFIG_MAPPING = _get_config_defaults.__func__()
    ENABLED_CONFIG_KEY = 'session.MIDDLEWARE_ENABLED'
    DEFAULT_ENABLED = True

    def __init__(self, options: Optional[SessionOptions] = None, driver='file', use_cookies=True,
                 sign_cookies=False, secret_key=None, files=None, lottery=None,
                 store: Optional[SessionStore] = None):
        """
        Initialize session middleware

        Args:
            options: Options every request's session is built from
                     (default: SessionOptions.from_config())
            driver: 'file' or 'array'
            use_cookies: Whether the session id travels in a cookie
            sign_cookies: Sign the id cookie with secret_key
            secret_key: Secret used for signing
            files: Directory for the file driver
            lottery: [chances, out_of] odds of running garbage collection
            store: Ready-made store (overrides driver)
        """
        from larasession.defaults import DEFAULT_SESSION_LOTTERY, DEFAULT_SESSION_FILES
        if sign_cookies and not secret_key:
            raise SessionConfigurationException(
                "APP_SECRET_KEY is required to sign session cookies.\n"
                "Set APP_SECRET_KEY in .env or disable session.SIGN_COOKIES"
            )

        self.options = options if options is not None else SessionOptions.from_config()
        self.config = {
            'driver': driver,
            'use_cookies': use_cookies,
            'files': files or DEFAULT_SESSION_FILES,
            'lottery': lottery or DEFAULT_SESSION_LOTTERY,
            'secret_key': secret_key if sign_cookies else None,
        }
        self.store = store if store is not None else self._create_store()
        self._gc_tasks: Set[asyncio.Task] = set()

    def _create_store(self) -> SessionStore:
        """Create session store based on driver"""
        driver = self.config['driver']

        if driver == 'file':
            return FileSessionStore(Path(self.config['files']))

        if driver != 'array':
            logger.warning(f"Unknown session driver '{driver}', using array store")

        return ArraySessionStore()

    def register(self, app) -> 'SessionMiddleware':
        """
        Set up session logging and attach to a Sanic app

        Args:
            app: Sanic application
        """
        if Config.get('logging.SETUP', True):
            self.setup_logging()
        return super().register(app)

    @staticmethod
    def setup_logging():
        """
        Route every larasession logger through a rotating, redacting file handler
        """
        return LoggerConfig.setup_logger(
            name='larasession',
            format_type=Config.get('logging.FORMAT', 'json'),
            filter_sensitive=Config.get('logging.FILTER_SENSITIVE', True),
            file_name=Config.get('logging.FILE_NAME', 'session'),
        )

    async def before_request(self, request: Request):
        """Start session before request"""
        cookies = SanicCookieChannel.from_request(
            request,
            use_cookies=self.config['use_cookies'],
            secret_key=self.config['secret_key'],
        )
        session = Session(self.store, cookies, self.options)

        if session.enabled() and not await session.start():
            logger.error("Session could not be started for this request")

        request.ctx.session = session
        request.ctx.session_cookies = cookies
        return None

    async def after_response(self, request: Request, response):
        """Close session and write cookies after response"""
        session = getattr(request.ctx, 'session', None)
        if session is None:
            return response

        if session.is_active():
            await session.close()

        request.ctx.session_cookies.flush(response)

        self._maybe_run_gc()
        return response

    def _maybe_run_gc(self):
        """Maybe run garbage collection based on lottery"""
        chances, out_of = self.config['lottery']
        if random.randint(1, out_of) <= chances:
            # Keep a reference until the task finishes
            task = asyncio.create_task(self._run_gc())
            self._gc_tasks.add(task)
            task.add_done_callback(self._gc_tasks.discard)

    async def _run_gc(self) -> int:
        deleted = await self.store.gc(self.options.lifetime)
        if deleted:
            logger.info(f"Session garbage collection removed {deleted} sessions")
        return deleted
