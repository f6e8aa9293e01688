"""Base scraper class owning the headless browser lifecycle."""
from abc import ABC, abstractmethod
from typing import List, Optional
from loguru import logger
from playwright.sync_api import sync_playwright, BrowserContext
from core.config import Config

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)

DEFAULT_LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-dev-shm-usage',
    '--disable-gpu',
]


class BaseScraper(ABC):
    """Abstract base class for scrapers that may need a real browser.

    Chromium is launched on first use and torn down by ``close()``; using the
    scraper as a context manager guarantees the teardown.
    """

    scraper_type: Optional[str] = None

    def __init__(self, config: Optional[Config] = None, **kwargs):
        """
        Args:
            config: Configuration object
            **kwargs: Overrides for headless, timeout, user_agent and launch_args
        """
        self.config = config or Config()
        self.scraper_type = self.scraper_type or self.__class__.__name__.lower().replace('scraper', '')
        self.scraper_config = self.config.get_scraper_config(self.scraper_type)

        self.headless = kwargs.get('headless', self.config.get_bool(self._key('headless'), True))
        self.timeout = kwargs.get('timeout', self.config.get_int(self._key('navigation_timeout'), 30000))
        self.user_agent = kwargs.get('user_agent') or self.scraper_config.get('user_agent') or DEFAULT_USER_AGENT
        self.launch_args: List[str] = kwargs.get('launch_args') or self.config.get_list(
            self._key('launch_args'), DEFAULT_LAUNCH_ARGS
        )
        self.proxy_config = self.config.get_browser_proxy_config()

        self._playwright = None
        self._browser = None
        self._context = None

    def _key(self, name: str) -> str:
        """Dot path of a setting inside this scraper's config section."""
        return f'scrapers.{self.scraper_type}.{name}'

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _proxy_settings(self) -> Optional[dict]:
        """Playwright proxy dict, or None when no proxy is enabled."""
        proxy = self.proxy_config
        if not proxy.get('enabled'):
            if proxy.get('server'):
                logger.warning(f"[{self.scraper_type}] Proxy server configured but browser.proxy.enabled is off")
            return None

        settings = {'server': proxy['server']}
        for field in ('username', 'password'):
            if proxy.get(field):
                settings[field] = proxy[field]
        if proxy.get('bypass'):
            settings['bypass'] = ",".join(proxy['bypass'])
        logger.info(f"[{self.scraper_type}] Routing browser through proxy {proxy['server']}")
        return settings

    def _init_playwright(self):
        """Start the Playwright driver and a new Chromium process."""
        if self._browser:
            return

        logger.info(f"[{self.scraper_type}] Launching Chromium (headless={self.headless})")
        try:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(
                headless=self.headless,
                args=self.launch_args,
                proxy=self._proxy_settings()
            )
        except Exception as e:
            logger.error(f"[{self.scraper_type}] Browser launch failed: {e}")
            raise

    def _create_context(self) -> BrowserContext:
        """Open an isolated browser context that sends the scraper's user agent."""
        if not self._browser:
            self._init_playwright()

        self._context = self._browser.new_context(
            viewport={'width': 1280, 'height': 720},
            user_agent=self.user_agent
        )
        return self._context

    @abstractmethod
    def extract(self, url: str):
        """Extract data from ``url``."""
        raise NotImplementedError

    def close(self):
        """Release context, browser and driver; each step runs even if an earlier one fails."""
        steps = (
            ('_context', 'close', 'context'),
            ('_browser', 'close', 'browser'),
            ('_playwright', 'stop', 'Playwright driver'),
        )
        for attr, method, label in steps:
            handle = getattr(self, attr)
            if handle is None:
                continue
            try:
                getattr(handle, method)()
            except Exception as e:
                logger.warning(f"[{self.scraper_type}] Failed to release {label}: {e}")
            finally:
                setattr(self, attr, None)
        logger.debug(f"[{self.scraper_type}] Browser resources released")
