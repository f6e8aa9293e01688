"""Settings loaded from config.yaml, read through dot-separated key paths."""
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from loguru import logger

ROOT_MARKERS = ('config.yaml', 'pyproject.toml')
TRUTHY = ('1', 'true', 'yes', 'on')


def find_project_root(start_path: Optional[Path] = None) -> Path:
    """Nearest ancestor holding config.yaml, or pyproject.toml next to the scrapers package."""
    here = Path(start_path or __file__).resolve()
    if not here.is_dir():
        here = here.parent

    for candidate in (here, *here.parents):
        if (candidate / ROOT_MARKERS[0]).exists():
            return candidate
        if (candidate / ROOT_MARKERS[1]).exists() and (candidate / 'scrapers').is_dir():
            return candidate

    return here


def _as_str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


class Config:
    """
    Parsed config.yaml.

    Typed getters coerce quoted YAML scalars (``"5"``, ``"false"``) and fall
    back to the supplied default when a value is absent or malformed.
    """

    def __init__(self, config_path: str = "config.yaml"):
        path = Path(config_path)
        if not path.is_absolute():
            path = find_project_root() / path

        self.path = path
        self.config: Dict[str, Any] = {}
        if path.exists():
            with path.open('r', encoding='utf-8') as f:
                self.config = yaml.safe_load(f) or {}
        else:
            logger.warning(f"[Config] {path} not found, running on built-in defaults")

    def get(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Look up a nested value, e.g. ``get('scrapers.url_data.fetch_timeout')``.

        Returns ``default`` when any segment is missing or not a mapping.
        """
        node: Any = self.config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node

    def _coerce(self, key_path: str, default, cast):
        raw = self.get(key_path)
        if raw is None:
            return cast(default)
        try:
            return cast(raw)
        except (TypeError, ValueError):
            logger.warning(f"[Config] {key_path}={raw!r} is not a valid {cast.__name__}, using {default!r}")
            return cast(default)

    def get_int(self, key_path: str, default: int) -> int:
        return self._coerce(key_path, default, int)

    def get_float(self, key_path: str, default: float) -> float:
        return self._coerce(key_path, default, float)

    def get_bool(self, key_path: str, default: bool) -> bool:
        raw = self.get(key_path)
        if raw is None:
            return bool(default)
        if isinstance(raw, str):
            return raw.strip().lower() in TRUTHY
        return bool(raw)

    def get_list(self, key_path: str, default: List[str]) -> List[str]:
        """String lists; a bare string counts as a single entry."""
        raw = self.get(key_path)
        if raw is None or not isinstance(raw, (str, list, tuple)):
            return list(default)
        return _as_str_list(raw)

    def get_scraper_config(self, scraper_type: str) -> dict:
        """Raw ``scrapers.<scraper_type>`` section, empty when absent."""
        section = self.get(f'scrapers.{scraper_type}', {})
        return section if isinstance(section, dict) else {}

    def get_backend_config(self) -> dict:
        return {
            'host': str(self.get('servers.backend.host', '0.0.0.0')),
            'port': self.get_int('servers.backend.port', 3001),
            'reload': self.get_bool('servers.backend.reload', False),
        }

    def get_cors_config(self) -> dict:
        """CORS settings; origins default to local frontends and the API itself."""
        port = self.get_int('servers.backend.port', 3001)
        local_origins = [
            f'http://{host}:{p}'
            for p in (3000, port)
            for host in ('localhost', '127.0.0.1')
        ]
        return {
            'allowed_origins': self.get_list('servers.cors.allowed_origins', local_origins),
            'allow_credentials': self.get_bool('servers.cors.allow_credentials', True),
            'allow_methods': self.get_list('servers.cors.allow_methods', ['*']),
            'allow_headers': self.get_list('servers.cors.allow_headers', ['*']),
        }

    def get_browser_proxy_config(self) -> dict:
        """
        Proxy settings for the headless browser.

        ``enabled`` is only true when a server address is also configured.
        """
        server = str(self.get('browser.proxy.server', '')).strip()
        return {
            'enabled': self.get_bool('browser.proxy.enabled', False) and bool(server),
            'server': server,
            'username': str(self.get('browser.proxy.username', '')).strip(),
            'password': str(self.get('browser.proxy.password', '')).strip(),
            'bypass': _as_str_list(self.get('browser.proxy.bypass', [])),
        }
