"""Heuristic for pages that only render their content client-side."""
from typing import Iterable, Optional
from urllib.parse import urlparse

# Sites known to serve an empty shell to plain HTTP clients
DEFAULT_JS_REQUIRED_DOMAINS = (
    'qiita.com',
    'zenn.dev',
    'note.com',
    'medium.com',
)

# Framework mount points left in server HTML
DEFAULT_JS_INDICATORS = (
    'id="__next"',     # Next.js
    'id="root"',       # React
    'id="app"',        # Vue
    'data-reactroot',  # React
    '__NUXT__',        # Nuxt.js
)


def requires_javascript(
    html: str,
    url: str,
    domains: Optional[Iterable[str]] = None,
    indicators: Optional[Iterable[str]] = None,
) -> bool:
    """
    Decide whether a page needs a real browser to show its content.

    Args:
        html: Body returned by the static fetch
        url: Page URL
        domains: Hostname fragments that always need rendering
        indicators: Markers whose presence in the HTML means client-side mounting

    Returns:
        True if the hostname is allow-listed or any indicator occurs in the HTML
    """
    domains = DEFAULT_JS_REQUIRED_DOMAINS if domains is None else tuple(domains)
    indicators = DEFAULT_JS_INDICATORS if indicators is None else tuple(indicators)

    hostname = urlparse(url).hostname or ''
    if any(domain in hostname for domain in domains):
        return True

    html = html or ''
    return any(indicator in html for indicator in indicators)
