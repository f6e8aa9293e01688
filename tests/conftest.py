"""Shared fixtures for URL data extractor tests."""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


OG_ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head>
  <title>Fallback Title | Example News</title>
  <meta property="og:site_name" content="Example News">
  <meta property="og:title" content="Open Graph Title">
  <meta name="description" content="Plain description">
  <meta property="og:image" content="https://cdn.example.com/cover.png">
  <meta property="article:published_time" content="2024-01-15T10:00:00+09:00">
</head>
<body>
  <header>Site header</header>
  <nav>Home | About</nav>
  <article>
    <h1>Heading One</h1>
    <script>var tracking = true;</script>
    <p>First   paragraph
       of the article.</p>
    <aside>Related links</aside>
    <p>Second paragraph.</p>
  </article>
  <footer>Copyright</footer>
</body>
</html>
"""

BARE_HTML = "<html><head></head><body><p>Just some text.</p></body></html>"


@pytest.fixture
def og_article_html():
    return OG_ARTICLE_HTML


@pytest.fixture
def bare_html():
    return BARE_HTML
