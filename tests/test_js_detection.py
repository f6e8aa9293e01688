"""Test the JavaScript-requirement heuristic."""
import pytest

from scrapers.js_detection import requires_javascript

PLAIN_HTML = "<html><body><article><p>Static content</p></article></body></html>"


@pytest.mark.parametrize("url", [
    "https://qiita.com/someone/items/abc",
    "https://zenn.dev/someone/articles/xyz",
    "https://note.com/someone/n/n123",
    "https://medium.com/@someone/post",
    "https://blog.medium.com/post",
])
def test_allow_listed_domains_always_require_js(url):
    assert requires_javascript(PLAIN_HTML, url) is True


@pytest.mark.parametrize("marker", [
    '<div id="__next"></div>',
    '<div id="root"></div>',
    '<div id="app"></div>',
    '<div data-reactroot=""></div>',
    '<script>window.__NUXT__={}</script>',
])
def test_framework_markers_require_js(marker):
    html = f"<html><body>{marker}</body></html>"
    assert requires_javascript(html, "https://example.com/post") is True


def test_plain_static_page_does_not_require_js():
    assert requires_javascript(PLAIN_HTML, "https://example.com/post") is False


def test_empty_html_on_unknown_host():
    assert requires_javascript("", "https://example.com/") is False


def test_custom_lists_replace_defaults():
    assert requires_javascript(PLAIN_HTML, "https://qiita.com/x", domains=[], indicators=[]) is False
    assert requires_javascript(PLAIN_HTML, "https://spa.example.org/", domains=["spa.example.org"]) is True
    assert requires_javascript('<main ng-app="x">', "https://example.com/", indicators=["ng-app"]) is True
