"""Test configuration loading."""
from core.config import Config

CONFIG_YAML = """
browser:
  proxy:
    enabled: true
    server: " http://proxy.local:8080 "
    bypass: localhost
scrapers:
  url_data:
    fetch_timeout: "5"
    headless: "false"
    js_required_domains: example.dev
    content_selectors:
      - .story
"""


def _config(tmp_path, text=CONFIG_YAML) -> Config:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return Config(str(path))


def test_dot_path_getters(tmp_path):
    config = _config(tmp_path)

    assert config.get_int("scrapers.url_data.fetch_timeout", 10) == 5
    assert config.get_bool("scrapers.url_data.headless", True) is False
    assert config.get_float("scrapers.url_data.settle_delay", 2.0) == 2.0
    assert config.get("scrapers.url_data.missing.deeper", "x") == "x"


def test_get_list_accepts_single_string(tmp_path):
    config = _config(tmp_path)

    assert config.get_list("scrapers.url_data.js_required_domains", []) == ["example.dev"]
    assert config.get_list("scrapers.url_data.js_indicators", ["a"]) == ["a"]


def test_scraper_section(tmp_path):
    config = _config(tmp_path)

    assert config.get_scraper_config("url_data")["content_selectors"] == [".story"]
    assert config.get_scraper_config("unknown") == {}


def test_proxy_config_is_normalised(tmp_path):
    proxy = _config(tmp_path).get_browser_proxy_config()

    assert proxy["enabled"] is True
    assert proxy["server"] == "http://proxy.local:8080"
    assert proxy["bypass"] == ["localhost"]


def test_missing_file_uses_defaults(tmp_path):
    config = Config(str(tmp_path / "absent.yaml"))

    assert config.get_scraper_config("url_data") == {}
    assert config.get_backend_config()["port"] == 3001
    assert config.get_browser_proxy_config()["enabled"] is False


def test_project_config_is_found():
    config = Config()

    assert config.get_int("scrapers.url_data.fetch_timeout", 0) == 10
    assert "qiita.com" in config.get_list("scrapers.url_data.js_required_domains", [])


def test_malformed_number_falls_back_to_default(tmp_path):
    config = _config(tmp_path, "scrapers:\n  url_data:\n    fetch_timeout: soon\n    navigation_timeout: ''\n")

    assert config.get_float("scrapers.url_data.fetch_timeout", 10.0) == 10.0
    assert config.get_int("scrapers.url_data.navigation_timeout", 30000) == 30000


def test_cors_defaults_follow_backend_port(tmp_path):
    cors = _config(tmp_path, "servers:\n  backend:\n    port: 8080\n").get_cors_config()

    assert "http://localhost:3000" in cors["allowed_origins"]
    assert "http://127.0.0.1:8080" in cors["allowed_origins"]
    assert cors["allow_methods"] == ["*"]
