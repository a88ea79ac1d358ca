"""Tests for environment-driven configuration."""

from pathlib import Path

from swiftdoc_api.config import get_api_config
from swiftdoc_api.knowledge.config import DEFAULT_CORPUS_PATH

_VARS = (
    "SWIFTDOC_API_SITE_URL",
    "SWIFTDOC_API_API_URL",
    "SWIFTDOC_API_CORPUS_PATH",
    "SWIFTDOC_API_JSON_INDENT",
    "PORT",
)


def test_defaults(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)

    config = get_api_config()

    assert config.site_url == "http://swiftdoc.org/"
    assert config.api_url == "http://api.swiftdoc.org"
    assert config.corpus_path == DEFAULT_CORPUS_PATH
    assert config.json_indent == 4
    assert config.port == 5000


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SWIFTDOC_API_SITE_URL", "https://docs.example/")
    monkeypatch.setenv("SWIFTDOC_API_CORPUS_PATH", str(tmp_path / "corpus.json"))
    monkeypatch.setenv("SWIFTDOC_API_JSON_INDENT", "2")
    monkeypatch.setenv("PORT", "8080")

    config = get_api_config()

    assert config.site_url == "https://docs.example/"
    assert config.corpus_path == Path(tmp_path / "corpus.json")
    assert config.json_indent == 2
    assert config.port == 8080


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("SWIFTDOC_API_JSON_INDENT", "-3")

    config = get_api_config()

    assert config.port == 5000
    assert config.json_indent == 0
