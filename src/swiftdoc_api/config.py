"""Runtime configuration for the SwiftDoc API server."""

from dataclasses import dataclass
from pathlib import Path
import os

from swiftdoc_api.knowledge.config import DEFAULT_CORPUS_PATH


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class ApiConfig:
    site_url: str
    api_url: str
    corpus_path: Path
    json_indent: int
    port: int


def get_api_config() -> ApiConfig:
    """Load API config from environment variables."""
    return ApiConfig(
        site_url=_env_str("SWIFTDOC_API_SITE_URL", "http://swiftdoc.org/"),
        api_url=_env_str("SWIFTDOC_API_API_URL", "http://api.swiftdoc.org"),
        corpus_path=Path(_env_str("SWIFTDOC_API_CORPUS_PATH", str(DEFAULT_CORPUS_PATH))),
        json_indent=max(0, _env_int("SWIFTDOC_API_JSON_INDENT", 4)),
        port=_env_int("PORT", 5000),
    )
