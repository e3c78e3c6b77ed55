import os
from contextlib import contextmanager
from typing import Iterator

from src.api.config import ApiConfig


@contextmanager
def _temporary_env(values: dict[str, str]) -> Iterator[None]:
    previous: dict[str, str | None] = {key: os.environ.get(key) for key in values}
    try:
        for key, value in values.items():
            os.environ[key] = value
        yield
    finally:
        for key, original in previous.items():
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original


def test_settings_env_parsing_and_url_hydration() -> None:
    env_values = {
        "TRIAGE_MCP_TRANSPORT": "streamable_http",
        "TRIAGE_MCP_HOST": "10.0.0.10",
        "TRIAGE_MCP_PORT": "9000",
        "TRIAGE_MCP_PATH": "mcp",
        "TRIAGE_CATALOG_PATH": "   ",
        "TRIAGE_DEFAULT_DEVICE": " MacOS ",
        "TRIAGE_MAX_RESULTS": "5",
        "TRIAGE_CATALOG_RELOAD_ENABLED": "true",
        "LOG_LEVEL": "debug",
    }
    with _temporary_env(env_values):
        config = ApiConfig(_env_file=None)

    assert config.mcp_url == "http://10.0.0.10:9000/mcp"
    assert config.catalog_path is None
    assert config.default_device == "macos"
    assert config.triage_max_results == 5
    assert config.catalog_reload_enabled is True
    assert config.log_level == "DEBUG"


def test_stdio_transport_leaves_url_unset() -> None:
    with _temporary_env({"TRIAGE_MCP_TRANSPORT": "stdio", "TRIAGE_DEFAULT_DEVICE": ""}):
        config = ApiConfig(_env_file=None)
    assert config.mcp_url is None
    assert config.default_device is None


def test_from_env_compatibility_method() -> None:
    config = ApiConfig.from_env()
    assert isinstance(config, ApiConfig)
