from __future__ import annotations

import pytest

from pinpoint_mcp.config import ConfigError, PinpointConfig


def test_from_env_reads_credentials() -> None:
    config = PinpointConfig.from_env(
        {"PINPOINT_API_KEY": "key", "PINPOINT_SUBDOMAIN": "acme", "PINPOINT_LOG_LEVEL": "debug"}
    )
    assert config.api_key == "key"
    assert config.subdomain == "acme"
    assert config.log_level == "DEBUG"
    assert config.base_url == "https://acme.pinpointhq.com/api/v1"


def test_from_env_defaults_log_level() -> None:
    config = PinpointConfig.from_env({"PINPOINT_API_KEY": "key", "PINPOINT_SUBDOMAIN": "acme"})
    assert config.log_level == "INFO"


@pytest.mark.parametrize(
    "environ, missing",
    [
        ({"PINPOINT_SUBDOMAIN": "acme"}, "PINPOINT_API_KEY"),
        ({"PINPOINT_API_KEY": "key"}, "PINPOINT_SUBDOMAIN"),
        ({"PINPOINT_API_KEY": "  ", "PINPOINT_SUBDOMAIN": "acme"}, "PINPOINT_API_KEY"),
    ],
)
def test_from_env_requires_credentials(environ: dict[str, str], missing: str) -> None:
    with pytest.raises(ConfigError, match=missing):
        PinpointConfig.from_env(environ)


def test_independent_configs_have_independent_urls() -> None:
    first = PinpointConfig(api_key="a", subdomain="first")
    second = PinpointConfig(api_key="b", subdomain="second")
    assert first.base_url != second.base_url
