"""
Configuration for the Pinpoint MCP server.

Credentials are read from the environment (optionally seeded from a ``.env``
file by the entry point) and handed to the API client as an explicit value.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

API_KEY_VAR = "PINPOINT_API_KEY"
SUBDOMAIN_VAR = "PINPOINT_SUBDOMAIN"
LOG_LEVEL_VAR = "PINPOINT_LOG_LEVEL"


class ConfigError(ValueError):
    """Raised when a required setting is missing or invalid"""


@dataclass(frozen=True)
class PinpointConfig:
    api_key: str
    subdomain: str
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        return "https://{subdomain}.pinpointhq.com/api/v1".format(subdomain=self.subdomain)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PinpointConfig":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Raises:
            ConfigError: if PINPOINT_API_KEY or PINPOINT_SUBDOMAIN is missing
        """
        env = os.environ if environ is None else environ

        api_key = env.get(API_KEY_VAR, "").strip()
        if not api_key:
            raise ConfigError(f"{API_KEY_VAR} environment variable is required")

        subdomain = env.get(SUBDOMAIN_VAR, "").strip()
        if not subdomain:
            raise ConfigError(f"{SUBDOMAIN_VAR} environment variable is required")

        log_level = env.get(LOG_LEVEL_VAR, "INFO").strip().upper() or "INFO"

        return cls(api_key=api_key, subdomain=subdomain, log_level=log_level)
