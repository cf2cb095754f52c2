"""Building a client from a JSON configuration file.

Example file::

    {
        "panel_url": "https://panel.example.com",
        "api_key_file": "/run/secrets/ptero_key",
        "timeout": 30.0
    }

Logging is not configured here; see :mod:`pterodactyl_client.log`.
"""

import os
import pathlib

import httpx
import pydantic
import structlog

from .client import Client, ClientBuilder

CONFIG_ENV_VAR = "PTERODACTYL_CLIENT_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "pterodactyl.json"

logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Connection settings for a Pterodactyl Application API client."""

    panel_url: str = pydantic.Field(description="Base URL of the panel")
    api_key: str | None = pydantic.Field(
        None,
        description="Application API key",
    )
    api_key_file: str | None = pydantic.Field(
        None,
        description="Path to file containing the Application API key",
    )
    timeout: float | None = pydantic.Field(
        None,
        description="Request timeout in seconds, unlimited if unset",
        gt=0,
    )

    @pydantic.model_validator(mode="after")
    def _exactly_one_key_source(self) -> "ClientConfig":
        if (self.api_key is None) == (self.api_key_file is None):
            msg = "exactly one of api_key and api_key_file must be set"
            raise ValueError(msg)
        return self

    def resolve_api_key(self) -> str:
        """Return the API key, reading it from api_key_file if configured.

        Raises:
            FileNotFoundError: If api_key_file does not exist.
        """
        if self.api_key is not None:
            return self.api_key
        key_path = pathlib.Path(self.api_key_file)
        if not key_path.exists():
            msg = f"API key file not found: {self.api_key_file}"
            raise FileNotFoundError(msg)
        return key_path.read_text().strip()


def load_config(config_path: str | os.PathLike[str]) -> ClientConfig:
    """Read and validate a JSON configuration file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file is not valid JSON or does not
            match :class:`ClientConfig`.
    """
    path = pathlib.Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)
    return ClientConfig.model_validate_json(path.read_bytes())


def create_client(config: ClientConfig) -> Client:
    """Build a client owning an httpx client with the configured timeout."""
    client = (
        ClientBuilder(config.panel_url, config.resolve_api_key())
        .http_client(httpx.AsyncClient(timeout=config.timeout), owned=True)
        .build()
    )
    logger.debug("Created panel client", base_url=client.base_url)
    return client


def client_from_config_path(config_path: str | None = None) -> Client:
    """Build a client from config_path, the environment, or the default path.

    The path is taken from the argument, then from
    ``PTERODACTYL_CLIENT_CONFIG_PATH``, then ``pterodactyl.json`` in the
    working directory.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    return create_client(load_config(resolved_path))
