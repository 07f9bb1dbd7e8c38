"""Format configuration file - pre-register repository formats from TOML.

Format:

    [[tool.stof-github.formats]]
    owner = "dev-formata-io"
    repo = "stof"
    id = "formata"                               # optional, default: repo
    headers = { Authorization = "Bearer ..." }   # optional

The file location is app policy; nothing here looks at fixed paths or the
environment.
"""

import logging
import tomllib
from pathlib import Path

import requests
from pydantic import ValidationError

from .exceptions import ConfigError
from .fetcher import GitHubFormat
from .protocols import HostDocumentProtocol
from .schema import FetcherConfig

logger = logging.getLogger(__name__)


def load_format_configs(config_path: Path) -> list[FetcherConfig]:
    """
    Load repository format configs from a TOML file.

    Args:
        config_path: Path to a TOML file (e.g. pyproject.toml)

    Returns:
        One FetcherConfig per [[tool.stof-github.formats]] entry (empty if the
        section is absent)

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If invalid TOML
        ConfigError: If an entry is malformed
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    entries = data.get("tool", {}).get("stof-github", {}).get("formats", [])
    if not isinstance(entries, list):
        raise ConfigError(
            f"[tool.stof-github] formats must be an array of tables in {config_path}",
            context={"config_path": str(config_path)},
        )

    configs = []
    for index, entry in enumerate(entries):
        try:
            configs.append(
                FetcherConfig(
                    owner=entry["owner"],
                    repo=entry["repo"],
                    identifier=entry.get("id"),
                    headers=entry.get("headers", {}),
                )
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise ConfigError(
                f"Invalid format entry #{index} in {config_path}: {e}",
                context={"config_path": str(config_path), "index": index},
            ) from e

    logger.debug(f"Loaded {len(configs)} format configs from {config_path}")
    return configs


def register_formats(
    doc: HostDocumentProtocol,
    configs: list[FetcherConfig],
    session: requests.Session | None = None,
) -> list[GitHubFormat]:
    """
    Create and load one format per config.

    Args:
        doc: Host document receiving the formats
        configs: Configs from load_format_configs (or built by hand)
        session: Optional session shared by all created formats

    Returns:
        The loaded formats, in config order
    """
    formats = []
    for config in configs:
        format = GitHubFormat.from_config(config, session=session)
        doc.load_format(format)
        formats.append(format)
    return formats
