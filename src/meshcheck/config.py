# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the MeshCheck configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from meshcheck.hosts.normalizer import DEFAULT_IDENTITY_DOMAIN
from meshcheck.log_config import get_logger

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".meshcheck.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class MeshCheckConfig:
    """Settings shared by all checks of one run.

    Attributes:
        identity_domain: Cluster-local service domain used to qualify hosts.
        fail_on_warnings: Treat warning findings as a failed run.
    """

    identity_domain: str = DEFAULT_IDENTITY_DOMAIN
    fail_on_warnings: bool = False


def load_config(path: Path) -> MeshCheckConfig:
    """Load and parse a MeshCheck configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A MeshCheckConfig populated from the file. Keys that are absent keep
        their defaults; an empty file yields the default configuration.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    config = _parse_config(text, source_label=str(path))
    logger.debug("Loaded config from %s: %s", path, config)
    return config


# ################
# Implementation
# ################

_KNOWN_KEYS = {"identity-domain", "fail-on-warnings"}


def _parse_config(text: str, source_label: str = "<string>") -> MeshCheckConfig:
    """Parse configuration YAML text into a MeshCheckConfig.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return MeshCheckConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown config key(s): {', '.join(map(str, unknown))}")

    config = MeshCheckConfig()
    if "identity-domain" in data:
        domain = data["identity-domain"]
        if not isinstance(domain, str) or not domain or domain.startswith(".") or domain.endswith("."):
            raise ConfigError(f"{source_label}: 'identity-domain' must be a non-empty domain name")
        config.identity_domain = domain
    if "fail-on-warnings" in data:
        flag = data["fail-on-warnings"]
        if not isinstance(flag, bool):
            raise ConfigError(f"{source_label}: 'fail-on-warnings' must be a boolean")
        config.fail_on_warnings = flag
    return config
