#!/usr/bin/env python3

import json
import os
from typing import Any, Dict, Optional

try:
    # Python 3.11+ 标准库
    import tomllib as toml  # type: ignore
except ModuleNotFoundError:
    # Python <3.11
    import tomli as toml  # type: ignore

from ..metadata.errors import ConfigError, InvalidBaseURLError
from ..metadata.paths import DEFAULT_BASE_URL
from ..metadata.transport import DEFAULT_TIMEOUT_S, MetadataConfig


CONFIG_SECTION = "imds"


def load_config_by_file(path: str) -> Dict[str, Any]:
    """Load config from a TOML or JSON file.

    Args:
        path: Config file path. ``.toml`` files are parsed as TOML, anything
            else as JSON.

    Returns:
        Dict[str, Any]: Loaded config.

    Raises:
        ConfigError: File missing, unreadable or not a mapping.
    """
    if not os.path.exists(path):
        raise ConfigError(f"config file not found: {path}")

    try:
        if path.endswith('.toml'):
            # tomllib/tomli 需要以二进制模式读取
            with open(path, 'rb') as f:
                config = toml.load(f)
        else:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"config file cannot be parsed: {path}: {exc}") from exc

    if not isinstance(config, dict):
        raise ConfigError(f"config root must be a table/object: {path}")
    return config


def _normalize_timeout(value: Any) -> float:
    """Normalize timeout into a positive float.

    Args:
        value: Raw timeout value.

    Returns:
        float: Timeout in seconds.

    Raises:
        ConfigError: Value is not a positive number.
    """
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"timeout_s must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"timeout_s must be positive, got {value!r}")
    return timeout


def build_metadata_config(
    config: Optional[Dict[str, Any]] = None,
    base_url: Optional[str] = None,
    timeout_s: Optional[float] = None,
) -> MetadataConfig:
    """Build a ``MetadataConfig`` from the ``[imds]`` table plus overrides.

    Args:
        config: Loaded config file content, may be ``None``.
        base_url: Override for ``imds.base_url``.
        timeout_s: Override for ``imds.timeout_s``.

    Returns:
        MetadataConfig: Immutable client config.

    Raises:
        ConfigError: Section or values are invalid.
    """
    section: Any = (config or {}).get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] must be a table")

    resolved_url = base_url or section.get("base_url") or DEFAULT_BASE_URL
    resolved_timeout = _normalize_timeout(
        timeout_s if timeout_s is not None else section.get("timeout_s", DEFAULT_TIMEOUT_S)
    )

    try:
        return MetadataConfig(base_url=str(resolved_url), timeout_s=resolved_timeout)
    except InvalidBaseURLError as exc:
        raise ConfigError(str(exc)) from exc
