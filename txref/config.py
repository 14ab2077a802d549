"""Shared configuration loader for the txref tools."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .constants import MAX_HRP_LENGTH, Network


class ConfigurationError(RuntimeError):
    """Raised when configuration is invalid."""


DEFAULT_CONFIG_PATH = Path.home() / ".txref.yaml"
_CONFIG_PATH_OVERRIDE: Path | None = None

OUTPUT_FORMATS = frozenset({"text", "json"})


@dataclass
class TxrefConfig:
    """Defaults applied by the command line when flags are omitted."""

    network: Network = Network.MAIN
    hrp: str | None = None
    force_extended: bool = False
    output: str = "text"
    log_level: str = "WARNING"

    @property
    def resolved_hrp(self) -> str:
        return self.hrp or self.network.hrp


def set_default_config_path(path: str | Path | None) -> None:
    """Remember a user-supplied config path for future loads."""

    global _CONFIG_PATH_OVERRIDE
    _CONFIG_PATH_OVERRIDE = Path(path).expanduser() if path else None


def _load_config_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigurationError(f"Config file not found: {path}")
        return {}

    try:
        loaded = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:  # pragma: no cover - delegated to PyYAML
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Expected {path} to contain a YAML object with a 'txref' section")
    return loaded


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "y", "on"}:
            return True
        if normalized in {"0", "false", "no", "n", "off"}:
            return False
    return None


def _coerce_network(raw: Any, *, source: str) -> Network | None:
    if raw is None:
        return None
    if isinstance(raw, Network):
        return raw
    normalized = str(raw).strip().lower()
    aliases = {"main": Network.MAIN, "mainnet": Network.MAIN, "test": Network.TEST, "testnet": Network.TEST}
    if normalized not in aliases:
        raise ConfigurationError(f"Invalid network in {source}: {raw}")
    return aliases[normalized]


def _first_value(*values: Any, default: Any = None) -> Any:
    for value in values:
        if value is not None:
            return value
    return default


def load_config(
    *,
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> TxrefConfig:
    """Load txref defaults from overrides, environment variables and optional YAML."""

    env_map = os.environ if env is None else env
    explicit_path = config_path is not None or _CONFIG_PATH_OVERRIDE is not None
    path = (
        Path(config_path).expanduser()
        if config_path is not None
        else _CONFIG_PATH_OVERRIDE or DEFAULT_CONFIG_PATH
    )

    file_config = _load_config_file(path, required=explicit_path)
    section = file_config.get("txref", {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Expected 'txref' to be a mapping in {path}")

    override_map = dict(overrides or {})

    network = _first_value(
        _coerce_network(override_map.get("network"), source="overrides"),
        _coerce_network(env_map.get("TXREF_NETWORK"), source="environment"),
        _coerce_network(section.get("network"), source=f"{path} txref.network"),
        Network.MAIN,
    )
    hrp = _first_value(override_map.get("hrp"), env_map.get("TXREF_HRP") or None, section.get("hrp"))
    if hrp is not None and not 0 < len(str(hrp)) <= MAX_HRP_LENGTH:
        raise ConfigurationError(f"HRP must be 1 to {MAX_HRP_LENGTH} characters long: {hrp!r}")

    force_extended = _first_value(
        _coerce_bool(override_map.get("force_extended")),
        _coerce_bool(env_map.get("TXREF_FORCE_EXTENDED")),
        _coerce_bool(section.get("force_extended")),
        False,
    )
    output = str(
        _first_value(override_map.get("output"), env_map.get("TXREF_OUTPUT"), section.get("output"), "text")
    ).lower()
    if output not in OUTPUT_FORMATS:
        raise ConfigurationError(f"Invalid output format: {output} (expected one of {sorted(OUTPUT_FORMATS)})")

    log_level = str(
        _first_value(
            override_map.get("log_level"), env_map.get("TXREF_LOG_LEVEL"), section.get("log_level"), "WARNING"
        )
    ).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Invalid log level: {log_level}")

    return TxrefConfig(
        network=network,
        hrp=str(hrp) if hrp is not None else None,
        force_extended=bool(force_extended),
        output=output,
        log_level=log_level,
    )
