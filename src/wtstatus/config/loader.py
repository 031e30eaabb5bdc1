"""Load and merge configuration from .wtstatus.toml and env vars."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from wtstatus.config.schema import (
    OUTPUT_FORMATS,
    SUBMODULE_MODES,
    UNTRACKED_MODES,
    ConflictsConfig,
    GitConfig,
    OutputConfig,
    StatusConfig,
    WtStatusConfig,
)

CONFIG_FILENAME = ".wtstatus.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: WtStatusConfig) -> None:
    if cfg.status.untracked_files not in UNTRACKED_MODES:
        raise ConfigError(f"Invalid status.untracked_files: {cfg.status.untracked_files!r}")
    if cfg.status.ignore_submodules not in SUBMODULE_MODES:
        raise ConfigError(f"Invalid status.ignore_submodules: {cfg.status.ignore_submodules!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if not isinstance(cfg.git.timeout, int) or cfg.git.timeout <= 0:
        raise ConfigError(f"Invalid git.timeout: {cfg.git.timeout!r}")
    if not isinstance(cfg.conflicts.binary_sniff_bytes, int) or cfg.conflicts.binary_sniff_bytes <= 0:
        raise ConfigError(
            f"Invalid conflicts.binary_sniff_bytes: {cfg.conflicts.binary_sniff_bytes!r}"
        )


def _merge_env_overrides(cfg: WtStatusConfig) -> None:
    """Apply WTSTATUS_* environment variable overrides. Invalid values are ignored."""
    if val := os.environ.get("WTSTATUS_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("WTSTATUS_UNTRACKED_FILES"):
        if val in UNTRACKED_MODES:
            cfg.status.untracked_files = val  # type: ignore[assignment]
    if val := os.environ.get("WTSTATUS_GIT_TIMEOUT"):
        try:
            timeout = int(val)
        except ValueError:
            pass
        else:
            if timeout > 0:
                cfg.git.timeout = timeout


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> WtStatusConfig:
    """Load, validate, and return a WtStatusConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = WtStatusConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = WtStatusConfig(
            version=str(raw.get("version", "1.0")),
            status=_build_section(raw, StatusConfig, "status"),
            conflicts=_build_section(raw, ConflictsConfig, "conflicts"),
            git=_build_section(raw, GitConfig, "git"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
