"""Load and merge configuration from .vcsdiff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from vcsdiff.config.schema import (
    OUTPUT_FORMATS,
    VCS_CHOICES,
    DiffConfig,
    LogConfig,
    OutputConfig,
    VcsDiffConfig,
)

CONFIG_FILENAME = ".vcsdiff.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: VcsDiffConfig) -> None:
    if cfg.diff.vcs not in VCS_CHOICES:
        raise ConfigError(f"Invalid diff.vcs: {cfg.diff.vcs!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if not isinstance(cfg.diff.jobs, int) or cfg.diff.jobs < 0:
        raise ConfigError(f"Invalid diff.jobs: {cfg.diff.jobs!r}")
    if not isinstance(cfg.diff.timeout, (int, float)) or cfg.diff.timeout < 0:
        raise ConfigError(f"Invalid diff.timeout: {cfg.diff.timeout!r}")
    if not isinstance(cfg.log.limit, int) or cfg.log.limit <= 0:
        raise ConfigError(f"Invalid log.limit: {cfg.log.limit!r}")


def _merge_env_overrides(cfg: VcsDiffConfig) -> None:
    """Apply VCSDIFF_* environment variable overrides."""
    if val := os.environ.get("VCSDIFF_VCS"):
        if val in VCS_CHOICES:
            cfg.diff.vcs = val  # type: ignore[assignment]
    if val := os.environ.get("VCSDIFF_TOOL"):
        cfg.diff.tool = val
    if val := os.environ.get("VCSDIFF_JOBS"):
        try:
            jobs = int(val)
        except ValueError:
            jobs = -1
        if jobs >= 0:
            cfg.diff.jobs = jobs
    if val := os.environ.get("VCSDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if os.environ.get("VCSDIFF_NO_RENAMES") == "1":
        cfg.diff.rename_detection = False


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> VcsDiffConfig:
    """Load, validate, and return a VcsDiffConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = VcsDiffConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = VcsDiffConfig(
                version=raw.get("version", "1.0"),
                diff=_build_section(raw, DiffConfig, "diff"),
                output=_build_section(raw, OutputConfig, "output"),
                log=_build_section(raw, LogConfig, "log"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
