"""Centralized configuration for the srcset_parser command line.

This module exposes :func:`get_settings` returning the settings used by the
CLI: where structured logs go, which record field holds the ``srcset`` value
in batch inputs, and how results are rendered. Values can be customized via
environment variables or by pointing ``SRCSET_PARSER_CONFIG_FILE`` to a
TOML/YAML document. Environment variables win over the document.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["ParserSettings", "get_settings", "reset_settings"]

_CONFIG_CACHE: Optional["ParserSettings"] = None
_CONFIG_SOURCE: Optional[Path] = None

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ParserSettings:
    """Resolved settings for the command line tools."""

    log_path: Optional[Path] = None
    log_level: int = logging.INFO
    srcset_field: str = "srcset"
    fail_fast: bool = False
    json_indent: int = 2
    config_source: Optional[Path] = None

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON-friendly values (useful for logging)."""

        return {
            "config_source": str(self.config_source) if self.config_source else "environment",
            "log_path": str(self.log_path) if self.log_path else None,
            "log_level": logging.getLevelName(self.log_level),
            "srcset_field": self.srcset_field,
            "fail_fast": self.fail_fast,
            "json_indent": self.json_indent,
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _parse_level(value: Any) -> int:
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{value}'")
    return level


def _parse_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: '{value}'")


def _parse_indent(value: Any) -> int:
    if value is None:
        return 2
    try:
        indent = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid JSON indent: '{value}'") from exc
    if indent < 0:
        raise ValueError(f"JSON indent must be non-negative, got {indent}")
    return indent


def _build_settings(config_file: Optional[Path]) -> ParserSettings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=Path.cwd())
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    logging_section = _coalesce_mapping(config_data.get("logging"))
    batch_section = _coalesce_mapping(config_data.get("batch"))
    output_section = _coalesce_mapping(config_data.get("output"))

    env = os.environ

    log_path = _normalize_path(
        env.get("SRCSET_PARSER_LOG_PATH") or logging_section.get("path"),
        base=config_dir,
    )
    log_level = _parse_level(_first_set(env.get("SRCSET_PARSER_LOG_LEVEL"), logging_section.get("level")))
    srcset_field = env.get("SRCSET_PARSER_FIELD") or batch_section.get("field") or "srcset"
    fail_fast = _parse_bool(
        _first_set(env.get("SRCSET_PARSER_FAIL_FAST"), batch_section.get("fail_fast")),
        default=False,
    )
    json_indent = _parse_indent(_first_set(env.get("SRCSET_PARSER_JSON_INDENT"), output_section.get("indent")))

    return ParserSettings(
        log_path=log_path,
        log_level=log_level,
        srcset_field=str(srcset_field),
        fail_fast=fail_fast,
        json_indent=json_indent,
        config_source=config_file,
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> ParserSettings:
    """Return the cached :class:`ParserSettings` configuration.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    explicit_path = Path(config_file).expanduser() if config_file is not None else None

    if explicit_path is not None:
        return _build_settings(explicit_path)

    env_path = os.getenv("SRCSET_PARSER_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
