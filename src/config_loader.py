"""Project configuration: .config/design-tokens.{yaml,yml,json}.

The config lists the token files a project uses. Entries can be local paths
(globs allowed) or npm:/jsr: specifiers, which are passed through untouched
and resolved later.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from common.fs import FileSystem
from constants import Constants
from specifier.parser import is_package_specifier

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """The project config exists but cannot be used."""


def _file_entry(raw: Any) -> str:
    """A ``files`` entry is a bare string or a mapping with a ``path`` key."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get("path"), str):
        return raw["path"]
    raise ConfigError(f"Invalid files entry: {raw!r}")


@dataclass
class ProjectConfig:
    """Parsed project configuration."""
    files: List[str] = field(default_factory=list)
    cdn: Optional[str] = None
    jsr: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "ProjectConfig":
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {source}")
        files = data.get("files") or []
        if not isinstance(files, list):
            raise ConfigError(f"'files' must be a list: {source}")
        return cls(
            files=[_file_entry(entry) for entry in files],
            cdn=data.get("cdn") or None,
            jsr=data.get("jsr") or None,
            source=source,
        )


def load_config(fs: FileSystem, root_dir: str) -> Optional[ProjectConfig]:
    """Load the first config found under ``root_dir``.

    Returns:
        ProjectConfig, or None when no config file exists.

    Raises:
        ConfigError: A config file exists but cannot be read or parsed.
    """
    for ext in Constants.PROJECT_CONFIG_EXTENSIONS:
        path = os.path.join(root_dir, Constants.PROJECT_CONFIG_DIR, Constants.PROJECT_CONFIG_NAME + ext)
        if not fs.exists(path):
            continue
        try:
            text = fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read {path}: {exc}") from exc
        try:
            if ext == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to parse {path}: {exc}") from exc
        logger.debug("Loaded project config from %s", path)
        return ProjectConfig.from_dict(data, source=path)
    return None


def load_config_or_default(fs: FileSystem, root_dir: str) -> ProjectConfig:
    """Like load_config, but fall back to defaults when missing or broken."""
    try:
        cfg = load_config(fs, root_dir)
    except ConfigError as exc:
        logger.warning("%s; using defaults", exc)
        return ProjectConfig()
    return cfg if cfg is not None else ProjectConfig()


def _contains_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in "*?[")


def expand_file_path(fs: FileSystem, root_dir: str, pattern: str) -> List[str]:
    """Expand one ``files`` entry into concrete paths.

    Package specifiers pass through; relative paths are joined to
    ``root_dir``; glob patterns are expanded against ``fs``.
    """
    if is_package_specifier(pattern):
        return [pattern]
    if not os.path.isabs(pattern):
        pattern = os.path.normpath(os.path.join(root_dir, pattern))
    if not _contains_glob(pattern):
        return [pattern]
    matches = fs.glob(pattern)
    if not matches:
        logger.warning("No files matched pattern: %s", pattern)
    return matches


def expand_files(config: ProjectConfig, fs: FileSystem, root_dir: str) -> List[str]:
    """Expand every ``files`` entry of ``config`` in order."""
    result: List[str] = []
    for entry in config.files:
        result.extend(expand_file_path(fs, root_dir, entry))
    return result

