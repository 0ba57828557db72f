"""Runtime settings for the CLI.

Merges, highest precedence first: CLI arguments, SPECRESOLVE_* environment
variables, the specresolve YAML/JSON config file, the project config
(.config/design-tokens.*), and built-in defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from config_loader import ProjectConfig
from constants import Constants

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Effective settings for one CLI run."""
    root: str
    jsr_mode: str = Constants.DEFAULT_JSR_MODE
    cdn: Optional[str] = None


def find_tool_config(explicit: Optional[str] = None) -> Optional[str]:
    """Return the tool config path to use, if any."""
    if explicit:
        return explicit
    for candidate in Constants.TOOL_CONFIG_LOCATIONS:
        if os.path.isfile(candidate):
            return candidate
    return None


def load_tool_config(path: Optional[str]) -> Dict[str, Any]:
    """Load the specresolve config file.

    A missing or unreadable file is logged and treated as empty.
    """
    if not path:
        return {}
    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        logger.error("Failed to load config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        return {}
    # Accept either a top-level mapping or a "specresolve" section
    section = data.get("specresolve", data)
    return section if isinstance(section, dict) else {}


def _first(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value:
            return value
    return None


def build_settings(
    args: Any,
    tool_config: Optional[Dict[str, Any]] = None,
    project_config: Optional[ProjectConfig] = None,
) -> Settings:
    """Compute the effective settings for a run.

    The root is always made absolute so resolvers that require an absolute
    root can be constructed.
    """
    tool_config = tool_config or {}
    env = os.environ

    root = _first(
        getattr(args, "ROOT", None),
        env.get(Constants.ENV_ROOT),
        tool_config.get("root"),
    ) or os.getcwd()

    jsr_mode = _first(
        getattr(args, "JSR_MODE", None),
        env.get(Constants.ENV_JSR_MODE),
        tool_config.get("jsr"),
        project_config.jsr if project_config else None,
    ) or Constants.DEFAULT_JSR_MODE

    cdn = _first(
        getattr(args, "CDN", None),
        env.get(Constants.ENV_CDN),
        tool_config.get("cdn"),
        project_config.cdn if project_config else None,
    )

    settings = Settings(
        root=os.path.abspath(str(root)),
        jsr_mode=str(jsr_mode).lower(),
        cdn=str(cdn).lower() if cdn else None,
    )
    logger.debug("Effective settings: %s", settings)
    return settings
