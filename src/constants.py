"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    USAGE_ERROR = 2
    EXIT_FAILURES = 3


class JSRModes(Enum):
    """Strategies for handling jsr: specifiers.

    Args:
        Enum (string): Strategies for handling jsr: specifiers.
    """

    COMPAT = "compat"
    STUB = "stub"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    NPM_PREFIX = "npm:"
    JSR_PREFIX = "jsr:"
    NODE_MODULES_DIR = "node_modules"
    JSR_NPM_SCOPE = "@jsr"
    JSR_SCOPE_SEPARATOR = "__"

    JSR_MODES = [JSRModes.COMPAT.value, JSRModes.STUB.value]
    DEFAULT_JSR_MODE = JSRModes.COMPAT.value
    DEFAULT_CDN = "unpkg"

    # Project config (design-tokens) discovery
    PROJECT_CONFIG_DIR = ".config"
    PROJECT_CONFIG_NAME = "design-tokens"
    PROJECT_CONFIG_EXTENSIONS = [".yaml", ".yml", ".json"]

    # Tool config (specresolve's own settings)
    TOOL_CONFIG_LOCATIONS = [
        "specresolve.yml",
        "specresolve.yaml",
        ".specresolve.yml",
        ".specresolve.yaml",
    ]

    ENV_LOG_LEVEL = "SPECRESOLVE_LOG_LEVEL"
    ENV_ROOT = "SPECRESOLVE_ROOT"
    ENV_CDN = "SPECRESOLVE_CDN"
    ENV_JSR_MODE = "SPECRESOLVE_JSR_MODE"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
