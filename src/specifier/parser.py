"""Specifier parsing: classify a raw string as npm:, jsr: or a local path."""

import re

from constants import Constants
from .models import Specifier, SpecifierKind

# npm:@scope/pkg[/file] or npm:pkg[/file]
_NPM_PATTERN = re.compile(r"npm:(@[^/]+/[^/]+|[^/]+)(/.*)?")

# jsr:@scope/pkg[/file]; JSR has no unscoped packages
_JSR_PATTERN = re.compile(r"jsr:(@[^/]+/[^/]+)(/.*)?")


def _match(pattern: re.Pattern, raw: str, kind: SpecifierKind):
    match = pattern.fullmatch(raw)
    if match is None:
        return None
    package, rest = match.groups()
    return Specifier(
        kind=kind,
        package=package,
        file=(rest or "").lstrip("/"),
        raw=raw,
    )


def parse(raw: str) -> Specifier:
    """Parse a raw specifier string.

    Never fails: anything that is not a well-formed npm: or jsr: specifier is
    returned as a local path with ``file`` equal to the input.

    Args:
        raw: Specifier such as "npm:@scope/pkg/file.json" or "./tokens.json".

    Returns:
        Specifier
    """
    parsed = None
    if raw.startswith(Constants.NPM_PREFIX):
        parsed = _match(_NPM_PATTERN, raw, SpecifierKind.NPM)
    elif raw.startswith(Constants.JSR_PREFIX):
        parsed = _match(_JSR_PATTERN, raw, SpecifierKind.JSR)
    if parsed is not None:
        return parsed
    return Specifier(kind=SpecifierKind.LOCAL, package="", file=raw, raw=raw)


def is_package_specifier(raw: str) -> bool:
    """Return True for well-formed npm: or jsr: specifiers (same rules as parse)."""
    return parse(raw).kind != SpecifierKind.LOCAL
