"""Errors raised while resolving specifiers."""

from typing import Optional


class ResolutionError(Exception):
    """Base class for all resolution failures."""

    def __init__(self, message: str, specifier: Optional[str] = None):
        super().__init__(message)
        self.specifier = specifier


class PackageNotFoundError(ResolutionError):
    """The node_modules walk-up reached the filesystem root without a match."""

    def __init__(self, specifier: str, package: str, start_dir: str, location: str = "node_modules"):
        super().__init__(
            f"package not found: {package} (looked in {location} starting from {start_dir})",
            specifier,
        )
        self.package = package
        self.start_dir = start_dir


class NotImplementedResolverError(ResolutionError):
    """The resolver that claimed the specifier cannot resolve it yet."""


class InvalidRootError(ResolutionError):
    """A resolver was configured with a root directory it cannot use."""

    def __init__(self, root_dir: str, reason: str = "root directory must be absolute"):
        super().__init__(f"{reason}: {root_dir}")
        self.root_dir = root_dir


class PathTraversalError(ResolutionError):
    """A candidate path escaped its node_modules directory."""

    def __init__(self, specifier: str, candidate: str, boundary: str):
        super().__init__(
            f"path traversal rejected for {specifier}: {candidate} is outside {boundary}",
            specifier,
        )
        self.candidate = candidate
        self.boundary = boundary


class NoResolverMatchedError(ResolutionError):
    """No resolver in a chain claimed the specifier."""

    def __init__(self, specifier: str):
        super().__init__(f"no resolver found for specifier: {specifier}", specifier)


class SpecifierKindMismatchError(ResolutionError):
    """A resolver was handed a specifier of a kind it does not handle."""


class UnknownCDNError(ValueError):
    """A CDN provider name is not one of the supported providers."""
