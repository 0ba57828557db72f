"""Package specifier parsing and resolution.

Specifiers address files inside installed npm packages (``npm:``), JSR
packages (``jsr:``), or plain local paths.
"""

from .cdn import CDN, cdn_url, parse_cdn, valid_cdns
from .errors import (
    InvalidRootError,
    NoResolverMatchedError,
    NotImplementedResolverError,
    PackageNotFoundError,
    PathTraversalError,
    ResolutionError,
    SpecifierKindMismatchError,
    UnknownCDNError,
)
from .models import ResolvedFile, Specifier, SpecifierKind
from .parser import is_package_specifier, parse
from .resolvers import (
    ChainResolver,
    JSRNodeModulesResolver,
    JSRStubResolver,
    LocalResolver,
    NPMResolver,
    SpecifierResolver,
    new_default_resolver,
)
from .service import ResolutionResult, ResolutionService

__all__ = [
    "CDN",
    "cdn_url",
    "parse_cdn",
    "valid_cdns",
    "InvalidRootError",
    "NoResolverMatchedError",
    "NotImplementedResolverError",
    "PackageNotFoundError",
    "PathTraversalError",
    "ResolutionError",
    "SpecifierKindMismatchError",
    "UnknownCDNError",
    "ResolvedFile",
    "Specifier",
    "SpecifierKind",
    "is_package_specifier",
    "parse",
    "ChainResolver",
    "JSRNodeModulesResolver",
    "JSRStubResolver",
    "LocalResolver",
    "NPMResolver",
    "SpecifierResolver",
    "new_default_resolver",
    "ResolutionResult",
    "ResolutionService",
]
