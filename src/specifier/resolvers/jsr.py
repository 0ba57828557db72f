"""Resolvers for jsr: specifiers.

Installers using the npm compatibility layer (``npx jsr add @scope/pkg``)
place JSR packages under the ``@jsr`` scope with the scope folded into the
name::

    jsr:@scope/pkg/file.json -> node_modules/@jsr/scope__pkg/file.json
"""

import logging
import os

from common.fs import FileSystem
from constants import Constants
from ..errors import (
    InvalidRootError,
    NotImplementedResolverError,
    PackageNotFoundError,
    SpecifierKindMismatchError,
)
from ..models import ResolvedFile, SpecifierKind
from ..parser import parse
from ..walk import absolute_start_dir, walk_up
from .base import SpecifierResolver

logger = logging.getLogger(__name__)


def jsr_to_npm_compat_package(package: str) -> str:
    """Translate a JSR package name to its npm compatibility layer name.

    ``@scope/pkg`` becomes ``scope__pkg``; an unscoped name is unchanged.
    Only the first "/" is replaced.
    """
    if package.startswith("@"):
        return package[1:].replace("/", Constants.JSR_SCOPE_SEPARATOR, 1)
    return package


class JSRNodeModulesResolver(SpecifierResolver):
    """Resolves jsr: specifiers through node_modules/@jsr/."""

    def __init__(self, fs: FileSystem, root_dir: str):
        if not os.path.isabs(root_dir):
            raise InvalidRootError(root_dir)
        self.fs = fs
        self.root_dir = root_dir

    def can_resolve(self, spec: str) -> bool:
        return parse(spec).kind == SpecifierKind.JSR

    def resolve(self, spec: str) -> ResolvedFile:
        """Resolve a jsr: specifier to a filesystem path.

        Raises:
            SpecifierKindMismatchError: ``spec`` is not a jsr: specifier.
            PackageNotFoundError: No file selected, or no ancestor
                node_modules/@jsr contains it.
            PathTraversalError: The file or package escapes node_modules.
        """
        parsed = parse(spec)
        if parsed.kind != SpecifierKind.JSR:
            raise SpecifierKindMismatchError(f"not a jsr specifier: {spec}", spec)

        start_dir = absolute_start_dir(self.root_dir)
        location = f"{Constants.NODE_MODULES_DIR}/{Constants.JSR_NPM_SCOPE}"
        if not parsed.file:
            raise PackageNotFoundError(spec, parsed.package, start_dir, location)

        subpath = os.path.join(Constants.JSR_NPM_SCOPE, jsr_to_npm_compat_package(parsed.package))
        logger.debug("Resolving %s via %s", spec, subpath)
        path = walk_up(self.fs, start_dir, subpath, parsed.file, spec)
        if path is None:
            raise PackageNotFoundError(spec, parsed.package, start_dir, location)
        return ResolvedFile(specifier=spec, path=path)

    def __repr__(self) -> str:
        return f"JSRNodeModulesResolver(root_dir={self.root_dir!r})"


class JSRStubResolver(SpecifierResolver):
    """Claims jsr: specifiers and always fails; used when no JSR integration is set up."""

    def can_resolve(self, spec: str) -> bool:
        return parse(spec).kind == SpecifierKind.JSR

    def resolve(self, spec: str) -> ResolvedFile:
        raise NotImplementedResolverError(f"jsr: specifiers are not implemented yet: {spec}", spec)

    def __repr__(self) -> str:
        return "JSRStubResolver()"
