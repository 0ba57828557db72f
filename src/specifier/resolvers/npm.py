"""Resolver for npm: specifiers installed under node_modules."""

import logging

from common.fs import FileSystem
from common.logging_utils import extra_context, is_debug_enabled
from ..errors import PackageNotFoundError, SpecifierKindMismatchError
from ..models import ResolvedFile, SpecifierKind
from ..parser import parse
from ..walk import absolute_start_dir, walk_up
from .base import SpecifierResolver

logger = logging.getLogger(__name__)


class NPMResolver(SpecifierResolver):
    """Resolves npm:<pkg>/<file> to node_modules/<pkg>/<file>.

    The search starts at ``root_dir`` and walks up to the filesystem root,
    the way Node looks up installed packages.
    """

    def __init__(self, fs: FileSystem, root_dir: str):
        self.fs = fs
        self.root_dir = root_dir

    def can_resolve(self, spec: str) -> bool:
        return parse(spec).kind == SpecifierKind.NPM

    def resolve(self, spec: str) -> ResolvedFile:
        """Resolve an npm: specifier to a filesystem path.

        Raises:
            SpecifierKindMismatchError: ``spec`` is not an npm: specifier.
            PackageNotFoundError: No file selected, or no ancestor node_modules
                contains it.
            PathTraversalError: The file or package escapes node_modules.
        """
        parsed = parse(spec)
        if parsed.kind != SpecifierKind.NPM:
            raise SpecifierKindMismatchError(f"not an npm specifier: {spec}", spec)

        start_dir = absolute_start_dir(self.root_dir)
        if not parsed.file:
            raise PackageNotFoundError(spec, parsed.package, start_dir)

        if is_debug_enabled(logger):
            logger.debug(
                "Resolving npm specifier",
                extra=extra_context(
                    event="function_entry",
                    component="npm_resolver",
                    specifier=spec,
                    target=start_dir,
                ),
            )

        path = walk_up(self.fs, start_dir, parsed.package, parsed.file, spec)
        if path is None:
            raise PackageNotFoundError(spec, parsed.package, start_dir)
        return ResolvedFile(specifier=spec, path=path)

    def __repr__(self) -> str:
        return f"NPMResolver(root_dir={self.root_dir!r})"
