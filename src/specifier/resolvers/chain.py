"""Ordered composition of resolvers."""

import logging
from typing import Sequence

from common.fs import FileSystem
from constants import Constants, JSRModes
from ..errors import NoResolverMatchedError
from ..models import ResolvedFile
from .base import SpecifierResolver
from .jsr import JSRNodeModulesResolver, JSRStubResolver
from .local import LocalResolver
from .npm import NPMResolver

logger = logging.getLogger(__name__)


class ChainResolver(SpecifierResolver):
    """Delegates to the first resolver that claims a specifier.

    A failure from the claiming resolver is final; later resolvers are not
    tried.
    """

    def __init__(self, *resolvers: SpecifierResolver):
        self.resolvers: Sequence[SpecifierResolver] = tuple(resolvers)

    def can_resolve(self, spec: str) -> bool:
        return any(r.can_resolve(spec) for r in self.resolvers)

    def resolve(self, spec: str) -> ResolvedFile:
        for resolver in self.resolvers:
            if resolver.can_resolve(spec):
                logger.debug("%s claimed %s", resolver, spec)
                return resolver.resolve(spec)
        raise NoResolverMatchedError(spec)

    def __repr__(self) -> str:
        return f"ChainResolver({', '.join(repr(r) for r in self.resolvers)})"


def new_default_resolver(
    fs: FileSystem, root_dir: str, jsr_mode: str = Constants.DEFAULT_JSR_MODE
) -> ChainResolver:
    """Build the npm -> jsr -> local chain.

    Args:
        fs: Filesystem capability.
        root_dir: Starting directory for node_modules lookup. Must be absolute
            when ``jsr_mode`` is "compat".
        jsr_mode: "compat" to resolve jsr: via node_modules/@jsr, "stub" to
            reject jsr: specifiers as not implemented.

    Raises:
        InvalidRootError: ``root_dir`` is relative in compat mode.
        ValueError: Unknown ``jsr_mode``.
    """
    if jsr_mode == JSRModes.COMPAT.value:
        jsr_resolver: SpecifierResolver = JSRNodeModulesResolver(fs, root_dir)
    elif jsr_mode == JSRModes.STUB.value:
        jsr_resolver = JSRStubResolver()
    else:
        raise ValueError(f"Unsupported jsr mode: {jsr_mode}")

    return ChainResolver(
        NPMResolver(fs, root_dir),
        jsr_resolver,
        LocalResolver(),
    )
