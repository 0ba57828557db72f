"""Resolver for local filesystem paths."""

from ..models import ResolvedFile
from ..parser import is_package_specifier
from .base import SpecifierResolver


class LocalResolver(SpecifierResolver):
    """Passes anything that is not a package specifier through unchanged."""

    def can_resolve(self, spec: str) -> bool:
        return not is_package_specifier(spec)

    def resolve(self, spec: str) -> ResolvedFile:
        return ResolvedFile(specifier=spec, path=spec)

    def __repr__(self) -> str:
        return "LocalResolver()"
