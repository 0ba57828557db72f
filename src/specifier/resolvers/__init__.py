"""Specifier resolvers."""

from .base import SpecifierResolver
from .chain import ChainResolver, new_default_resolver
from .jsr import JSRNodeModulesResolver, JSRStubResolver, jsr_to_npm_compat_package
from .local import LocalResolver
from .npm import NPMResolver

__all__ = [
    "SpecifierResolver",
    "ChainResolver",
    "new_default_resolver",
    "JSRNodeModulesResolver",
    "JSRStubResolver",
    "jsr_to_npm_compat_package",
    "LocalResolver",
    "NPMResolver",
]
