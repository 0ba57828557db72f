"""Data models for package specifiers and their resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SpecifierKind(Enum):
    """Enum for the kinds of specifier."""
    LOCAL = "local"
    NPM = "npm"
    JSR = "jsr"


@dataclass(frozen=True)
class Specifier:
    """A parsed specifier.

    ``package`` keeps any scope and ``@version`` suffix verbatim and is empty
    for local paths. ``file`` never starts with "/"; an empty ``file`` on a
    package specifier means no file was selected.
    """
    kind: SpecifierKind
    package: str
    file: str
    raw: str

    def is_npm(self) -> bool:
        return self.kind == SpecifierKind.NPM

    def is_jsr(self) -> bool:
        return self.kind == SpecifierKind.JSR

    def is_local(self) -> bool:
        return self.kind == SpecifierKind.LOCAL

    def _split_version(self) -> Tuple[str, Optional[str]]:
        # The version separator is the first "@" after the (optional) scope "@"
        start = 1 if self.package.startswith("@") else 0
        idx = self.package.find("@", start)
        if idx == -1:
            return self.package, None
        return self.package[:idx], self.package[idx + 1:] or None

    @property
    def package_name(self) -> str:
        """Package name without any version suffix."""
        return self._split_version()[0]

    @property
    def version(self) -> Optional[str]:
        """Version suffix as written (not validated), or None."""
        return self._split_version()[1]


@dataclass(frozen=True)
class ResolvedFile:
    """Outcome of resolving a specifier to a filesystem path."""
    specifier: str  # original raw specifier, kept for traceability
    path: str

    @property
    def kind(self) -> SpecifierKind:
        """Kind derived by re-parsing the original specifier."""
        # Imported here: parser imports this module
        from .parser import parse  # pylint: disable=import-outside-toplevel
        return parse(self.specifier).kind
