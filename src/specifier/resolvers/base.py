"""Base class for specifier resolvers."""

from abc import ABC, abstractmethod

from ..models import ResolvedFile


class SpecifierResolver(ABC):
    """Maps a raw specifier to a ResolvedFile.

    ``can_resolve`` is cheap and side-effect free. When it returns True,
    ``resolve`` never fails merely because the specifier is of another kind.
    """

    @abstractmethod
    def can_resolve(self, spec: str) -> bool:
        """Return True if this resolver handles ``spec``."""

    @abstractmethod
    def resolve(self, spec: str) -> ResolvedFile:
        """Resolve ``spec``.

        Raises:
            ResolutionError: Resolution failed.
        """
