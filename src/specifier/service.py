"""Batch resolution that reports failures as values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from common.logging_utils import Timer, extra_context, is_debug_enabled
from .cdn import CDN, cdn_url
from .errors import ResolutionError
from .parser import parse
from .resolvers.base import SpecifierResolver

logger = logging.getLogger(__name__)


@dataclass
class ResolutionResult:
    """Resolution outcome to feed downstream exports/logging."""
    specifier: str
    kind: str
    path: Optional[str]
    error: Optional[str]
    cdn_url: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ResolutionService:
    """Runs a resolver over many specifiers without raising."""

    def __init__(self, resolver: SpecifierResolver, cdn: Optional[CDN] = None):
        self.resolver = resolver
        self.cdn = cdn

    def resolve(self, spec: str) -> ResolutionResult:
        """Resolve one specifier; a ResolutionError becomes ``result.error``."""
        parsed = parse(spec)
        url = None
        if self.cdn is not None:
            built, ok = cdn_url(spec, self.cdn)
            url = built if ok else None

        with Timer() as t:
            try:
                resolved = self.resolver.resolve(spec)
            except ResolutionError as exc:
                logger.warning("Could not resolve %s: %s", spec, exc)
                return ResolutionResult(
                    specifier=spec, kind=parsed.kind.value, path=None, error=str(exc), cdn_url=url
                )

        if is_debug_enabled(logger):
            logger.debug(
                "Resolved specifier",
                extra=extra_context(
                    event="resolve",
                    component="service",
                    outcome="success",
                    specifier=spec,
                    target=resolved.path,
                    duration_ms=t.duration_ms(),
                ),
            )
        return ResolutionResult(
            specifier=spec, kind=resolved.kind.value, path=resolved.path, error=None, cdn_url=url
        )

    def resolve_all(self, specs: Iterable[str]) -> List[ResolutionResult]:
        """Resolve each specifier in order, one result per input."""
        results = [self.resolve(spec) for spec in specs]
        failures = sum(1 for r in results if not r.ok)
        logger.info("Resolved %d specifier(s), %d failure(s)", len(results), failures)
        return results
