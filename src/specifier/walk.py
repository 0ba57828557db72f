"""Upward node_modules search shared by the npm and jsr resolvers."""

from __future__ import annotations

import logging
import os

from common.fs import FileSystem
from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from .errors import PathTraversalError

logger = logging.getLogger(__name__)


def absolute_start_dir(root_dir: str) -> str:
    """Return ``root_dir`` made absolute against the current directory."""
    if os.path.isabs(root_dir):
        return os.path.normpath(root_dir)
    return os.path.abspath(root_dir)


def _is_within(candidate: str, boundary: str) -> bool:
    """True when ``candidate`` is strictly below ``boundary`` (lexically)."""
    if candidate == boundary:
        return False
    try:
        return os.path.commonpath([boundary, candidate]) == boundary
    except ValueError:
        # Different drives on Windows
        return False


def guarded_candidate(directory: str, package_subpath: str, file: str, specifier: str) -> str:
    """Join and normalize a node_modules candidate, rejecting escapes.

    Raises:
        PathTraversalError: The normalized candidate is not inside
            ``<directory>/node_modules``.
    """
    boundary = os.path.join(directory, Constants.NODE_MODULES_DIR)
    candidate = os.path.normpath(os.path.join(boundary, package_subpath, file))
    if not _is_within(candidate, boundary):
        logger.warning("Path traversal attempt blocked: %s", specifier)
        raise PathTraversalError(specifier, candidate, boundary)
    return candidate


def walk_up(fs: FileSystem, start_dir: str, package_subpath: str, file: str, specifier: str):
    """Search ``node_modules/<package_subpath>/<file>`` from ``start_dir`` upwards.

    Args:
        fs: Filesystem capability; only ``exists`` is called.
        start_dir: Absolute directory to start from.
        package_subpath: Directory of the package below node_modules.
        file: Path of the file inside the package.
        specifier: Raw specifier, for errors and logs.

    Returns:
        The first existing candidate path, or None once the filesystem root
        has been searched.

    Raises:
        PathTraversalError: A candidate escaped its node_modules directory.
    """
    directory = start_dir
    while True:
        candidate = guarded_candidate(directory, package_subpath, file, specifier)
        if fs.exists(candidate):
            if is_debug_enabled(logger):
                logger.debug(
                    "node_modules match",
                    extra=extra_context(
                        event="decision",
                        component="walk_up",
                        outcome="found",
                        target=candidate,
                        specifier=specifier,
                    ),
                )
            return candidate

        parent = os.path.dirname(directory)
        if parent == directory:
            return None
        directory = parent
