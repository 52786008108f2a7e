"""Path normalization utilities for cross-platform compatibility."""

import logging
import re
from typing import List, Tuple

from ..errors import PathOutsideRootError

SEPARATOR = '/'

_SEPARATOR_RUN = re.compile(r'/{2,}')

logger = logging.getLogger(__name__)


class PathUtils:
    """Utilities for consistent path handling across platforms."""

    @staticmethod
    def normalize_path(path: str) -> str:
        """
        Normalize path separators to forward slashes.

        Args:
            path: File path with potentially mixed separators

        Returns:
            Path with forward slashes only
        """
        return path.replace('\\\\', '/').replace('\\', '/')

    @staticmethod
    def collapse_separators(path: str) -> str:
        """Normalize separators and squeeze runs of them into one."""
        return _SEPARATOR_RUN.sub(SEPARATOR, PathUtils.normalize_path(path))

    @staticmethod
    def normalize_and_split(path: str) -> List[str]:
        """
        Normalize path and split into components.

        Empty components (from leading, trailing or doubled separators)
        are dropped.

        Args:
            path: File path to split

        Returns:
            List of path components
        """
        return [part for part in PathUtils.normalize_path(path).split('/') if part]

    @staticmethod
    def join_path_components(components: List[str]) -> str:
        """
        Join path components with forward slashes.

        Args:
            components: List of path components

        Returns:
            Joined path with forward slashes
        """
        return '/'.join(components)

    @staticmethod
    def normalize_root(path_part: str, has_authority_marker: bool = False) -> Tuple[str, bool]:
        """
        Canonicalize the path part of an endpoint URI into a root path.

        ``scheme:a/b`` and ``scheme://a/b`` are relative roots while
        ``scheme:/a/b`` and ``scheme:///a/b`` are absolute. A path part still
        carrying the ``//`` authority marker is accepted as well, which keeps
        the function idempotent on its own output.

        Args:
            path_part: Text between the scheme and the query string
            has_authority_marker: True when the caller already stripped ``//``

        Returns:
            Tuple of (root_path, is_absolute). The root uses ``/`` as its
            only separator and has no trailing separator unless it is ``/``.
        """
        path = PathUtils.normalize_path(path_part or '')

        if not has_authority_marker and path.startswith('//'):
            path = path[2:]

        if path in ('', SEPARATOR):
            return SEPARATOR, True

        is_absolute = path.startswith(SEPARATOR)
        path = _SEPARATOR_RUN.sub(SEPARATOR, path)

        # A path made only of separators is the bare root
        if path == SEPARATOR:
            return SEPARATOR, True

        path = path.rstrip(SEPARATOR)
        logger.debug(f"Normalized root '{path_part}' -> '{path}' (absolute={is_absolute})")
        return path, is_absolute

    @staticmethod
    def relative_of(root_path: str, absolute_file_path: str) -> str:
        """
        Compute the path of a file relative to an endpoint root.

        Args:
            root_path: Root directory of the endpoint
            absolute_file_path: Path of a file found beneath the root

        Returns:
            Relative path with forward slashes and no leading separator

        Raises:
            PathOutsideRootError: If the file is not a proper descendant
                of the root.
        """
        root = PathUtils.collapse_separators(root_path)
        path = PathUtils.collapse_separators(absolute_file_path)

        if not root or not path.startswith(root):
            raise PathOutsideRootError(root_path, absolute_file_path)

        remainder = path[len(root):]
        if not root.endswith(SEPARATOR):
            # /x/yz is not under /x/y
            if not remainder.startswith(SEPARATOR):
                raise PathOutsideRootError(root_path, absolute_file_path)
            remainder = remainder[1:]

        if not remainder or remainder == SEPARATOR:
            raise PathOutsideRootError(root_path, absolute_file_path)

        return remainder.lstrip(SEPARATOR)
