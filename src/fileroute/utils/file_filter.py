"""
File filtering utilities for fileroute.

This module decides which directories a consumer descends into and which
files it hands to its processor, based on the endpoint's include/exclude
patterns, depth limits and hidden-file handling.
"""

import re
from typing import Optional, Pattern

from ..core.models import Config, EndpointConfig


class FileFilter:
    """Handles file filtering logic for one endpoint."""

    def __init__(self, endpoint: EndpointConfig, config: Config):
        self.endpoint = endpoint
        self.config = config
        self._include: Optional[Pattern] = re.compile(endpoint.include) if endpoint.include else None
        self._exclude: Optional[Pattern] = re.compile(endpoint.exclude) if endpoint.exclude else None

    def _is_hidden(self, name: str) -> bool:
        return name.startswith('.') and not self.config.include_hidden_files

    def should_exclude_directory(self, dir_name: str, depth: int) -> bool:
        """
        Check if a directory should not be descended into.

        Args:
            dir_name: Name of the directory (not full path).
            depth: Depth of the directory itself, the root's children being 1.

        Returns:
            True if directory should be excluded, False otherwise.
        """
        if self._is_hidden(dir_name):
            return True
        if not self.endpoint.recursive:
            return True
        max_depth = self.endpoint.max_depth
        # Files inside the directory sit one level deeper than it
        return max_depth is not None and depth + 1 > max_depth

    def should_skip_file(self, file_name: str, depth: int) -> bool:
        """
        Check if a file should be skipped.

        Args:
            file_name: Name of the file (not full path).
            depth: Depth of the file, files directly in the root being 1.

        Returns:
            True if file should be skipped, False otherwise.
        """
        if self._is_hidden(file_name):
            return True

        if depth < self.endpoint.min_depth:
            return True
        if self.endpoint.max_depth is not None and depth > self.endpoint.max_depth:
            return True

        if self._include is not None and not self._include.fullmatch(file_name):
            return True
        if self._exclude is not None and self._exclude.fullmatch(file_name):
            return True

        return False
