"""Utility modules for fileroute."""

# path_utils and encodings must load before file_filter, which pulls in core
from .path_utils import PathUtils
from .encodings import is_supported_charset, canonical_charset
from .file_filter import FileFilter
from .console import ConsoleManager

__all__ = ["PathUtils", "is_supported_charset", "canonical_charset", "FileFilter", "ConsoleManager"]
