"""
Core data models for fileroute.

This module contains the fundamental data structures used throughout
the application: process settings, the bound endpoint options, the
resolved endpoint configuration and the per-file model handed to
consumers.
"""

import os
from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class Config:
    """Process-wide settings for fileroute."""

    # Scheme accepted by resolve_endpoint (the part before the first ':')
    scheme: str = field(default_factory=lambda: os.getenv('FILEROUTE_SCHEME', 'file'))

    # Base directory for relative roots in existence checks and scans
    working_directory: str = field(default_factory=lambda: os.getenv('FILEROUTE_WORKDIR') or os.getcwd())

    log_level: str = field(default_factory=lambda: os.getenv('FILEROUTE_LOG_LEVEL', 'WARNING'))

    # Files and directories starting with '.' are skipped when scanning
    include_hidden_files: bool = False


@dataclass(frozen=True)
class EndpointOptions:
    """
    Typed record of every option an endpoint URI may carry.

    Instances are produced by ``bind_options``; each field corresponds
    to exactly one entry in the option schema.
    """

    charset: Optional[str] = None
    recursive: bool = False
    delete: bool = False
    noop: bool = False
    auto_create: bool = True
    starting_directory_must_exist: bool = False
    directory_must_exist: bool = False
    bridge_error_handler: bool = False
    use_fixed_delay: bool = True
    delay: timedelta = timedelta(milliseconds=500)
    initial_delay: timedelta = timedelta(milliseconds=1000)
    read_lock: Optional[str] = None
    read_lock_timeout: timedelta = timedelta(seconds=10)
    read_lock_check_interval: timedelta = timedelta(seconds=1)
    include: Optional[str] = None
    exclude: Optional[str] = None
    max_messages_per_poll: int = 0  # 0 means unlimited
    min_depth: int = 0
    max_depth: Optional[int] = None  # None means unlimited

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view with durations expressed in milliseconds."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, timedelta):
                value = int(value.total_seconds() * 1000)
            result[f.name] = value
        return result


@dataclass(frozen=True)
class EndpointConfig(EndpointOptions):
    """
    Resolved, validated configuration of a file endpoint.

    Built by ``build_endpoint``/``resolve_endpoint``. The root path always
    uses '/' as separator and never ends with one unless it is the bare
    root.
    """

    root_path: str = ''
    is_absolute: bool = False
    uri: str = ''

    @property
    def options(self) -> EndpointOptions:
        """The option record this endpoint was built from."""
        return EndpointOptions(**{f.name: getattr(self, f.name) for f in fields(EndpointOptions)})

    @property
    def file_path(self) -> str:
        """Root path using the platform separator."""
        return self.root_path.replace('/', os.sep)

    def resolve_against(self, base_dir: str) -> str:
        """
        Resolve the root to an absolute filesystem path.

        Args:
            base_dir: Directory that relative roots are interpreted against.

        Returns:
            Absolute path of the root directory.
        """
        if self.is_absolute:
            return os.path.abspath(self.file_path)
        return os.path.abspath(os.path.join(base_dir, self.file_path))

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        # Keep the identifying fields first for display
        return {
            'uri': result.pop('uri'),
            'root_path': result.pop('root_path'),
            'is_absolute': result.pop('is_absolute'),
            **result,
        }


@dataclass(frozen=True)
class GenericFile:
    """A file discovered beneath an endpoint root."""

    absolute_path: str
    relative_path: str
    endpoint_path: str
    charset: Optional[str] = None
    file_length: Optional[int] = None
    last_modified: Optional[datetime] = None

    @property
    def file_name_only(self) -> str:
        """Last segment of the relative path."""
        return self.relative_path.rsplit('/', 1)[-1]

    @property
    def parent_relative_path(self) -> str:
        """Relative path of the containing directory ('' at the root)."""
        if '/' not in self.relative_path:
            return ''
        return self.relative_path.rsplit('/', 1)[0]

    @property
    def depth(self) -> int:
        """Number of directories between the root and this file, plus one."""
        return self.relative_path.count('/') + 1
