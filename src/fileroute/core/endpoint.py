"""
Endpoint factory.

Turns a normalized root and a bound option record into an immutable
EndpointConfig, running the checks that need more than one field or a
look at the filesystem.
"""

import logging
import os
from dataclasses import fields
from typing import Optional

from ..errors import (
    ConfigurationError,
    ConfigurationIssue,
    FileRouteError,
    InvalidUriError,
    ResolveEndpointFailedError,
)
from ..utils.encodings import is_supported_charset
from ..utils.path_utils import PathUtils
from .models import Config, EndpointConfig, EndpointOptions
from .options import bind_options
from .uri import parse_query, split_uri

logger = logging.getLogger(__name__)


def _root_exists(root_path: str, is_absolute: bool, base_dir: str) -> bool:
    """Check whether the root is an existing directory."""
    path = root_path.replace('/', os.sep)
    if not is_absolute:
        path = os.path.join(base_dir, path)
    return os.path.isdir(path)


def build_endpoint(
    root_path: str,
    is_absolute: bool,
    options: EndpointOptions,
    *,
    uri: str = '',
    config: Optional[Config] = None,
) -> EndpointConfig:
    """
    Assemble and cross-validate an endpoint configuration.

    Args:
        root_path: Canonical root as returned by PathUtils.normalize_root.
        is_absolute: Whether the root was written in absolute form.
        options: Bound option record.
        uri: Original endpoint URI, kept for display.
        config: Process settings; relative roots are checked against
            ``config.working_directory``.

    Returns:
        Immutable EndpointConfig.

    Raises:
        ConfigurationError: If the combination of root and options is
            unusable.
    """
    config = config or Config()

    if not root_path:
        raise ConfigurationError(ConfigurationIssue.EMPTY_ROOT, "Endpoint root path is empty")

    if options.charset is not None and not is_supported_charset(options.charset):
        raise ConfigurationError(
            ConfigurationIssue.UNSUPPORTED_CHARSET,
            f"Unsupported charset: {options.charset}",
            "Use an encoding name such as UTF-8, ISO-8859-1 or cp1252",
        )

    if options.delete and options.noop:
        raise ConfigurationError(
            ConfigurationIssue.CONFLICTING_OPTIONS,
            "Options 'delete' and 'noop' cannot both be true",
        )

    if options.max_depth is not None and options.min_depth > options.max_depth:
        raise ConfigurationError(
            ConfigurationIssue.INVALID_DEPTH_RANGE,
            f"minDepth ({options.min_depth}) is greater than maxDepth ({options.max_depth})",
        )

    if options.starting_directory_must_exist and not _root_exists(
            root_path, is_absolute, config.working_directory):
        raise ConfigurationError(
            ConfigurationIssue.MISSING_STARTING_DIRECTORY,
            f"Starting directory does not exist: {root_path}",
            "Create the directory or drop startingDirectoryMustExist",
        )

    endpoint = EndpointConfig(root_path=root_path, is_absolute=is_absolute, uri=uri,
                              **{f.name: getattr(options, f.name) for f in fields(EndpointOptions)})
    logger.debug(f"Built endpoint for root '{root_path}' (absolute={is_absolute})")
    return endpoint


def resolve_endpoint(uri: str, config: Optional[Config] = None) -> EndpointConfig:
    """
    Resolve an endpoint URI into a validated EndpointConfig.

    Args:
        uri: Endpoint address such as ``file:inbox?recursive=true``.
        config: Process settings. Defaults to a fresh Config.

    Returns:
        Immutable EndpointConfig.

    Raises:
        ResolveEndpointFailedError: On any failure. The specific error is
            available as ``cause`` and its category as ``kind``.
    """
    config = config or Config()

    try:
        parts = split_uri(uri)
        if parts.scheme != config.scheme.lower():
            raise InvalidUriError(uri, f"unsupported scheme '{parts.scheme}' (expected '{config.scheme}')")

        root_path, is_absolute = PathUtils.normalize_root(parts.path_part, parts.has_authority_marker)
        options = bind_options(parse_query(parts.query))
        return build_endpoint(root_path, is_absolute, options, uri=uri, config=config)

    except FileRouteError as e:
        logger.debug(f"Resolution of '{uri}' failed: {e.message}")
        raise ResolveEndpointFailedError(uri, e) from e
