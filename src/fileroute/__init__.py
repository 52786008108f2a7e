"""Resolve file endpoint URIs into validated configurations."""

__version__ = "0.1.0"

from .core import (
    Config,
    EndpointConfig,
    EndpointOptions,
    GenericFile,
    OPTION_SCHEMA,
    bind_options,
    build_endpoint,
    resolve_endpoint,
)
from .consumers import FileConsumer, create_consumer
from .errors import (
    ConfigurationError,
    ConfigurationIssue,
    ErrorKind,
    FileRouteError,
    InvalidOptionValueError,
    InvalidUriError,
    PathOutsideRootError,
    ResolveEndpointFailedError,
    UnknownOptionError,
)
from .utils.path_utils import PathUtils

__all__ = [
    "Config",
    "EndpointConfig",
    "EndpointOptions",
    "GenericFile",
    "OPTION_SCHEMA",
    "bind_options",
    "build_endpoint",
    "resolve_endpoint",
    "FileConsumer",
    "create_consumer",
    "ConfigurationError",
    "ConfigurationIssue",
    "ErrorKind",
    "FileRouteError",
    "InvalidOptionValueError",
    "InvalidUriError",
    "PathOutsideRootError",
    "ResolveEndpointFailedError",
    "UnknownOptionError",
    "PathUtils",
]
