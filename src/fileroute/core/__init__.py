"""Core components for fileroute."""

from .models import Config, EndpointOptions, EndpointConfig, GenericFile
from .options import OPTION_SCHEMA, OptionSpec, bind_options
from .uri import EndpointUri, split_uri, parse_query
from .endpoint import build_endpoint, resolve_endpoint

__all__ = [
    "Config",
    "EndpointOptions",
    "EndpointConfig",
    "GenericFile",
    "OPTION_SCHEMA",
    "OptionSpec",
    "bind_options",
    "EndpointUri",
    "split_uri",
    "parse_query",
    "build_endpoint",
    "resolve_endpoint",
]
