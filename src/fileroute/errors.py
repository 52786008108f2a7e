"""
Error taxonomy for endpoint resolution.

Every failure carries a ``kind`` tag so callers can branch on what went
wrong without depending on the concrete exception class.
"""

from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    """Closed set of failure categories."""
    UNKNOWN_OPTION = "unknown_option"
    INVALID_OPTION_VALUE = "invalid_option_value"
    CONFIGURATION = "configuration"
    PATH_OUTSIDE_ROOT = "path_outside_root"
    INVALID_URI = "invalid_uri"


class ConfigurationIssue(Enum):
    """Cross-field validation failures reported by ConfigurationError."""
    EMPTY_ROOT = "empty_root"
    UNSUPPORTED_CHARSET = "unsupported_charset"
    MISSING_STARTING_DIRECTORY = "missing_starting_directory"
    MISSING_DIRECTORY = "missing_directory"
    CONFLICTING_OPTIONS = "conflicting_options"
    INVALID_DEPTH_RANGE = "invalid_depth_range"


class FileRouteError(Exception):
    """Base exception for all fileroute errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}\nSuggestion: {self.suggestion}"
        return self.message


class InvalidUriError(FileRouteError):
    """The endpoint URI could not be split into scheme, path and query."""

    kind = ErrorKind.INVALID_URI

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Invalid endpoint URI '{uri}': {reason}")


class UnknownOptionError(FileRouteError):
    """A query option is not part of the option schema."""

    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, key: str, candidates: Optional[List[str]] = None):
        self.key = key
        self.candidates = list(candidates or [])
        suggestion = None
        if self.candidates:
            suggestion = "Did you mean: " + ", ".join(self.candidates) + "?"
        super().__init__(f"Unknown option '{key}'", suggestion)


class InvalidOptionValueError(FileRouteError):
    """A recognized option has a value its parser rejects."""

    kind = ErrorKind.INVALID_OPTION_VALUE

    def __init__(self, key: str, value: str, reason: str = ""):
        self.key = key
        self.value = value
        self.reason = reason
        message = f"Invalid value '{value}' for option '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigurationError(FileRouteError):
    """Cross-field validation failed while building an endpoint."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, issue: ConfigurationIssue, message: str, suggestion: Optional[str] = None):
        self.issue = issue
        super().__init__(message, suggestion)


class PathOutsideRootError(FileRouteError):
    """A file path is not a proper descendant of the endpoint root."""

    kind = ErrorKind.PATH_OUTSIDE_ROOT

    def __init__(self, root: str, path: str):
        self.root = root
        self.path = path
        super().__init__(f"Path '{path}' is not located under root '{root}'")


class ResolveEndpointFailedError(FileRouteError):
    """Wraps any failure raised while resolving an endpoint URI."""

    def __init__(self, uri: str, cause: FileRouteError):
        self.uri = uri
        self.cause = cause
        super().__init__(f"Failed to resolve endpoint '{uri}': {cause.message}", cause.suggestion)

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.cause.kind
