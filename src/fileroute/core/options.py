"""
Option schema and binder for endpoint query options.

The schema is a static table: every option an endpoint understands is
declared here with the field it fills, the parser for its raw value and
its default. Binding walks the caller's options through this table and
rejects anything the table does not know about.
"""

import difflib
import logging
import re
from dataclasses import dataclass
from datetime import timedelta
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..errors import InvalidOptionValueError, UnknownOptionError
from .models import EndpointOptions

logger = logging.getLogger(__name__)

# Lock strategies understood by the (external) poller
READ_LOCK_STRATEGIES = (
    'none',
    'markerFile',
    'fileLock',
    'rename',
    'changed',
    'idempotent',
    'idempotent-changed',
    'idempotent-rename',
)

_DURATION_PATTERN = re.compile(
    r'^(?:(?P<hours>\d+)h)?'
    r'(?:(?P<minutes>\d+)m(?!s))?'
    r'(?:(?P<seconds>\d+)s)?'
    r'(?:(?P<millis>\d+)ms)?$'
)


# Parsers take the raw string and raise ValueError with a short reason.

def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value == 'true':
        return True
    if value == 'false':
        return False
    raise ValueError("expected 'true' or 'false'")


def parse_non_negative_int(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError("expected a whole number") from None
    if value < 0:
        raise ValueError("must not be negative")
    return value


def parse_duration(raw: str) -> timedelta:
    """
    Parse a duration.

    A bare number is a count of milliseconds. Otherwise the value is a
    sequence of units in descending order, e.g. ``1h``, ``1m30s`` or
    ``2s500ms``.
    """
    value = raw.strip()
    if value.isdigit() or (value.startswith('-') and value[1:].isdigit()):
        millis = int(value)
        if millis < 0:
            raise ValueError("duration must not be negative")
        try:
            return timedelta(milliseconds=millis)
        except OverflowError:
            raise ValueError("duration is too large") from None

    match = _DURATION_PATTERN.match(value)
    if not value or match is None or not any(match.groupdict().values()):
        raise ValueError("expected milliseconds or a duration such as '1m30s'")

    parts = {name: int(amount) for name, amount in match.groupdict().items() if amount}
    try:
        return timedelta(
            hours=parts.get('hours', 0),
            minutes=parts.get('minutes', 0),
            seconds=parts.get('seconds', 0),
            milliseconds=parts.get('millis', 0),
        )
    except OverflowError:
        raise ValueError("duration is too large") from None


def parse_string(raw: str) -> str:
    if not raw.strip():
        raise ValueError("must not be empty")
    return raw


def parse_regex(raw: str) -> str:
    if not raw:
        raise ValueError("must not be empty")
    try:
        re.compile(raw)
    except re.error as e:
        raise ValueError(f"not a valid regular expression ({e})") from None
    return raw


def choice_parser(choices: Sequence[str]) -> Callable[[str], str]:
    """Build a parser accepting exactly one of ``choices``."""
    def parse_choice(raw: str) -> str:
        value = raw.strip()
        if value not in choices:
            raise ValueError("expected one of " + ", ".join(choices))
        return value
    return parse_choice


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of one URI option."""

    name: str
    field: str
    parser: Callable[[str], Any]
    default: Any
    description: str = ''


_OPTIONS = [
    OptionSpec('charset', 'charset', parse_string, None,
               "Encoding of the files consumed from this endpoint"),
    OptionSpec('recursive', 'recursive', parse_bool, False,
               "Also look for files in sub directories"),
    OptionSpec('delete', 'delete', parse_bool, False,
               "Delete the file after it has been processed"),
    OptionSpec('noop', 'noop', parse_bool, False,
               "Leave files untouched after processing"),
    OptionSpec('autoCreate', 'auto_create', parse_bool, True,
               "Create missing directories when the consumer starts"),
    OptionSpec('startingDirectoryMustExist', 'starting_directory_must_exist', parse_bool, False,
               "Fail endpoint creation if the root directory does not exist"),
    OptionSpec('directoryMustExist', 'directory_must_exist', parse_bool, False,
               "Fail polling if the root directory disappears"),
    OptionSpec('bridgeErrorHandler', 'bridge_error_handler', parse_bool, False,
               "Route consumer errors to the routing engine's error handler"),
    OptionSpec('useFixedDelay', 'use_fixed_delay', parse_bool, True,
               "Poll with a fixed delay instead of a fixed rate"),
    OptionSpec('delay', 'delay', parse_duration, timedelta(milliseconds=500),
               "Time between polls"),
    OptionSpec('initialDelay', 'initial_delay', parse_duration, timedelta(milliseconds=1000),
               "Time before the first poll"),
    OptionSpec('readLock', 'read_lock', choice_parser(READ_LOCK_STRATEGIES), None,
               "Strategy used to make sure a file is complete before it is consumed"),
    OptionSpec('readLockTimeout', 'read_lock_timeout', parse_duration, timedelta(seconds=10),
               "Maximum time to wait for the read lock"),
    OptionSpec('readLockCheckInterval', 'read_lock_check_interval', parse_duration, timedelta(seconds=1),
               "Interval between read lock attempts"),
    OptionSpec('include', 'include', parse_regex, None,
               "Only consume files whose name matches this regular expression"),
    OptionSpec('exclude', 'exclude', parse_regex, None,
               "Skip files whose name matches this regular expression"),
    OptionSpec('maxMessagesPerPoll', 'max_messages_per_poll', parse_non_negative_int, 0,
               "Maximum number of files consumed per poll (0 for no limit)"),
    OptionSpec('minDepth', 'min_depth', parse_non_negative_int, 0,
               "Minimum directory depth at which files are consumed"),
    OptionSpec('maxDepth', 'max_depth', parse_non_negative_int, None,
               "Maximum directory depth at which files are consumed"),
]

OPTION_SCHEMA: Mapping[str, OptionSpec] = MappingProxyType({spec.name: spec for spec in _OPTIONS})


def get_option(name: str) -> Optional[OptionSpec]:
    """Look up a schema entry by its URI option name."""
    return OPTION_SCHEMA.get(name)


def suggest_options(name: str, limit: int = 3) -> List[str]:
    """Return known option names that look like ``name``."""
    lowered = {key.lower(): key for key in OPTION_SCHEMA}
    matches = difflib.get_close_matches(name.lower(), list(lowered), n=limit, cutoff=0.6)
    return [lowered[match] for match in matches]


def bind_options(raw_options: Mapping[str, str]) -> EndpointOptions:
    """
    Bind raw query options onto an EndpointOptions record.

    Args:
        raw_options: Option name to raw string value, as parsed from the
            query part of an endpoint URI.

    Returns:
        EndpointOptions with every field either parsed from ``raw_options``
        or set to its schema default.

    Raises:
        UnknownOptionError: If a key is not declared in the schema.
        InvalidOptionValueError: If a value fails its option's parser.
    """
    values: Dict[str, Any] = {spec.field: spec.default for spec in OPTION_SCHEMA.values()}

    for key, raw in raw_options.items():
        spec = OPTION_SCHEMA.get(key)
        if spec is None:
            raise UnknownOptionError(key, suggest_options(key))
        if raw is None:
            raise InvalidOptionValueError(key, '', "a value is required")
        try:
            values[spec.field] = spec.parser(raw)
        except ValueError as e:
            raise InvalidOptionValueError(key, raw, str(e)) from e

    logger.debug(f"Bound {len(raw_options)} option(s): {sorted(raw_options)}")
    return EndpointOptions(**values)
