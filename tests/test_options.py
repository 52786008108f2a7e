from dataclasses import fields
from datetime import timedelta

import pytest

from fileroute.core.models import EndpointOptions
from fileroute.core.options import (
    OPTION_SCHEMA,
    READ_LOCK_STRATEGIES,
    bind_options,
    get_option,
    parse_duration,
    suggest_options,
)
from fileroute.errors import ErrorKind, InvalidOptionValueError, UnknownOptionError


class TestOptionSchema:
    def test_schema_covers_every_field(self):
        schema_fields = {spec.field for spec in OPTION_SCHEMA.values()}
        assert schema_fields == {f.name for f in fields(EndpointOptions)}

    def test_schema_defaults_match_record_defaults(self):
        defaults = EndpointOptions()
        for spec in OPTION_SCHEMA.values():
            assert getattr(defaults, spec.field) == spec.default, spec.name

    def test_schema_is_read_only(self):
        with pytest.raises(TypeError):
            OPTION_SCHEMA['recursiv'] = OPTION_SCHEMA['recursive']

    def test_documented_options_present(self):
        for name in ['delete', 'recursive', 'charset', 'delay', 'initialDelay', 'useFixedDelay',
                     'bridgeErrorHandler', 'autoCreate', 'startingDirectoryMustExist',
                     'directoryMustExist', 'readLock']:
            assert get_option(name) is not None, name

    def test_get_unknown_option(self):
        assert get_option('recursiv') is None


class TestBindOptions:
    def test_defaults(self):
        options = bind_options({})
        assert options == EndpointOptions()
        assert options.auto_create is True
        assert options.starting_directory_must_exist is False
        assert options.charset is None

    def test_recursive(self):
        assert bind_options({'recursive': 'true'}).recursive is True

    def test_boolean_is_case_insensitive(self):
        assert bind_options({'delete': 'TRUE'}).delete is True
        assert bind_options({'autoCreate': 'False'}).auto_create is False

    def test_charset_kept_verbatim(self):
        assert bind_options({'charset': 'UTF-8'}).charset == 'UTF-8'

    def test_misspelled_option_rejected(self):
        with pytest.raises(UnknownOptionError) as exc_info:
            bind_options({'recursiv': 'true'})
        error = exc_info.value
        assert error.kind is ErrorKind.UNKNOWN_OPTION
        assert error.key == 'recursiv'
        assert 'recursive' in error.candidates
        assert 'Did you mean' in str(error)

    def test_unknown_option_without_candidates(self):
        with pytest.raises(UnknownOptionError) as exc_info:
            bind_options({'zzzzzz': '1'})
        assert exc_info.value.candidates == []
        assert exc_info.value.suggestion is None

    def test_option_names_are_case_sensitive(self):
        with pytest.raises(UnknownOptionError) as exc_info:
            bind_options({'Recursive': 'true'})
        assert exc_info.value.candidates[0] == 'recursive'

    @pytest.mark.parametrize("key,value", [
        ('recursive', 'yes'),
        ('recursive', ''),
        ('delay', '-5'),
        ('delay', 'abc'),
        ('initialDelay', '1x'),
        ('delay', '99999999999999999999'),
        ('delay', '99999999999h'),
        ('readLockTimeout', '99999999999999999999ms'),
        ('readLock', 'bogus'),
        ('readLock', 'CHANGED'),
        ('maxMessagesPerPoll', '-1'),
        ('minDepth', 'one'),
        ('include', '(unclosed'),
        ('charset', ''),
    ])
    def test_invalid_values(self, key, value):
        with pytest.raises(InvalidOptionValueError) as exc_info:
            bind_options({key: value})
        error = exc_info.value
        assert error.kind is ErrorKind.INVALID_OPTION_VALUE
        assert error.key == key
        assert error.value == value

    def test_full_parameter_set(self):
        options = bind_options({
            'delay': '10',
            'useFixedDelay': 'true',
            'initialDelay': '10',
            'bridgeErrorHandler': 'true',
            'autoCreate': 'false',
            'startingDirectoryMustExist': 'true',
            'directoryMustExist': 'true',
            'readLock': 'changed',
        })
        assert options.delay == timedelta(milliseconds=10)
        assert options.initial_delay == timedelta(milliseconds=10)
        assert options.use_fixed_delay is True
        assert options.bridge_error_handler is True
        assert options.auto_create is False
        assert options.starting_directory_must_exist is True
        assert options.directory_must_exist is True
        assert options.read_lock == 'changed'

    def test_surrounding_whitespace_ignored(self):
        options = bind_options({'readLock': ' changed ', 'recursive': 'true ', 'maxDepth': ' 2'})
        assert options.read_lock == 'changed'
        assert options.recursive is True
        assert options.max_depth == 2

    def test_every_read_lock_strategy_accepted(self):
        for strategy in READ_LOCK_STRATEGIES:
            assert bind_options({'readLock': strategy}).read_lock == strategy

    def test_depth_and_limits(self):
        options = bind_options({'minDepth': '1', 'maxDepth': '3', 'maxMessagesPerPoll': '25'})
        assert (options.min_depth, options.max_depth, options.max_messages_per_poll) == (1, 3, 25)

    def test_binding_order_irrelevant(self):
        first = bind_options({'recursive': 'true', 'delay': '5s'})
        second = bind_options({'delay': '5s', 'recursive': 'true'})
        assert first == second


class TestParseDuration:
    @pytest.mark.parametrize("raw,expected", [
        ('0', timedelta(0)),
        ('10', timedelta(milliseconds=10)),
        ('500ms', timedelta(milliseconds=500)),
        ('5s', timedelta(seconds=5)),
        ('1m30s', timedelta(seconds=90)),
        ('2m', timedelta(minutes=2)),
        ('1h', timedelta(hours=1)),
        ('1h2m3s4ms', timedelta(hours=1, minutes=2, seconds=3, milliseconds=4)),
    ])
    def test_valid(self, raw, expected):
        assert parse_duration(raw) == expected

    @pytest.mark.parametrize("raw", ['', '-5', 'abc', '5 s', '30s1m', '1.5s', '--5',
                                     '99999999999999999999', '99999999999h'])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_duration(raw)


def test_suggest_options():
    assert suggest_options('readlock')[0] == 'readLock'
    assert suggest_options('initialdelay')[0] == 'initialDelay'
