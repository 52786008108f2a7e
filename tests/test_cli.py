import json

import pytest
from click.testing import CliRunner

from fileroute.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestResolveCommand:
    def test_json_output(self, runner):
        result = runner.invoke(main, ['--plain', 'resolve', '--json', 'file://target/data/foo/bar/?recursive=true&delay=2s'])
        assert result.exit_code == 0, result.output
        values = json.loads(result.output)
        assert values['root_path'] == 'target/data/foo/bar'
        assert values['is_absolute'] is False
        assert values['recursive'] is True
        assert values['delay'] == 2000

    def test_table_output(self, runner):
        result = runner.invoke(main, ['--plain', 'resolve', 'file:/data/in?readLock=changed'])
        assert result.exit_code == 0, result.output
        assert 'rootPath' in result.output
        assert '/data/in' in result.output
        assert 'changed' in result.output

    def test_unknown_option(self, runner):
        result = runner.invoke(main, ['--plain', 'resolve', 'file:inbox?recursiv=true'])
        assert result.exit_code == 1
        assert "Unknown option 'recursiv'" in result.output
        assert 'recursive' in result.output

    def test_unsupported_charset(self, runner):
        result = runner.invoke(main, ['--plain', 'resolve', 'file:inbox?charset=ASSI'])
        assert result.exit_code == 1
        assert 'Unsupported charset' in result.output

    def test_duration_too_large(self, runner):
        result = runner.invoke(main, ['--plain', 'resolve', 'file:inbox?delay=99999999999999999999'])
        assert result.exit_code == 1
        assert 'duration is too large' in result.output


class TestRelpathCommand:
    def test_nested_file(self, runner):
        result = runner.invoke(main, ['relpath', '/x/y', '/x/y/some/nested/filename.txt'])
        assert result.exit_code == 0
        assert result.output.strip() == 'some/nested/filename.txt'

    def test_outside_root(self, runner):
        result = runner.invoke(main, ['--plain', 'relpath', '/x/y', '/x/yz/file.txt'])
        assert result.exit_code == 1
        assert 'not located under root' in result.output


class TestScanCommand:
    def test_lists_relative_paths(self, runner, sample_root):
        result = runner.invoke(main, ['--plain', 'scan', f'file:{sample_root.as_posix()}?recursive=true'])
        assert result.exit_code == 0, result.output
        assert 'readme.txt' in result.output
        assert 'orders/2024/order-3.csv' in result.output
        assert 'secret.txt' not in result.output

    def test_bad_uri(self, runner):
        result = runner.invoke(main, ['--plain', 'scan', 'ftp://host/inbox'])
        assert result.exit_code == 1
        assert 'unsupported scheme' in result.output
