"""
Tests for the command line entry point.
"""

from head_shell import cli
from head_shell.builtins import BUILTINS, get_builtin
from head_shell.commands.head import cmd_head


class TestRegistry:
    """Test command lookup."""

    def test_head_is_registered(self):
        assert get_builtin('head') is cmd_head
        assert 'head' in BUILTINS

    def test_unknown_command(self):
        assert get_builtin('tail') is None


class TestMain:
    """Test cli.main against the real process streams."""

    def test_prints_file(self, test_data_dir, capsysbinary, reset_logger):
        exit_code = cli.main(['-n', '2', 'three.txt'])

        captured = capsysbinary.readouterr()
        assert exit_code == 0
        assert captured.out == b'one\ntwo\n'
        assert captured.err == b''

    def test_open_failure_exit_code(self, test_data_dir, capsysbinary, reset_logger):
        """Open failures alone still exit successfully."""
        exit_code = cli.main(['missing.txt'])

        captured = capsysbinary.readouterr()
        assert exit_code == 0
        assert captured.err == b'missing.txt: No such file or directory\n'

    def test_usage_error_exit_code(self, capsysbinary, reset_logger):
        exit_code = cli.main(['-n', '1', '-c', '1'])

        captured = capsysbinary.readouterr()
        assert exit_code == 2
        assert captured.out == b''

    def test_log_level_from_environment(self, test_data_dir, capsysbinary, monkeypatch, reset_logger):
        monkeypatch.setenv('HEAD_SHELL_LOG_LEVEL', 'DEBUG')

        cli.main(['three.txt'])

        assert reset_logger.level == 10
