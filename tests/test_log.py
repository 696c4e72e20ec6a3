"""Tests for tiffscope/log.py -- CLI color formatting."""

import pytest

from tiffscope import log

CLI_HELPERS = [
    log.cli_header,
    log.cli_success,
    log.cli_warning,
    log.cli_error,
    log.cli_tag,
    log.cli_dim,
    log.cli_bold,
]


@pytest.fixture(autouse=True)
def _reset_log_state():
    """Restore log module state after each test."""
    log.set_color_enabled(False)
    yield
    log.set_color_enabled(False)


class TestCLIColorEnabled:
    """All CLI functions return ANSI escape codes when color is enabled."""

    @pytest.fixture(autouse=True)
    def _enable_color(self):
        log.set_color_enabled(True)
        yield

    @pytest.mark.parametrize('helper', CLI_HELPERS)
    def test_wraps_text(self, helper):
        result = helper('Text')
        assert result.startswith('\033[')
        assert result.endswith('\033[0m')
        assert 'Text' in result

    def test_separator(self):
        assert '─' * 60 in log.cli_separator()
        assert '\033[' in log.cli_separator()


class TestCLIColorDisabled:
    """Plain text comes back unchanged when color is off."""

    @pytest.mark.parametrize('helper', CLI_HELPERS)
    def test_plain(self, helper):
        assert helper('Text') == 'Text'

    def test_separator_plain(self):
        assert log.cli_separator() == '─' * 60


class TestTTYDetection:
    def test_non_tty_stdout(self, monkeypatch):
        class _Pipe:
            def isatty(self):
                return False

        monkeypatch.setattr(log.sys, 'stdout', _Pipe())
        assert log._is_tty() is False

    def test_stdout_without_isatty(self, monkeypatch):
        monkeypatch.setattr(log.sys, 'stdout', object())
        assert log._is_tty() is False
