"""Tests for the config module."""

import logging

import pytest

from myshell.config import PROMPT, ShellConfig


class TestFromEnviron:
    def test_splits_path_in_order(self):
        config = ShellConfig.from_environ({"PATH": "/usr/local/bin:/usr/bin:/bin"})
        assert config.search_path == ("/usr/local/bin", "/usr/bin", "/bin")

    def test_missing_path(self):
        assert ShellConfig.from_environ({}).search_path == ()

    def test_empty_path(self):
        assert ShellConfig.from_environ({"PATH": ""}).search_path == ()

    def test_prompt(self):
        assert ShellConfig.from_environ({}).prompt == PROMPT == "$ "

    def test_default_log_level(self):
        assert ShellConfig.from_environ({}).log_level == logging.WARNING

    @pytest.mark.parametrize(
        ("value", "level"),
        [("debug", logging.DEBUG), ("INFO", logging.INFO), ("10", 10), ("bogus", logging.WARNING)],
    )
    def test_log_level_from_env(self, value, level):
        assert ShellConfig.from_environ({"MYSHELL_LOG_LEVEL": value}).log_level == level

    def test_is_immutable(self):
        config = ShellConfig()
        with pytest.raises(AttributeError):
            config.search_path = ("/tmp",)
