#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import io
import logging as logmod
import sys

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest

# ##-- end 3rd party imports

# ##-- 1st party imports
from taskfile.utils.log import log, prog_name
from taskfile.utils.log_config import LogConfig

# ##-- end 1st party imports

logging = logmod.root

@pytest.fixture
def printing(capsys):
    conf = LogConfig()
    conf.setup()
    yield conf
    conf.clear()

class TestProgName:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    @pytest.mark.parametrize("argv,name", [
        (["/usr/local/bin/tasks", "clean"], "tasks"),
        (["taskfile"], "taskfile"),
        (["/lib/python/taskfile/__main__.py"], "taskfile"),
        ([], "taskfile"),
        (["-c"], "taskfile"),
    ])
    def test_names(self, monkeypatch, argv, name):
        monkeypatch.setattr(sys, "argv", argv)
        assert(prog_name() == name)

class TestLog:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_message(self, monkeypatch, printing, capsys):
        monkeypatch.setattr(sys, "argv", ["tasks"])
        log("Installing", 3)
        assert(capsys.readouterr().out == "[tasks] Installing 3\n")

    def test_stream(self, monkeypatch, printing, capsys):
        monkeypatch.setattr(sys, "argv", ["tasks"])
        log(stream=io.StringIO("first\nsecond\n"))
        assert(capsys.readouterr().out.splitlines() == ["[tasks] first", "[tasks] second"])

    def test_closed_stream(self, printing, capsys):
        stream = io.StringIO("first\n")
        stream.close()
        log(stream=stream)
        assert(capsys.readouterr().out == "")
