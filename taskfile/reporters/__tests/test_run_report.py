#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs
from taskfile.enums import RunState_e
from taskfile.reporters.run_report import LINE_LEN, RunReport, format_elapsed
from taskfile.utils.log_config import LogConfig

# ##-- end 1st party imports

logging = logmod.root

class FakeClock:

    def __init__(self, *times:float):
        self.times = list(times)

    def __call__(self) -> float:
        return self.times.pop(0)

@pytest.fixture
def printing(capsys):
    conf = LogConfig()
    conf.setup()
    yield conf
    conf.clear()

class TestFormatElapsed:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    @pytest.mark.parametrize("secs,expected", [
        (0, "0m0.000s"),
        (1.234, "0m1.234s"),
        (59.9999, "1m0.000s"),
        (83.5, "1m23.500s"),
        (3600.05, "60m0.050s"),
        (-1, "0m0.000s"),
    ])
    def test_format(self, secs, expected):
        assert(format_elapsed(secs) == f"Task completed in {expected}")

class TestRunReport:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_initial(self):
        report = RunReport()
        assert(report.state is RunState_e.NOT_STARTED)
        assert(report.code is None)
        assert(report.enabled)

    def test_success(self, printing, capsys):
        with RunReport(clock=FakeClock(0.0, 1.0, 2.5)) as report:
            report.task_started("clean")
            report.finish(0)

        lines = capsys.readouterr().out.splitlines()
        assert(len(lines) == 4)
        assert(lines[0] == " BEGIN ".center(LINE_LEN, "-"))
        assert(lines[1] == "Task completed in 0m1.500s")
        assert(lines[2] == API.SUCCESS_MSG)
        assert(lines[3] == " END ".center(LINE_LEN, "-"))
        assert(report.state is RunState_e.SUCCEEDED)
        assert(report.elapsed == 1.5)

    def test_failure(self, printing, capsys):
        with RunReport(clock=FakeClock(0.0, 0.0, 0.25)) as report:
            report.task_started("fail")
            report.finish(3)

        lines = capsys.readouterr().out.splitlines()
        assert(lines[2] == "ERROR (3)")
        assert(report.state is RunState_e.FAILED)
        assert(report.code == 3)

    def test_no_task_no_timing(self, printing, capsys):
        with RunReport(clock=FakeClock(0.0, 1.0)):
            pass

        lines = capsys.readouterr().out.splitlines()
        assert(lines[1:] == [API.SUCCESS_MSG, " END ".center(LINE_LEN, "-")])

    def test_error_sets_code(self, printing, capsys):
        with pytest.raises(terrs.UnknownTaskError):
            with RunReport(clock=FakeClock(0.0, 1.0)) as report:
                raise terrs.UnknownTaskError("blah")

        assert(report.code == API.ExitCodes.UNKNOWN_TASK)
        assert("ERROR (127)" in capsys.readouterr().out)

    def test_python_error(self, printing, capsys):
        with pytest.raises(ValueError):
            with RunReport(clock=FakeClock(0.0, 1.0)) as report:
                raise ValueError("bad")

        assert(report.code == API.ExitCodes.PYTHON_FAIL)

    def test_finish_wins_over_error(self, printing, capsys):
        with pytest.raises(ValueError):
            with RunReport(clock=FakeClock(0.0, 1.0)) as report:
                report.finish(4)
                raise ValueError("bad")

        assert(report.code == 4)

    def test_reported_once(self, printing, capsys):
        with RunReport(clock=FakeClock(0.0, 1.0)) as report:
            report.report()

        out = capsys.readouterr().out
        assert(out.count(" END ") == 1)
        assert(out.count(API.SUCCESS_MSG) == 1)

    def test_disabled(self, printing, capsys):
        config = TomlGuard({"settings": {"report": {"enabled": False}}})
        with RunReport(config, clock=FakeClock(0.0, 1.0, 2.0)) as report:
            report.task_started("clean")
            report.finish(2)

        assert(capsys.readouterr().out == "")
        assert(report.state is RunState_e.FAILED)

    def test_custom_markers(self, printing, capsys):
        config = TomlGuard({"settings": {"report": {"begin": "START", "end": "STOP"}}})
        with RunReport(config, clock=FakeClock(0.0, 1.0)):
            pass

        lines = capsys.readouterr().out.splitlines()
        assert(lines[0] == " START ".center(LINE_LEN, "-"))
        assert(lines[-1] == " STOP ".center(LINE_LEN, "-"))

    def test_given_logger(self, mocker):
        log = mocker.Mock(spec=logmod.Logger)
        with RunReport(clock=FakeClock(0.0, 1.0), log=log):
            pass

        assert(log.info.call_count == 3)
