#!/usr/bin/env python3
"""
The BEGIN/END wrapper around a single invocation.

    with RunReport(config) as report:
        report.task_started("clean")
        report.finish(code)

On exit, however the block is left, prints:
    Task completed in 0m1.234s     (only if a task was started)
    SUCCESS | ERROR (code)
    END

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import time

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
from taskfile.enums import RunState_e
from taskfile.utils import exit_status
from taskfile.utils.log_config import subprinter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Final, Self
    from types import TracebackType
    from tomlguard import TomlGuard

# isort: on
# ##-- end types

##-- logging
logging   = logmod.getLogger(__name__)
report_l  = subprinter("report")
##-- end logging

LINE_LEN   : Final[int]  = 46
LINE_CHAR  : Final[str]  = "-"

def format_elapsed(seconds:float) -> str:
    """ 83.5 -> 'Task completed in 1m23.500s' """
    total_ms      = max(0, round(seconds * 1000))
    mins, rem_ms  = divmod(total_ms, 60_000)
    secs, millis  = divmod(rem_ms, 1000)
    return API.TIMING_FMT.format(mins=mins, secs=secs, millis=millis)

class RunReport:
    """ Scoped reporter for one dispatch. The summary and END marker are printed exactly once. """

    def __init__(self, config:None|TomlGuard=None, *, clock:Callable[[], float]=time.monotonic, log:None|logmod.Logger=None):
        self._clock     = clock
        self._log       = log or report_l
        self._start     : None|float = None
        self._reported  = False
        self.task_name  : None|str   = None
        self.code       : None|int   = None
        self.state      = RunState_e.NOT_STARTED
        self.elapsed    : None|float = None
        self.enabled    = True
        self.begin      = API.BEGIN_MARKER
        self.end        = API.END_MARKER
        if config is not None:
            self.enabled  = config.on_fail(True, bool).settings.report.enabled()  # noqa: FBT003
            self.begin    = config.on_fail(API.BEGIN_MARKER, str).settings.report.begin()
            self.end      = config.on_fail(API.END_MARKER, str).settings.report.end()

    def __enter__(self) -> Self:
        self.state  = RunState_e.RUNNING
        self._start = self._clock()
        self.line(self.begin)
        return self

    def __exit__(self, etype:None|type[BaseException], err:None|BaseException, tb:None|TracebackType) -> bool:
        match self.code, err:
            case None, None:
                self.code = API.ExitCodes.SUCCESS
            case None, BaseException():
                self.code = exit_status.from_error(err)
            case _:
                pass

        self.report()
        return False

    def line(self, msg:None|str=None) -> None:
        if not self.enabled:
            return
        match msg:
            case str() as x if bool(x):
                val = x.strip()
                val = val.center(len(val) + 4, " ")
                self._log.info(val.center(LINE_LEN, LINE_CHAR))
            case _:
                self._log.info(LINE_CHAR*LINE_LEN)

    def task_started(self, name:str) -> None:
        logging.debug("Task Started: %s", name)
        self.task_name = name
        self._start    = self._clock()

    def finish(self, code:int) -> None:
        """ Record the pending exit status """
        self.code = int(code)

    def report(self) -> None:
        if self._reported:
            return

        self._reported = True
        code           = API.ExitCodes.SUCCESS if self.code is None else self.code
        self.state     = RunState_e.SUCCEEDED if code == API.ExitCodes.SUCCESS else RunState_e.FAILED
        if self._start is not None:
            self.elapsed = self._clock() - self._start

        if not self.enabled:
            return

        if self.task_name is not None and self.elapsed is not None:
            self._log.info(format_elapsed(self.elapsed))

        match self.state:
            case RunState_e.SUCCEEDED:
                self._log.info(API.SUCCESS_MSG)
            case _:
                self._log.warning(API.ERROR_FMT.format(code=code))

        self.line(self.end)
