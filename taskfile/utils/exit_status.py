#!/usr/bin/env python3
"""
Converting what a task body returns, or raises, into an exit code.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import sh

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

MAX_STATUS : int = 255

def normalise(code:int) -> int:
    """ Keep a code the OS will report unchanged.
    0 stays success, 1..255 pass through, anything else is a plain task failure
    """
    match int(code):
        case 0:
            return API.ExitCodes.SUCCESS
        case x if 0 < x <= MAX_STATUS:
            return x
        case x:
            logging.debug("Exit code out of range, reporting a task failure instead: %s", x)
            return API.ExitCodes.TASK_FAIL

def from_result(val:object) -> int:
    """
    None, True -> 0
    False      -> 1
    int        -> int, see `normalise`
    """
    match val:
        case None | True:
            return API.ExitCodes.SUCCESS
        case False:
            return API.ExitCodes.TASK_FAIL
        case int() as x:
            return normalise(x)
        case x:
            logging.debug("Task returned a non-status value, treated as success: %s", type(x))
            return API.ExitCodes.SUCCESS

def from_error(err:BaseException) -> int:
    match err:
        case terrs.HelpRequested():
            return API.ExitCodes.SUCCESS
        case terrs.TaskExecutionError() as x:
            return normalise(x.code)
        case terrs.UnknownTaskError():
            return API.ExitCodes.UNKNOWN_TASK
        case terrs.ConfigError():
            return API.ExitCodes.BAD_CONFIG
        case terrs.TaskfileLoadError():
            return API.ExitCodes.TASKFILE_FAIL
        case terrs.FrontendError():
            return API.ExitCodes.USAGE
        case SystemExit(code=None):
            return API.ExitCodes.SUCCESS
        case SystemExit(code=int() as x):
            return normalise(x)
        case SystemExit():
            return API.ExitCodes.TASK_FAIL
        case sh.SignalException() as x:
            return 128 + abs(x.exit_code)
        case sh.ErrorReturnCode() as x:
            return normalise(x.exit_code)
        case KeyboardInterrupt() | terrs.EarlyExit():
            return API.ExitCodes.INTERRUPT
        case _:
            return API.ExitCodes.PYTHON_FAIL
