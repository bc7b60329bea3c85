#!/usr/bin/env python3
"""
Names and values every part of taskfile relies on,
loaded before the config is.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import version
from importlib.resources import files

# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Final
    from importlib.resources.abc import Traversable

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : Final[str] = version("taskfile")

# -- data
template_path      : Traversable             = files("taskfile.__templates")
taskfile_template  : Traversable             = template_path.joinpath("taskfile_template.py")

PROG_NAME          : Final[str]              = "taskfile"
TOOL_PREFIX        : Final[str]              = "tool.taskfile"
TASKFILE_TOML      : Final[str]              = "taskfile.toml"
PYPROJ_TOML        : Final[str]              = "pyproject.toml"
DEFAULT_FILENAMES  : Final[tuple[str, ...]]  = (TASKFILE_TOML, PYPROJ_TOML)
DEFAULT_TASKFILE   : Final[str]              = "Taskfile.py"
LASTERR            : Final[str]              = ".taskfile.lasterror"

DEFAULT_TASK       : Final[str]              = "default"
LIST_TASKS         : Final[tuple[str, ...]]  = ("tasks", "list")
HELP_FLAGS         : Final[frozenset[str]]   = frozenset({"-h", "--help"})
HELP_MARKER        : Final[str]              = "#/"

BEGIN_MARKER       : Final[str]              = "BEGIN"
END_MARKER         : Final[str]              = "END"
SUCCESS_MSG        : Final[str]              = "SUCCESS"
ERROR_FMT          : Final[str]              = "ERROR ({code})"
TIMING_FMT         : Final[str]              = "Task completed in {mins}m{secs}.{millis:03}s"
LIST_FMT           : Final[str]              = "{idx:>6}\t{name}"

PRINTER_NAME       : Final[str]              = "taskfile._printer"
PRINTER_CHILDREN   : Final[tuple[str, ...]]  = ("report", "list", "help", "log", "fail")

ENV_BASE_DIR       : Final[str]              = "BASE_DIR"
ENV_APP_DIR        : Final[str]              = "APP_DIR"
ENV_SRC_FILES      : Final[str]              = "SRC_FILES"
DEFAULT_APP_DIR    : Final[str]              = "app"
DEFAULT_TEST_DIR   : Final[str]              = "tests"
DEFAULT_PATH_PREP  : Final[tuple[str, ...]]  = (".venv/bin",)

##--|

class ExitCodes(enum.IntEnum):
    """ Process exit codes. A failing task exits with its own code instead. """
    SUCCESS        = 0
    TASK_FAIL      = 1
    USAGE          = 2
    TASKFILE_FAIL  = 66
    PYTHON_FAIL    = 70
    BAD_CONFIG     = 78
    UNKNOWN_TASK   = 127
    INTERRUPT      = 130

    INITIAL        = -99
