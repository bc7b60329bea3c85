#!/usr/bin/env python3
"""
Helpers for task bodies to call external programs with `sh`.

Failures raise TaskFailed with the program's exit code,
so a failing step aborts the task it's in.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os
import sys

# ##-- end stdlib imports

# ##-- 3rd party imports
import sh

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile.errors as terrs
from taskfile.utils.log_config import subprinter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pathlib as pl
    from collections.abc import Iterable, Mapping, Sequence

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
fail_l  = subprinter("fail")
##-- end logging

NOT_FOUND_CODE : int = 127

def _command(name:str) -> sh.Command:
    try:
        return sh.Command(name)
    except sh.CommandNotFound as err:
        fail_l.error("Shell Command '%s' Not Found", name)
        raise terrs.TaskFailed("Command not found: %s", name, code=NOT_FOUND_CODE) from err

def _env(extra:None|Mapping[str, str]) -> None|dict[str, str]:
    if extra is None:
        return None
    return {**os.environ, **extra}

def run(cmd:str, *args:object, cwd:None|str|pl.Path=None, env:None|Mapping[str, str]=None, ok_codes:Iterable[int]=(0,)) -> int:
    """ Run a program in the foreground, streaming its output.
    Returns the exit code, or raises TaskFailed
    """
    program = _command(cmd)
    logging.info("Shell Cmd: %s %s", cmd, args)
    try:
        result = program(*(str(x) for x in args),
                         _out=sys.stdout,
                         _err=sys.stderr,
                         _cwd=None if cwd is None else str(cwd),
                         _env=_env(env),
                         _ok_code=list(ok_codes),
                         _return_cmd=True)
    except sh.SignalException as err:
        fail_l.error("Shell Command '%s' was killed: %s", cmd, err.exit_code)
        raise terrs.TaskFailed("Shell Command killed: %s", cmd, code=128 + abs(err.exit_code)) from err
    except sh.ErrorReturnCode as err:
        fail_l.error("Shell Command '%s' exited with code: %s", cmd, err.exit_code)
        raise terrs.TaskFailed("Shell Command failed: %s (%s)", cmd, err.exit_code, code=err.exit_code) from err
    else:
        return result.exit_code

def parallel(*commands:Sequence[object], cwd:None|str|pl.Path=None, env:None|Mapping[str, str]=None) -> int:
    """ Launch each [cmd, *args] in the background, then wait for all of them.
    Every program is found before any is launched.
    If any failed, raises TaskFailed with the first failure's code, after all have finished.
    """
    resolved = [(str(cmd), _command(str(cmd)), args) for cmd, *args in commands]
    running  = []
    for name, program, args in resolved:
        logging.info("Shell Cmd (bg): %s %s", name, args)
        running.append((name, program(*(str(x) for x in args),
                                      _bg=True,
                                      _bg_exc=False,
                                      _out=sys.stdout,
                                      _err=sys.stderr,
                                      _cwd=None if cwd is None else str(cwd),
                                      _env=_env(env))))

    failures : list[tuple[str, int]] = []
    for name, proc in running:
        try:
            proc.wait()
        except sh.SignalException as err:
            fail_l.error("Shell Command '%s' was killed: %s", name, err.exit_code)
            failures.append((name, 128 + abs(err.exit_code)))
        except sh.ErrorReturnCode as err:
            fail_l.error("Shell Command '%s' exited with code: %s", name, err.exit_code)
            failures.append((name, err.exit_code))

    match failures:
        case []:
            return 0
        case [(name, code), *_]:
            raise terrs.TaskFailed("%s of %s background commands failed, first: %s", len(failures), len(running), name, code=code)
        case x:
            raise TypeError(type(x))
