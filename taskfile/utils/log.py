#!/usr/bin/env python3
"""
The task author's logging helper:

    log("Installing")       -> [taskfile] Installing
    proc | log()            -> each line of stdin, prefixed

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import sys

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
from taskfile.utils.log_config import subprinter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
log_l   = subprinter("log")
##-- end logging

def prog_name() -> str:
    match sys.argv:
        case [str() as x, *_] if bool(x) and not x.startswith("-"):
            name = pl.Path(x).name
        case _:
            name = API.PROG_NAME

    if name == "__main__.py":
        return API.PROG_NAME
    return name

def log(*msg:object, stream:None|TextIO=None) -> None:
    prefix = f"[{prog_name()}]"
    if bool(msg):
        log_l.info("%s %s", prefix, " ".join(str(x) for x in msg))
        return

    try:
        for line in (stream or sys.stdin):
            log_l.info("%s %s", prefix, line.rstrip("\n"))
    except (OSError, ValueError) as err:
        logging.debug("log() couldn't read its input: %s", err)
