#!/usr/bin/env python3
"""
printing areas:

[report] : begin/end markers, timing, success/failure
[list]   : the task listing
[help]   : help text
[log]    : the task author's log helper
[fail]   : failure details

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import sys

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tomlguard import TomlGuard

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

DEFAULT_STREAM_FMT : str = "{levelname:<8} : {message}"
DEFAULT_PRINT_FMT  : str = "{message}"

def subprinter(name:None|str=None) -> logmod.Logger:
    """ Get the user facing printer, or one of its children """
    match name:
        case None:
            return logmod.getLogger(API.PRINTER_NAME)
        case str() if name in API.PRINTER_CHILDREN:
            return logmod.getLogger(f"{API.PRINTER_NAME}.{name}")
        case x:
            raise ValueError("Unknown Printer", x)

class LogConfig:
    """ Utility class to setup [stderr, stdout] logging.
      The root logger reports diagnostics on stderr,
      and a 'printer' logger replaces 'print(x)' on stdout.

      The printer's children [report, list, help, log, fail]
      can be leveled separately in the config:

      [logging.printers]
      report = "WARNING"
    """

    def __init__(self):
        self.root     = logmod.root
        self.printer  = subprinter()
        self._handlers : list[tuple[logmod.Logger, logmod.Handler]] = []

    def setup(self, config:None|TomlGuard=None) -> None:
        """ (re)install handlers, using config values if given """
        self.clear()
        stream_fmt   = DEFAULT_STREAM_FMT
        stream_level = "WARNING"
        print_fmt    = DEFAULT_PRINT_FMT
        children     = {}
        if config is not None:
            stream_fmt   = config.on_fail(DEFAULT_STREAM_FMT, str).logging.format()
            stream_level = config.on_fail("WARNING", str).logging.level()
            print_fmt    = config.on_fail(DEFAULT_PRINT_FMT, str).logging.printer_format()
            children     = config.on_fail({}).logging.printers()

        stream = logmod.StreamHandler(sys.stderr)
        stream.setFormatter(logmod.Formatter(stream_fmt, style="{"))
        self._install(self.root, stream)
        self.root.setLevel(stream_level.upper())

        printer = logmod.StreamHandler(sys.stdout)
        printer.setFormatter(logmod.Formatter(print_fmt, style="{"))
        self._install(self.printer, printer)
        self.printer.setLevel(logmod.INFO)
        self.printer.propagate = False

        for name in API.PRINTER_CHILDREN:
            level = children.get(name, "NOTSET") if bool(children) else "NOTSET"
            subprinter(name).setLevel(str(level).upper())

        logging.debug("Post Log Setup")

    def _install(self, logger:logmod.Logger, handler:logmod.Handler) -> None:
        logger.addHandler(handler)
        self._handlers.append((logger, handler))

    def clear(self) -> None:
        for logger, handler in self._handlers:
            logger.removeHandler(handler)
            handler.close()
        else:
            self._handlers = []

    def set_level(self, level:str|int) -> None:
        self.root.setLevel(level)
