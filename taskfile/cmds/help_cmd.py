#!/usr/bin/env python3
"""
Prints the help embedded in a Taskfile.

Help lines are any lines starting with the help marker (default '#/'),
in file order, with the marker (and one following space) removed:

    #/ Usage: taskfile <task> <args>
    #/
    #/   install    Install dependencies

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
from taskfile.cmds.list_cmd import ListCmd
from taskfile.utils.log import prog_name
from taskfile.utils.log_config import subprinter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tomlguard import TomlGuard
    from taskfile.control.registry import Registry

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
help_l  = subprinter("help")
##-- end logging

def extract_help(text:str, marker:str=API.HELP_MARKER) -> list[str]:
    result = []
    for line in text.splitlines():
        if not line.startswith(marker):
            continue

        stripped = line[len(marker):]
        if stripped.startswith(" "):
            stripped = stripped[1:]
        result.append(stripped)
    else:
        return result

class HelpCmd:
    _name = "help"
    _help = ("Print the help lines of the Taskfile",
             "Triggered by passing -h or --help anywhere",
             )

    def __init__(self, config:None|TomlGuard=None, *, prog:None|str=None):
        self.marker  = API.HELP_MARKER
        self.prog    = prog
        self.lister  = ListCmd(config)
        if config is not None:
            self.marker = config.on_fail(API.HELP_MARKER, str).settings.help.marker()

    def _generated_help(self, registry:Registry) -> list[str]:
        result = [f"Usage: {self.prog or prog_name()} <task> <args>", "Tasks:"]
        result += self.lister.lines(registry)
        return result

    def marked(self, source:None|pl.Path) -> list[str]:
        """ The help lines of source, without importing it """
        match source:
            case pl.Path() as path if path.is_file():
                logging.debug("Reading help from: %s", path)
                return extract_help(path.read_text(), self.marker)
            case _:
                return []

    def lines(self, registry:Registry, source:None|pl.Path=None) -> list[str]:
        found = self.marked(source or registry.source)
        if bool(found):
            return found

        return self._generated_help(registry)

    def __call__(self, registry:Registry, source:None|pl.Path=None) -> int:
        for line in self.lines(registry, source):
            help_l.info(line)
        else:
            return API.ExitCodes.SUCCESS
