#!/usr/bin/env python3
"""
Writes a template Taskfile, with clean/install/lint/deps/publish/run tasks.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
from taskfile.utils.log_config import subprinter

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
printer = subprinter()
##-- end logging

class StubCmd:
    _name = "stub"
    _help = ("Write a template Taskfile.py, if one doesn't exist",)

    def template_text(self) -> str:
        return API.taskfile_template.read_text()

    def __call__(self, target:pl.Path) -> int:
        logging.info("---- Stubbing Taskfile")
        if target.exists():
            printer.warning("%s already exists, not overwriting it", target)
            return API.ExitCodes.TASKFILE_FAIL

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.template_text())
        printer.info("Stubbed: %s", target)
        return API.ExitCodes.SUCCESS
