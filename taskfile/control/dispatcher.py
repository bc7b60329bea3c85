#!/usr/bin/env python3
"""
The Task Dispatcher.

Resolves an argv to a task, runs it with the remaining args,
and returns the task's own exit code:

    []               -> the default task
    [name, *args]    -> registry[name](*args)
    [..., --help]    -> help text, exit 0, nothing runs

Task failures are not retried or suppressed, only converted to an exit code.
Non-task python errors propagate.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl

# ##-- end stdlib imports

# ##-- 3rd party imports
import sh
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs
from taskfile.cmds.help_cmd import HelpCmd
from taskfile.cmds.list_cmd import ListCmd
from taskfile.reporters.run_report import RunReport
from taskfile.utils import exit_status
from taskfile.utils.environ import export_environ

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import MutableMapping, Sequence
    from taskfile.control.registry import Registry
    from taskfile.structs import TaskSpec

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Dispatcher:
    """ Resolves and runs a single task from a Registry.
    The registry gains the builtin listing task, unless it already defines one.
    """

    def __init__(self, registry:Registry, *, config:None|TomlGuard=None, base:None|pl.Path=None, environ:None|MutableMapping[str, str]=None, help_source:None|pl.Path=None, prog:None|str=None):
        self.config        = config if config is not None else TomlGuard({})
        self.lister        = ListCmd(self.config)
        self.helper        = HelpCmd(self.config, prog=prog)
        self.registry      = registry.with_defaults(self.lister.build_spec(lambda: self.registry))
        self.default_task  = self.config.on_fail(API.DEFAULT_TASK, str).settings.default_task()
        self.help_source   = help_source or registry.source
        self.environ       = environ
        match base, registry.source:
            case pl.Path(), _:
                self.base = base
            case None, pl.Path() as source:
                self.base = source.parent
            case _:
                self.base = pl.Path.cwd()

    def wants_help(self, argv:Sequence[str]) -> bool:
        return any(x in API.HELP_FLAGS for x in argv)

    def resolve(self, argv:Sequence[str]) -> tuple[TaskSpec, list[str]]:
        """ Find the task argv names.
        raises HelpRequested or UnknownTaskError instead of returning a task
        """
        if self.wants_help(argv):
            raise terrs.HelpRequested()

        match argv:
            case []:
                name, args = self.default_task, []
            case [str() as name, *args]:
                pass
            case x:
                raise TypeError("Bad argv", x)

        logging.debug("Resolving: %s", name)
        return self.registry.lookup(name), list(args)

    def execute(self, spec:TaskSpec, args:list[str], *, report:None|RunReport=None) -> int:
        """ Run one task body, converting its result or failure into an exit code """
        export_environ(self.config, base=self.base, environ=self.environ)
        if report is not None:
            report.task_started(spec.name)

        logging.info("Running Task: %s %s", spec.name, args)
        try:
            result = spec(*args)
        except (terrs.TaskExecutionError, sh.ErrorReturnCode, SystemExit) as err:
            code = exit_status.from_error(err)
            logging.info("Task %s failed: %s (%s)", spec.name, err, code)
        else:
            code = exit_status.from_result(result)

        logging.info("Task %s exited with: %s", spec.name, code)
        return code

    def print_help(self) -> int:
        return self.helper(self.registry, self.help_source)

    def dispatch(self, argv:Sequence[str], *, report:None|RunReport=None) -> int:
        """ Resolve and run.
        Help is printed bare, anything else runs inside a RunReport,
        which is opened here if one isn't given.
        """
        if self.wants_help(argv):
            return self.print_help()

        if report is None:
            with RunReport(self.config) as report:
                return self.dispatch(argv, report=report)

        spec, args = self.resolve(argv)
        code       = self.execute(spec, args, report=report)
        report.finish(code)
        return code
