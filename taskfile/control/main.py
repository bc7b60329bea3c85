#!/usr/bin/env python3
"""
The taskfile CLI program:

    taskfile [-f PATH] [-v] [--version] [--stub] [task_name] [task_args...]

Head flags are only read before the task name,
everything from the task name on goes to the dispatcher untouched.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import sys

# ##-- end stdlib imports

# ##-- 3rd party imports
import stackprinter
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs
from taskfile.cmds.help_cmd import HelpCmd
from taskfile.cmds.stub_cmd import StubCmd
from taskfile.control.dispatcher import Dispatcher
from taskfile.control.registry import RegistryBuilder
from taskfile.loaders.config_loader import load_config
from taskfile.loaders.taskfile_loader import TaskfileLoader
from taskfile.utils import exit_status
from taskfile.utils.log_config import LogConfig, subprinter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from taskfile.control.registry import Registry

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
printer = subprinter()
fail_l  = subprinter("fail")
##-- end logging

##--| controllers

class LoadingController:
    """ config, logging, and the Taskfile itself """
    type TM = TaskfileMain

    def load(self, obj:TM, *, strict:bool=True) -> None:
        """ Load config and set up logging.
        when not strict, a broken config is logged and the defaults are used
        """
        config_err : None|terrs.ConfigError = None
        try:
            obj.config = load_config(base=pl.Path.cwd())
        except terrs.ConfigError as err:
            if strict:
                raise
            config_err = err

        obj.log_config.setup(obj.config)
        if config_err is not None:
            logging.warning("Config not loaded, using defaults: %s", config_err)

        if obj.head.get("verbose", False):
            logging.info("Switching to Verbose Output")
            obj.log_config.set_level("DEBUG")

    def taskfile_path(self, obj:TM) -> pl.Path:
        match obj.head.get("file", None):
            case str() as x:
                return pl.Path(x)
            case None:
                return pl.Path(obj.config.on_fail(API.DEFAULT_TASKFILE, str).startup.taskfile())
            case x:
                raise TypeError(type(x))

    def load_tasks(self, obj:TM) -> Registry:
        loader = TaskfileLoader(self.taskfile_path(obj))
        return loader.load()

class CLIController:
    """ reads the head flags off the raw args """
    type TM = TaskfileMain

    def parse_args(self, obj:TM) -> None:
        head  : dict[str, Any] = {}
        args  : list[str]      = obj.raw_args[1:]
        obj.help_requested     = self.wants_help(args)
        while bool(args):
            match args:
                case ["-f" | "--file", str() as path, *rest] if not path.startswith("-"):
                    head['file'] = path
                case [str() as x, *rest] if x.startswith("--file="):
                    head['file'] = x.removeprefix("--file=")
                case ["-f" | "--file", *_] if obj.help_requested:
                    break
                case ["-f" | "--file", *_]:
                    raise terrs.FrontendError("%s needs a path", args[0])
                case ["-v" | "--verbose", *rest]:
                    head['verbose'] = True
                case ["--version", *rest]:
                    head['version'] = True
                case ["--stub", *rest]:
                    head['stub'] = True
                case _:
                    break

            args = rest
        else:
            pass

        logging.debug("Head Args: %s, Task Args: %s", head, args)
        obj.head      = head
        obj.task_argv = args

    def wants_help(self, args:list[str]) -> bool:
        """ -h|--help anywhere, head flags included, overrides everything else """
        return any(x in API.HELP_FLAGS for x in args)

class DispatchController:
    """ builds the dispatcher and runs the requested task """
    type TM = TaskfileMain

    def run(self, obj:TM, registry:Registry) -> int:
        dispatcher = Dispatcher(registry, config=obj.config, prog=obj.bin_name)
        return dispatcher.dispatch(obj.task_argv)

    def help(self, obj:TM) -> int:
        """ Print help from the Taskfile's text.
        The Taskfile is only imported when it has no help lines,
        to list its tasks instead, and a failed import then lists only the builtins.
        """
        path = obj._loading.taskfile_path(obj)
        if bool(HelpCmd(obj.config).marked(path)):
            registry = RegistryBuilder(source=path).build()
        else:
            registry = self._registry_for_help(obj)

        dispatcher = Dispatcher(registry, config=obj.config, help_source=path, prog=obj.bin_name)
        return dispatcher.print_help()

    def _registry_for_help(self, obj:TM) -> Registry:
        try:
            return obj._loading.load_tasks(obj)
        except terrs.TaskfileError as err:
            logging.warning("Taskfile not loaded, listing builtins only: %s", err)
            return RegistryBuilder().build()

class ShutdownController:
    """ cleaning up on and shutting down taskfile  """
    type TM = TaskfileMain

    def shutdown(self, obj:TM) -> None:
        logging.info("Shutting Down Taskfile: %s", obj.result_code)
        obj.log_config.clear()

class ErrorHandlers:
    """ handling different errors """
    type TM = TaskfileMain

    def discriminate_exit(self, obj:TM, err:BaseException) -> int:
        result : int
        match err:
            case terrs.HelpRequested():
                result = API.ExitCodes.SUCCESS
            case terrs.EarlyExit() | KeyboardInterrupt():
                result = self._early_exit(err)
            case terrs.UnknownTaskError():
                result = self._unknown_task_exit(err)
            case terrs.ConfigError():
                result = self._config_error_exit(err)
            case terrs.TaskfileLoadError():
                result = self._taskfile_exit(err)
            case terrs.TaskExecutionError():
                result = self._task_failed_exit(err)
            case terrs.FrontendError():
                result = self._frontend_exit(err)
            case terrs.TaskfileError():
                result = self._misc_exit(err)
            case _:
                result = self.python_exit(obj, err)
        ##--|
        return result

    def _early_exit(self, err:BaseException) -> int:  # noqa: ARG002
        logging.warning("Early Exit Triggered")
        return API.ExitCodes.INTERRUPT

    def _unknown_task_exit(self, err:terrs.UnknownTaskError) -> int:
        fail_l.error("[%s] : Unknown Task: %s", type(err).__name__, err.name)
        return API.ExitCodes.UNKNOWN_TASK

    def _config_error_exit(self, err:terrs.ConfigError) -> int:
        fail_l.error("[%s] : %s", type(err).__name__, err)
        return API.ExitCodes.BAD_CONFIG

    def _taskfile_exit(self, err:terrs.TaskfileLoadError) -> int:
        fail_l.error("[%s] : %s", type(err).__name__, err)
        return API.ExitCodes.TASKFILE_FAIL

    def _task_failed_exit(self, err:terrs.TaskExecutionError) -> int:
        fail_l.error("[%s] : Task Error : %s", type(err).__name__, err)
        if bool(err.task_source):
            fail_l.error("[%s] : Task Source: %s", type(err).__name__, err.task_source)
        return exit_status.normalise(err.code)

    def _frontend_exit(self, err:terrs.FrontendError) -> int:
        fail_l.error("[%s] : %s", type(err).__name__, err)
        return API.ExitCodes.USAGE

    def _misc_exit(self, err:terrs.TaskfileError) -> int:
        logging.error("[%s] : %s", type(err).__name__, err, exc_info=err)
        return API.ExitCodes.PYTHON_FAIL

    def python_exit(self, obj:TM, err:BaseException) -> int:
        lasterr : pl.Path
        logging.error("[%s] : Python Error:", type(err).__name__, exc_info=err)
        lasterr = pl.Path(obj.config.on_fail(API.LASTERR, str).shutdown.lasterror()).resolve()
        try:
            lasterr.write_text(stackprinter.format(err))
        except OSError as write_err:
            logging.warning("Couldn't write the full stacktrace to %s : %s", lasterr, write_err)
        else:
            logging.error("[%s] : Python Error, full stacktrace written to %s", type(err).__name__, lasterr)

        return API.ExitCodes.PYTHON_FAIL

##--|

class TaskfileMain:
    """ taskfile.main and the associated exit handlers

    parses head flags, loads config, logging and the Taskfile,
    then dispatches the remaining args to a task.

    """
    _loading     : ClassVar[LoadingController]   = LoadingController()
    _cli         : ClassVar[CLIController]       = CLIController()
    _dispatch    : ClassVar[DispatchController]  = DispatchController()
    _shutdown    : ClassVar[ShutdownController]  = ShutdownController()
    _err         : ClassVar[ErrorHandlers]       = ErrorHandlers()

    ##--|
    result_code  : int
    bin_name     : str
    help_requested : bool
    config       : TomlGuard
    head         : dict[str, Any]
    task_argv    : list[str]

    def __init__(self, *, cli_args:None|list[str]=None) -> None:
        match cli_args:
            case None:
                self.raw_args = sys.argv[:]
            case list() as vals:
                self.raw_args = vals
            case x:
                raise TypeError(type(x))

        ##--|
        self.result_code  = API.ExitCodes.INITIAL
        self.bin_name     = pl.Path(self.raw_args[0]).name if bool(self.raw_args) else API.PROG_NAME
        self.config       = TomlGuard({})
        self.head         = {}
        self.task_argv    = []
        self.help_requested = False
        self.log_config   = LogConfig()

    @property
    def name(self) -> str:
        return API.PROG_NAME

    def handle_cli_args(self) -> None|int:
        """ Head flag responses that don't dispatch a task.
          return an int to give an override result code
        """
        if self.head.get("version", False):
            printer.info("%s v%s", API.PROG_NAME, API.__version__)
            return API.ExitCodes.SUCCESS

        if self.head.get("stub", False):
            return StubCmd()(self._loading.taskfile_path(self))

        return None

    def __call__(self) -> None:
        """ The Main taskfile CLI Program.

        Catches: taskfile errors, then interrupts, then Exception
        has a 'finally' block to call sys.exit
        """
        x : Any
        try:
            self._cli.parse_args(self)
            if self.help_requested:
                self._loading.load(self, strict=False)
                self.result_code = self._dispatch.help(self)
                return

            self._loading.load(self)
            match self.handle_cli_args():
                case None:
                    pass
                case int() as x:
                    self.result_code = x
                    return

            registry          = self._loading.load_tasks(self)
            self.result_code  = self._dispatch.run(self, registry)
        except (terrs.TaskfileError, terrs.EarlyExit, KeyboardInterrupt) as err:
            self.result_code = self._err.discriminate_exit(self, err)
        except Exception as err:  # noqa: BLE001
            self.result_code = self._err.python_exit(self, err)
        finally:
            self._shutdown.shutdown(self)
            sys.exit(self.result_code)
