#!/usr/bin/env python3
"""
Imports a Taskfile.py as a module, collecting the tasks it registers with @task.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import importlib.util
import logging as logmod
import pathlib as pl
import sys

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile.errors as terrs
from taskfile.control.registry import Registry, RegistryBuilder

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

MODULE_NAME = "_taskfile_tasks"

class TaskfileLoader:
    """ Loads tasks from a python file into a frozen Registry.
    A missing file loads no tasks.
    """

    def __init__(self, path:pl.Path):
        self.path = pl.Path(path).expanduser().resolve()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Registry:
        builder = RegistryBuilder(source=self.path if self.exists() else None)
        if not self.exists():
            logging.info("No Taskfile at: %s", self.path)
            return builder.build()

        spec = importlib.util.spec_from_file_location(MODULE_NAME, self.path)
        if spec is None or spec.loader is None:
            raise terrs.TaskfileLoadError("Taskfile couldn't be imported: %s", str(self.path))

        module = importlib.util.module_from_spec(spec)
        sys.modules[MODULE_NAME] = module
        with builder.collecting():
            try:
                spec.loader.exec_module(module)
            except terrs.TaskfileError:
                sys.modules.pop(MODULE_NAME, None)
                raise
            except Exception as err:
                sys.modules.pop(MODULE_NAME, None)
                raise terrs.TaskfileLoadError("Taskfile failed to load: %s : %s", str(self.path), repr(err)) from err

        logging.debug("Loaded %s tasks from %s", len(builder), self.path)
        return builder.build()
