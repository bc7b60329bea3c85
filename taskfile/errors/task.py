#!/usr/bin/env python3
"""
Errors raised while resolving and running tasks
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

from .base import BackendError, FrontendError

if TYPE_CHECKING:
    from taskfile.structs import TaskSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

__all__ = ( # noqa: RUF022
"UnknownTaskError", "DuplicateTaskError", "RegistryFrozenError",
"TaskExecutionError", "TaskFailed",
)

class UnknownTaskError(FrontendError):
    """ The requested task name has no registry entry """
    general_msg = "Unknown Task:"

    def __init__(self, name:str, *args:Any):
        super().__init__("Unknown Task: %s", name, *args)
        self.name = name

class DuplicateTaskError(BackendError):
    """ Tried to register a task name twice """
    general_msg = "Duplicate Task:"

class RegistryFrozenError(BackendError):
    """ Tried to modify a registry after it was built """
    general_msg = "Registry Frozen:"

class TaskExecutionError(BackendError):
    """ An Error indicating a specific task terminated with a non-zero status """
    general_msg = "Task Error:"

    def __init__(self, msg:str, *args:Any, code:int=1, task:None|TaskSpec=None):
        super().__init__(msg, *args)
        self.code = code
        self.task = task

    @property
    def task_name(self) -> str:
        if not self.task:
            return ""
        return self.task.name

    @property
    def task_source(self) -> str:
        if not self.task:
            return ""
        return self.task.source

class TaskFailed(TaskExecutionError):  # noqa: N818
    """ A step inside a task failed, aborting the task. """
    general_msg = "Task Failure:"
    pass
