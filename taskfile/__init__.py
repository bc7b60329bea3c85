#!/usr/bin/env python3
"""
Taskfile : name-dispatched tasks for a project, declared in a Taskfile.py

    from taskfile import task, run

    @task
    def lint(*args):
        run("flake8", *args)

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__, ExitCodes
from .control.registry import Registry, RegistryBuilder, task
from .control.dispatcher import Dispatcher
from .utils.log import log
from .utils.shell import parallel, run

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
