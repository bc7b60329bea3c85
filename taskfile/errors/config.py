#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

from .base import TaskfileError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ConfigError(TaskfileError):
    """ A config file exists but couldn't be parsed """
    general_msg = "Config Error:"
    pass

class TaskfileLoadError(TaskfileError):
    """ The Taskfile couldn't be imported """
    general_msg = "Taskfile Load Error:"
    pass
