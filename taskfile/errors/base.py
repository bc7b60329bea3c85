#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class TaskfileError(Exception):
    """
      The base class for all taskfile errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Taskfile Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except (TypeError, IndexError):
            return str(self.args)

class BackendError(TaskfileError):
    pass

class FrontendError(TaskfileError):
    pass

class EarlyExit(Exception):  # noqa: N818
    """ taskfile was instructed to shut down before running a task """
    pass

class HelpRequested(EarlyExit):
    """ -h/--help was passed. Not a failure: help is printed, exit code is 0 """
    pass
