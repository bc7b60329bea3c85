#!/usr/bin/env python3
"""
These are the core enums used to easily convey information around taskfile.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum

# ##-- end stdlib imports

class Visibility_e(enum.StrEnum):
    """ Whether a task shows up in listings """

    public    = enum.auto()
    internal  = enum.auto()

class RunState_e(enum.StrEnum):
    """ The lifecycle of a single dispatch """

    NOT_STARTED  = enum.auto()
    RUNNING      = enum.auto()
    SUCCEEDED    = enum.auto()
    FAILED       = enum.auto()
