#!/usr/bin/env python3
"""
These are the taskfile specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from .base import (BackendError, EarlyExit, FrontendError, HelpRequested,
                   TaskfileError)
from .config import ConfigError, TaskfileLoadError
from .task import (DuplicateTaskError, RegistryFrozenError,
                   TaskExecutionError, TaskFailed, UnknownTaskError)

# ##-- end 1st party imports
