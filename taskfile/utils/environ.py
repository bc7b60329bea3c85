#!/usr/bin/env python3
"""
The environment a task can read.
Exported once, before the task runs. Nothing here validates the values.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os
import pathlib as pl

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from tomlguard import TomlGuard

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def build_environ(config:TomlGuard, *, base:pl.Path) -> dict[str, str]:
    """ Calculate the variables to export, without exporting them.
    PATH is not included, see `path_prepend`
    """
    names       = config.on_fail({}).settings.env.names()
    base_key    = names.get("base_dir", API.ENV_BASE_DIR)
    app_key     = names.get("app_dir", API.ENV_APP_DIR)
    src_key     = names.get("src_files", API.ENV_SRC_FILES)

    app_dir     = config.on_fail(API.DEFAULT_APP_DIR, str).settings.env.app_dir()
    src_files   = config.on_fail([app_dir, API.DEFAULT_TEST_DIR], list).settings.env.src_files()
    extra       = config.on_fail({}).settings.env.extra()

    result = {
        base_key  : str(base),
        app_key   : str(base / app_dir),
        src_key   : " ".join(str(base / x) for x in src_files),
    }
    result.update({str(k): str(v) for k, v in extra.items()})
    return result

def path_prepend(config:TomlGuard, *, base:pl.Path, current:str) -> str:
    prepend = config.on_fail(list(API.DEFAULT_PATH_PREP), list).settings.env.path_prepend()
    parts   = [str(base / x) for x in prepend]
    return os.pathsep.join([*parts, current] if bool(current) else parts)

def export_environ(config:TomlGuard, *, base:pl.Path, environ:None|MutableMapping[str, str]=None) -> dict[str, str]:
    """ Export the task environment into `environ` (os.environ by default).
    Returns the exported values.
    """
    environ          = os.environ if environ is None else environ
    values           = build_environ(config, base=base)
    values["PATH"]   = path_prepend(config, base=base, current=environ.get("PATH", ""))
    for key, val in values.items():
        logging.debug("Exporting: %s=%s", key, val)
        environ[key] = val
    else:
        return values
