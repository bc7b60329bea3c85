#!/usr/bin/env python3
"""
Loads the taskfile config from taskfile.toml, or the [tool.taskfile] table of pyproject.toml.

No config file is not an error, it just means everything uses its defaults.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _read_toml(path:pl.Path) -> dict:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as err:
        raise terrs.ConfigError("Config file failed to parse: %s : %s", str(path), str(err)) from err
    except OSError as err:
        raise terrs.ConfigError("Config file could not be read: %s : %s", str(path), str(err)) from err

def _remove_prefix(data:dict, prefix:str) -> dict:
    """ tool.taskfile -> data['tool']['taskfile'] """
    current : Any = data
    for key in prefix.split("."):
        match current:
            case {**vals} if key in vals:
                current = vals[key]
            case _:
                return {}
    else:
        return current if isinstance(current, dict) else {}

def load_config(targets:None|Iterable[pl.Path]=None, *, base:None|pl.Path=None) -> TomlGuard:
    """ Load the first existing config target.
    taskfile.toml is used whole, pyproject.toml only has its [tool.taskfile] table used.
    """
    base = base or pl.Path.cwd()
    match targets:
        case None:
            target_paths = [base / x for x in API.DEFAULT_FILENAMES]
        case _:
            target_paths = [pl.Path(x) for x in targets]

    for target in target_paths:
        if not target.is_file():
            continue

        data = _read_toml(target)
        match target.name:
            case API.PYPROJ_TOML:
                chopped = _remove_prefix(data, API.TOOL_PREFIX)
                if not bool(chopped):
                    logging.debug("No %s table in: %s", API.TOOL_PREFIX, target)
                    continue
            case _:
                chopped = data

        logging.info("Loaded Config: %s", target)
        return TomlGuard(chopped)
    else:
        logging.debug("No Config found in: %s", target_paths)
        return TomlGuard({})
