#!/usr/bin/env python3
"""
The builtin task which lists registered tasks, numbered from 1.

Set settings.list.internal to include internal tasks,
and settings.list.builtins=false to hide the builtin tasks.
An optional regex argument filters the listing.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs
from taskfile.structs import TaskSpec
from taskfile.utils.log_config import subprinter

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Final
    from tomlguard import TomlGuard
    from taskfile.control.registry import Registry

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
list_l  = subprinter("list")
##-- end logging

BUILTIN_SOURCE : Final[str] = "<builtin>"

class ListCmd:
    _name     = API.LIST_TASKS[0]
    _aliases  = API.LIST_TASKS[1:]
    _help     = ("List the registered tasks",)

    def __init__(self, config:None|TomlGuard=None):
        self.show_internal  = False
        self.show_builtins  = True
        if config is not None:
            self.show_internal = config.on_fail(False, bool).settings.list.internal()  # noqa: FBT003
            self.show_builtins = config.on_fail(True, bool).settings.list.builtins()  # noqa: FBT003

    @property
    def name(self) -> str:
        return self._name

    def build_spec(self, registry:Callable[[], Registry]) -> TaskSpec:
        """ A TaskSpec for this command, listing whatever registry() returns when called """

        def _list_tasks(*args:str) -> int:
            return self(registry(), *args)

        return TaskSpec(name=self._name,
                        fn=_list_tasks,
                        aliases=self._aliases,
                        doc=self._help[0],
                        source=BUILTIN_SOURCE)

    def _filter_fn(self, spec:TaskSpec, pattern:None|re.Pattern) -> bool:
        return all([self.show_builtins or spec.source != BUILTIN_SOURCE,
                    pattern is None or bool(pattern.search(spec.name)),
                    ])

    def _compile(self, pattern:str) -> re.Pattern:
        try:
            return re.compile(pattern, flags=re.IGNORECASE)
        except re.error as err:
            raise terrs.FrontendError("Bad task filter: %s : %s", pattern, str(err)) from err

    def lines(self, registry:Registry, pattern:None|str=None) -> list[str]:
        logging.info("---- Listing tasks")
        match pattern:
            case None | "":
                compiled = None
            case str() as x:
                compiled = self._compile(x)

        candidates = list(registry.values()) if self.show_internal else registry.public()
        specs      = [x for x in candidates if self._filter_fn(x, compiled)]
        return [API.LIST_FMT.format(idx=i, name=spec.name) for i, spec in enumerate(specs, start=1)]

    def __call__(self, registry:Registry, *args:str) -> int:
        pattern = args[0] if bool(args) else None
        for line in self.lines(registry, pattern):
            list_l.info(line)
        else:
            return API.ExitCodes.SUCCESS
