#!/usr/bin/env python3
"""
The Task Registry.

Tasks are registered explicitly, either by calling RegistryBuilder.add,
or by decorating functions with @task while a builder is collecting:

    with builder.collecting():
        @task
        def clean():
            ...

Once built, a Registry can't be modified.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import contextlib
import logging as logmod
import types
from collections.abc import Mapping

# ##-- end stdlib imports

# ##-- 1st party imports
import taskfile.errors as terrs
from taskfile.enums import Visibility_e
from taskfile.structs import TaskSpec

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    import pathlib as pl
    from collections.abc import Callable, Iterator, Iterable
    type TaskFn = Callable[..., Any]

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

_collecting : list[RegistryBuilder] = []

class Registry(Mapping[str, TaskSpec]):
    """ The fixed mapping from task name (and alias) to TaskSpec for one process run """

    def __init__(self, specs:Iterable[TaskSpec], *, source:None|pl.Path=None):
        ordered  : dict[str, TaskSpec] = {}
        names    : dict[str, TaskSpec] = {}
        for spec in specs:
            if spec.name in names:
                raise terrs.DuplicateTaskError("Task registered twice: %s", spec.name)
            ordered[spec.name] = spec
            names[spec.name]   = spec
            for alias in spec.aliases:
                if alias in names:
                    raise terrs.DuplicateTaskError("Task alias conflicts: %s", alias)
                names[alias] = spec

        self._ordered  = types.MappingProxyType(ordered)
        self._names    = types.MappingProxyType(names)
        self.source    = source

    def __getitem__(self, name:str) -> TaskSpec:
        return self._ordered[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"<Registry: {list(self._ordered)}>"

    def lookup(self, name:str) -> TaskSpec:
        """ Exact match on a task name or alias """
        match self._names.get(name, None):
            case TaskSpec() as spec:
                return spec
            case None:
                raise terrs.UnknownTaskError(name)
            case x:
                raise TypeError(type(x))

    def knows(self, name:str) -> bool:
        return name in self._names

    def public(self) -> list[TaskSpec]:
        return [x for x in self._ordered.values() if x.visibility is Visibility_e.public]

    def with_defaults(self, *specs:TaskSpec) -> Registry:
        """ Returns a new registry, adding the given specs after the existing ones,
        unless a spec of that name (or alias) is already registered.
        """
        added = []
        for spec in specs:
            if self.knows(spec.name):
                logging.debug("Builtin task overridden: %s", spec.name)
                continue
            aliases = tuple(x for x in spec.aliases if not self.knows(x))
            added.append(spec.model_copy(update={"aliases": aliases}))
        else:
            return Registry([*self._ordered.values(), *added], source=self.source)

class RegistryBuilder:
    """ Accumulates task specs, and builds them into a frozen Registry """

    def __init__(self, *, source:None|pl.Path=None):
        self.source     = source
        self._specs     : dict[str, TaskSpec] = {}
        self._built     : None|Registry       = None

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name:str) -> bool:
        return name in self._specs

    def add(self, name:str, fn:TaskFn, *, internal:bool=False, aliases:Iterable[str]=(), doc:str="") -> TaskSpec:
        spec = TaskSpec(name=name,
                        fn=fn,
                        visibility=Visibility_e.internal if internal else Visibility_e.public,
                        aliases=tuple(aliases),
                        doc=doc)
        self.register_spec(spec)
        return spec

    def register_spec(self, spec:TaskSpec) -> None:
        if self._built is not None:
            raise terrs.RegistryFrozenError("Tried to register a task after building the registry", spec.name)
        if spec.name in self._specs:
            raise terrs.DuplicateTaskError("Task registered twice: %s", spec.name)

        logging.info("[+.%s] : %s", spec.visibility, spec.name)
        self._specs[spec.name] = spec

    def build(self) -> Registry:
        if self._built is None:
            logging.debug("Building Registry of %s tasks", len(self._specs))
            self._built = Registry(self._specs.values(), source=self.source)

        return self._built

    @contextlib.contextmanager
    def collecting(self) -> Iterator[RegistryBuilder]:
        """ While active, @task registers into this builder """
        _collecting.append(self)
        try:
            yield self
        finally:
            _collecting.remove(self)

def active_builder() -> RegistryBuilder:
    match _collecting:
        case [*_, RegistryBuilder() as builder]:
            return builder
        case _:
            raise terrs.BackendError("@task used while no registry is collecting. Load the Taskfile through taskfile")

@overload
def task(name:TaskFn, /) -> TaskFn: ...

@overload
def task(name:None|str=None, /, *, internal:bool=False, aliases:Iterable[str]=()) -> Callable[[TaskFn], TaskFn]: ...

def task(name=None, /, *, internal=False, aliases=()):
    """ Decorator to register a function as a task.
    Usable bare, or with a name/visibility:

    @task
    def clean(): ...

    @task("run:dev", internal=True)
    def _run_dev(*args): ...
    """

    def _register(fn:TaskFn, task_name:None|str=None) -> TaskFn:
        active_builder().add(task_name or fn.__name__, fn, internal=internal, aliases=aliases)
        return fn

    match name:
        case None:
            return _register
        case str() as task_name:
            return lambda fn: _register(fn, task_name)
        case x if callable(x):
            return _register(x)
        case x:
            raise TypeError("@task takes a name or a function", x)
