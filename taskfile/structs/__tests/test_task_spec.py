#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from pydantic import ValidationError

# ##-- end 3rd party imports

# ##-- 1st party imports
from taskfile.enums import Visibility_e
from taskfile.structs import TaskSpec

# ##-- end 1st party imports

logging = logmod.root

def simple_fn(*args):
    """ A Simple Task

    With more docs
    """
    return len(args)

class TestTaskSpec:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_initial(self):
        match TaskSpec(name="simple", fn=simple_fn):
            case TaskSpec() as spec:
                assert(spec.name == "simple")
                assert(spec.visibility is Visibility_e.public)
            case x:
                 assert(False), x

    def test_doc_from_fn(self):
        spec = TaskSpec(name="simple", fn=simple_fn)
        assert(spec.doc == "A Simple Task")

    def test_explicit_doc(self):
        spec = TaskSpec(name="simple", fn=simple_fn, doc="Other")
        assert(spec.doc == "Other")

    def test_source_from_fn(self):
        spec = TaskSpec(name="simple", fn=simple_fn)
        assert(spec.source.endswith("test_task_spec.py"))

    def test_no_doc(self):
        spec = TaskSpec(name="simple", fn=lambda: None)
        assert(spec.doc == "")

    def test_call_passes_args(self):
        spec = TaskSpec(name="simple", fn=simple_fn)
        assert(spec("a", "b", "c") == 3)

    @pytest.mark.parametrize("name", ["", "has space", "-flag", "tab\tname"])
    def test_bad_names(self, name):
        with pytest.raises(ValidationError):
            TaskSpec(name=name, fn=simple_fn)

    @pytest.mark.parametrize("name", ["clean", "run:dev", "_internal", "a.b"])
    def test_good_names(self, name):
        assert(TaskSpec(name=name, fn=simple_fn).name == name)

    def test_not_callable(self):
        with pytest.raises(ValidationError):
            TaskSpec(name="simple", fn="not a function")

    @pytest.mark.parametrize("val", ["internal", Visibility_e.internal, True])
    def test_visibility_internal(self, val):
        spec = TaskSpec(name="simple", fn=simple_fn, visibility=val)
        assert(spec.internal)

    def test_frozen(self):
        spec = TaskSpec(name="simple", fn=simple_fn)
        with pytest.raises(ValidationError):
            spec.name = "other"

    def test_str(self):
        spec = TaskSpec(name="simple", fn=simple_fn)
        assert(str(spec) == "simple")
