#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os
import pathlib as pl

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
from taskfile.utils.environ import build_environ, export_environ, path_prepend

# ##-- end 1st party imports

logging = logmod.root

BASE = pl.Path("/project")

class TestBuildEnviron:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_defaults(self):
        result = build_environ(TomlGuard({}), base=BASE)
        assert(result == {
            API.ENV_BASE_DIR  : "/project",
            API.ENV_APP_DIR   : "/project/app",
            API.ENV_SRC_FILES : "/project/app /project/tests",
        })

    def test_configured(self):
        config = TomlGuard({"settings": {"env": {"app_dir": "src", "src_files": ["src", "scripts"]}}})
        result = build_environ(config, base=BASE)
        assert(result[API.ENV_APP_DIR] == "/project/src")
        assert(result[API.ENV_SRC_FILES] == "/project/src /project/scripts")

    def test_renamed(self):
        config = TomlGuard({"settings": {"env": {"names": {"base_dir": "ROOT"}}}})
        result = build_environ(config, base=BASE)
        assert(result["ROOT"] == "/project")
        assert(API.ENV_BASE_DIR not in result)

    def test_extra(self):
        config = TomlGuard({"settings": {"env": {"extra": {"DEBUG": 1, "NAME": "blah"}}}})
        result = build_environ(config, base=BASE)
        assert(result["DEBUG"] == "1")
        assert(result["NAME"] == "blah")

class TestPathPrepend:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_default(self):
        result = path_prepend(TomlGuard({}), base=BASE, current="/usr/bin")
        assert(result == os.pathsep.join(["/project/.venv/bin", "/usr/bin"]))

    def test_empty_current(self):
        assert(path_prepend(TomlGuard({}), base=BASE, current="") == "/project/.venv/bin")

    def test_configured(self):
        config = TomlGuard({"settings": {"env": {"path_prepend": ["bin", "node_modules/.bin"]}}})
        result = path_prepend(config, base=BASE, current="/usr/bin")
        assert(result.split(os.pathsep) == ["/project/bin", "/project/node_modules/.bin", "/usr/bin"])

class TestExportEnviron:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_into_mapping(self):
        environ = {"PATH": "/usr/bin", "OTHER": "val"}
        result  = export_environ(TomlGuard({}), base=BASE, environ=environ)
        assert(environ[API.ENV_BASE_DIR] == "/project")
        assert(environ["PATH"] == result["PATH"])
        assert(environ["OTHER"] == "val")

    def test_into_os_environ(self, monkeypatch):
        monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
        monkeypatch.delenv(API.ENV_BASE_DIR, raising=False)
        monkeypatch.delenv(API.ENV_APP_DIR, raising=False)
        monkeypatch.delenv(API.ENV_SRC_FILES, raising=False)
        export_environ(TomlGuard({}), base=BASE)
        assert(os.environ[API.ENV_BASE_DIR] == "/project")
        assert(os.environ["PATH"].startswith("/project/.venv/bin"))
