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
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import taskfile._interface as API  # noqa: N812
import taskfile.errors as terrs
from taskfile.loaders.config_loader import load_config

# ##-- end 1st party imports

logging = logmod.root

class TestConfigLoader:

    def test_sanity(self):
        assert(True is not False) # noqa: PLR0133

    def test_no_config(self, tmp_path):
        match load_config(base=tmp_path):
            case TomlGuard() as config:
                assert(config.on_fail("default", str).settings.default_task() == "default")
            case x:
                 assert(False), x

    def test_taskfile_toml(self, tmp_path):
        (tmp_path / API.TASKFILE_TOML).write_text('[settings]\ndefault_task = "lint"\n')
        config = load_config(base=tmp_path)
        assert(config.settings.default_task == "lint")

    def test_pyproject(self, tmp_path):
        (tmp_path / API.PYPROJ_TOML).write_text('[project]\nname = "blah"\n\n[tool.taskfile.settings]\ndefault_task = "lint"\n')
        config = load_config(base=tmp_path)
        assert(config.settings.default_task == "lint")
        assert("project" not in config)

    def test_pyproject_without_table(self, tmp_path):
        (tmp_path / API.PYPROJ_TOML).write_text('[project]\nname = "blah"\n')
        config = load_config(base=tmp_path)
        assert(not bool(config))

    def test_taskfile_toml_preferred(self, tmp_path):
        (tmp_path / API.TASKFILE_TOML).write_text('[settings]\ndefault_task = "first"\n')
        (tmp_path / API.PYPROJ_TOML).write_text('[tool.taskfile.settings]\ndefault_task = "second"\n')
        config = load_config(base=tmp_path)
        assert(config.settings.default_task == "first")

    def test_explicit_targets(self, tmp_path):
        target = tmp_path / "other.toml"
        target.write_text('[settings]\ndefault_task = "other"\n')
        config = load_config([tmp_path / "missing.toml", target])
        assert(config.settings.default_task == "other")

    def test_bad_toml(self, tmp_path):
        (tmp_path / API.TASKFILE_TOML).write_text("not = = toml")
        with pytest.raises(terrs.ConfigError):
            load_config(base=tmp_path)
