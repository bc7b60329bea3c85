#!/usr/bin/env python3
#/ Usage: taskfile <task> <args>
#/
#/ Tasks:
#/   clean              Remove build artifacts and caches
#/   install            Install the project and its dev requirements
#/   lint               Run flake8 and bandit over $SRC_FILES
#/   deps               Show outdated dependencies
#/   publish            Build and upload a release with twine
#/   run [args]         Serve $APP_DIR with uvicorn
#/   tasks              List all tasks
#/
#/ Options:
#/   -h, --help         Print this help
"""
Taskfile for a python web project.

"""
##-- imports
import os
import shutil
import pathlib as pl

from taskfile import task, run, parallel, log
##-- end imports

BUILD_DIRS  = ["build", "dist", ".eggs", ".pytest_cache"]

@task
def clean(*args):
    """ Remove build artifacts and caches """
    base = pl.Path(os.environ["BASE_DIR"])
    for name in BUILD_DIRS:
        shutil.rmtree(base / name, ignore_errors=True)
    for cache in base.rglob("__pycache__"):
        shutil.rmtree(cache, ignore_errors=True)
    log("Cleaned")

@task
def install(*args):
    """ Install the project and its dev requirements """
    run("pip", "install", "--upgrade", "pip")
    run("pip", "install", "-e", ".[test]", *args)

@task
def lint(*args):
    """ Run flake8 and bandit in parallel """
    src = os.environ["SRC_FILES"].split()
    parallel(["flake8", *src, *args],
             ["bandit", "-q", "-r", os.environ["APP_DIR"]])

@task
def deps(*args):
    """ Show outdated dependencies """
    run("pip", "list", "--outdated", *args)

@task(internal=True)
def _build(*args):
    clean()
    run("python", "-m", "build", *args)

@task
def publish(*args):
    """ Build and upload a release with twine """
    _build()
    dists = sorted(str(x) for x in pl.Path("dist").glob("*"))
    run("twine", "upload", *dists, *args)

@task("run")
def run_app(*args):
    """ Serve the app with uvicorn """
    run("uvicorn", "app.main:app", "--reload", *args)

@task
def default(*args):
    """ Runs when no task is given """
    return install(*args)
