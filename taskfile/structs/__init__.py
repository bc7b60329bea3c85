#!/usr/bin/env python3
"""
Public Access point for taskfile Structures
"""
from __future__ import annotations

from taskfile.structs.task_spec import TaskSpec
