#!/usr/bin/env python3
"""
The taskfile cli runner
"""
# Imports:
from __future__ import annotations

import logging as logmod

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main():
    from taskfile.control.main import TaskfileMain
    main_obj = TaskfileMain()
    main_obj()

if __name__ == "__main__":
    main()
