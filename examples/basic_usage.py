#!/usr/bin/env python3
"""
Example: Basic usage of lintrun as a Python library
"""

import sys

from lintrun import AnalyseApplication
from lintrun.cache import FileListCache
from lintrun.engine import CompileCheckAnalyser
from lintrun.exclusion import FileExcluder
from lintrun.formatters import get_formatter
from lintrun.output import OutputStyle
from lintrun.watchdog import MemoryWatchdog

paths = sys.argv[1:] or ["."]

with FileListCache(".lintrun-cache") as cache:
    app = AnalyseApplication(
        analyser=CompileCheckAnalyser(),
        watchdog=MemoryWatchdog("/tmp/lintrun-memory-limit.txt"),
        file_extensions=["py"],
        excluder=FileExcluder(["*/.venv/*", "build"]),
        cache=cache,
    )
    exit_code = app.analyse(
        paths,
        OutputStyle(),
        get_formatter("table"),
        default_level_used=True,
        debug=False,
        enable_cache=True,
        clear_cache=False,
    )

print(f"Analysis complete, exit code {exit_code}")
sys.exit(exit_code)
