"""Shared test fixtures for lintrun."""

import io

import pytest
from rich.console import Console

from lintrun.formatters import ErrorFormatter
from lintrun.output import OutputStyle


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class RecordingOutput(OutputStyle):
    """OutputStyle that remembers every call instead of drawing a bar."""

    def __init__(self):
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, color_system=None))
        self.events = []

    @property
    def lines(self):
        return [payload for kind, payload in self.events if kind == "writeln"]

    @property
    def status_lines(self):
        return [payload for kind, payload in self.events if kind == "status"]

    def count(self, kind):
        return sum(1 for k, _ in self.events if k == kind)

    def writeln(self, message=""):
        self.events.append(("writeln", message))

    def status(self, message):
        self.events.append(("status", message))

    def progress_start(self, total):
        self.events.append(("start", total))

    def progress_advance(self, step=1):
        self.events.append(("advance", step))

    def progress_finish(self):
        self.events.append(("finish", None))


class DictCache:
    """In-memory CacheStore that counts loads and saves."""

    def __init__(self, entries=None):
        self.entries = dict(entries or {})
        self.loads = []
        self.saves = []

    def load(self, key):
        self.loads.append(key)
        return self.entries.get(key)

    def save(self, key, value):
        self.saves.append(key)
        self.entries[key] = list(value)


class CountingWatchdog:
    def __init__(self):
        self.calls = 0

    def record(self):
        self.calls += 1


class RecordingAnalyser:
    """Calls the hooks for every file and returns canned diagnostics."""

    def __init__(self, diagnostics=()):
        self.diagnostics = list(diagnostics)
        self.calls = []

    def analyse(self, files, only_files, before_file, after_file, debug):
        self.calls.append(
            {
                "files": list(files),
                "only_files": only_files,
                "before_file": before_file,
                "after_file": after_file,
                "debug": debug,
            }
        )
        for file in files:
            if before_file is not None:
                before_file(file)
            if after_file is not None:
                after_file()
        return list(self.diagnostics)


class RecordingFormatter(ErrorFormatter):
    def __init__(self, exit_code=0):
        self.results = []
        self._exit_code = exit_code

    def format_errors(self, result, output):
        self.results.append(result)
        return self._exit_code


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def dict_cache():
    return DictCache()


@pytest.fixture
def watchdog():
    return CountingWatchdog()


@pytest.fixture
def formatter():
    return RecordingFormatter(exit_code=0)


@pytest.fixture
def make_analyser():
    """Factory for analysers returning the given diagnostics."""
    return RecordingAnalyser


@pytest.fixture
def make_formatter():
    return RecordingFormatter


@pytest.fixture
def source_tree(tmp_path):
    """A small project: two .py files, one nested, plus files to ignore."""
    root = tmp_path / "project"
    (root / "pkg" / "sub").mkdir(parents=True)
    (root / "main.py").write_text("print('hi')\n")
    (root / "pkg" / "util.py").write_text("X = 1\n")
    (root / "pkg" / "sub" / "deep.py").write_text("Y = 2\n")
    (root / "README.md").write_text("# readme\n")
    (root / "pkg" / "UPPER.PY").write_text("Z = 3\n")
    return root
