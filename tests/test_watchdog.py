"""Tests for the memory watchdog."""

import logging

from lintrun.watchdog import MemoryWatchdog, peak_memory_bytes

MB = 1024 * 1024


class TestMemoryWatchdog:
    def test_writes_megabytes_rounded_up(self, tmp_path):
        target = tmp_path / "memory.txt"
        watchdog = MemoryWatchdog(str(target), dispatch_signals=lambda: None,
                                  peak_memory=lambda: 10 * MB + 1)
        watchdog.record()
        assert target.read_text() == "11 MB"

    def test_exact_megabytes_are_not_rounded(self, tmp_path):
        target = tmp_path / "memory.txt"
        watchdog = MemoryWatchdog(str(target), dispatch_signals=lambda: None,
                                  peak_memory=lambda: 64 * MB)
        watchdog.record()
        assert target.read_text() == "64 MB"

    def test_overwrites_previous_value(self, tmp_path):
        target = tmp_path / "memory.txt"
        target.write_text("999999 MB and some leftovers")
        values = iter([1 * MB, 2 * MB])
        watchdog = MemoryWatchdog(str(target), dispatch_signals=lambda: None,
                                  peak_memory=lambda: next(values))
        watchdog.record()
        watchdog.record()
        assert target.read_text() == "2 MB"

    def test_dispatches_signals_once_per_record(self, tmp_path):
        dispatched = []
        watchdog = MemoryWatchdog(str(tmp_path / "m.txt"),
                                  dispatch_signals=lambda: dispatched.append(1))
        watchdog.record()
        watchdog.record()
        assert len(dispatched) == 2

    def test_write_failure_is_not_fatal(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="lintrun")
        dispatched = []
        unwritable = tmp_path / "no-such-dir" / "memory.txt"
        watchdog = MemoryWatchdog(str(unwritable),
                                  dispatch_signals=lambda: dispatched.append(1))

        watchdog.record()

        assert not unwritable.exists()
        assert dispatched == [1]
        assert "Cannot write memory limit file" in caplog.text

    def test_real_peak_memory_is_reported(self, tmp_path):
        target = tmp_path / "memory.txt"
        MemoryWatchdog(str(target)).record()
        number, unit = target.read_text().split(" ")
        assert unit == "MB"
        assert int(number) >= 0
        assert peak_memory_bytes() >= 0
