"""Tests for the cached directory scanner."""

import os

import pytest

from lintrun import scanner as scanner_module
from lintrun.cache import cache_key
from lintrun.scanner import CachedDirectoryScanner, walk_source_files


def _expected(root):
    return [
        str(root / "main.py"),
        str(root / "pkg" / "util.py"),
        str(root / "pkg" / "sub" / "deep.py"),
    ]


@pytest.fixture
def walk_counter(monkeypatch):
    """Count calls to the filesystem walk."""
    calls = []
    real_walk = scanner_module.walk_source_files

    def counting_walk(directory, file_extensions):
        calls.append(directory)
        return real_walk(directory, file_extensions)

    monkeypatch.setattr(scanner_module, "walk_source_files", counting_walk)
    return calls


class TestWalkSourceFiles:
    def test_finds_matching_files_recursively(self, source_tree):
        assert list(walk_source_files(str(source_tree), ["py"])) == _expected(source_tree)

    def test_extension_match_is_case_sensitive(self, source_tree):
        found = list(walk_source_files(str(source_tree), ["PY"]))
        assert found == [str(source_tree / "pkg" / "UPPER.PY")]

    def test_multiple_extensions(self, source_tree):
        found = walk_source_files(str(source_tree), ["py", "md"])
        assert str(source_tree / "README.md") in list(found)

    def test_no_extensions_finds_nothing(self, source_tree):
        assert list(walk_source_files(str(source_tree), [])) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_follows_symlinks_without_looping(self, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "linked.py").write_text("A = 1\n")

        root = tmp_path / "root"
        root.mkdir()
        (root / "own.py").write_text("B = 1\n")
        try:
            os.symlink(outside, root / "link")
            os.symlink(root, root / "loop")
        except OSError:
            pytest.skip("cannot create symlinks")

        found = list(walk_source_files(str(root), ["py"]))
        assert str(root / "link" / "linked.py") in found
        assert str(root / "own.py") in found
        assert len(found) == 2


class TestCachedDirectoryScanner:
    def test_fresh_scan_without_cache(self, source_tree, dict_cache):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        result = scanner.scan(str(source_tree), cache_enabled=False, clear_cache=False)

        assert list(result.files) == _expected(source_tree)
        assert result.from_cache is False
        assert dict_cache.loads == []
        assert dict_cache.saves == []

    def test_fresh_scan_is_saved_under_directory_key(self, source_tree, dict_cache):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)

        key = "analyse-files-" + str(source_tree)
        assert cache_key(str(source_tree)) == key
        assert dict_cache.saves == [key]
        assert dict_cache.entries[key] == _expected(source_tree)

    def test_second_scan_comes_from_cache(self, source_tree, dict_cache, walk_counter):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        first = scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)
        second = scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)

        assert walk_counter == [str(source_tree)]
        assert second.from_cache is True
        assert second.files == first.files

    def test_cache_hit_is_trusted_without_revalidation(self, source_tree, dict_cache):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)
        (source_tree / "added_later.py").write_text("")

        result = scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)
        assert str(source_tree / "added_later.py") not in result.files

    def test_clear_cache_forces_walk_and_overwrites(self, source_tree, dict_cache, walk_counter):
        key = cache_key(str(source_tree))
        dict_cache.entries[key] = ["/stale/file.py"]
        scanner = CachedDirectoryScanner(["py"], dict_cache)

        result = scanner.scan(str(source_tree), cache_enabled=True, clear_cache=True)

        assert walk_counter == [str(source_tree)]
        assert dict_cache.loads == []
        assert list(result.files) == _expected(source_tree)
        assert dict_cache.entries[key] == _expected(source_tree)

    def test_cache_miss_falls_through_to_walk(self, source_tree, dict_cache, walk_counter):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        result = scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)

        assert dict_cache.loads == [cache_key(str(source_tree))]
        assert walk_counter == [str(source_tree)]
        assert result.from_cache is False

    def test_entries_are_per_directory(self, source_tree, dict_cache):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        scanner.scan(str(source_tree), cache_enabled=True, clear_cache=False)
        nested = scanner.scan(str(source_tree / "pkg"), cache_enabled=True, clear_cache=False)

        assert nested.from_cache is False
        assert len(dict_cache.entries) == 2


class TestScannerMessages:
    def test_counts_only_shown_in_debug(self, source_tree, dict_cache, output):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        scanner.scan(str(source_tree), True, False, output=output, debug=False)

        assert "Scanning file system" in output.status_lines
        assert "Saving cache" in output.status_lines
        assert not any(line.startswith("Loaded") for line in output.status_lines)

    def test_debug_shows_counts(self, source_tree, dict_cache, output):
        scanner = CachedDirectoryScanner(["py"], dict_cache)
        scanner.scan(str(source_tree), True, False, output=output, debug=True)
        scanner.scan(str(source_tree), True, False, output=output, debug=True)

        assert "Loaded 3 files from file system" in output.status_lines
        assert "Loaded 3 files from cache" in output.status_lines
