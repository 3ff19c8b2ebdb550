"""Tests for directory scanning and elapsed-time arithmetic."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from fileexplorer.directory_model import (
    DIRECTORY_MARKER,
    NANOSECONDS_PER_SECOND,
    DirectoryEntry,
    elapsed_seconds,
    iter_directory_entries,
)


class ElapsedSecondsTests(unittest.TestCase):
    def test_whole_seconds_are_floored(self) -> None:
        now_ns = 100 * NANOSECONDS_PER_SECOND
        mtime_ns = now_ns - (42 * NANOSECONDS_PER_SECOND + 999_999_999)
        self.assertEqual(elapsed_seconds(mtime_ns, now_ns), 42)

    def test_future_timestamp_clamps_to_zero(self) -> None:
        now_ns = 100 * NANOSECONDS_PER_SECOND
        self.assertEqual(elapsed_seconds(now_ns + 5 * NANOSECONDS_PER_SECOND, now_ns), 0)

    def test_missing_or_pre_epoch_timestamp_is_zero(self) -> None:
        now_ns = 100 * NANOSECONDS_PER_SECOND
        self.assertEqual(elapsed_seconds(None, now_ns), 0)
        self.assertEqual(elapsed_seconds(-NANOSECONDS_PER_SECOND, now_ns), 0)


class DirectoryEntryTests(unittest.TestCase):
    def test_size_label_uses_marker_for_non_files(self) -> None:
        file_entry = DirectoryEntry(name="a.txt", is_file=True, size=5)
        dir_entry = DirectoryEntry(name="sub", is_file=False)
        self.assertEqual(file_entry.size_label, "5")
        self.assertEqual(dir_entry.size_label, DIRECTORY_MARKER)


class DirectoryScanTests(unittest.TestCase):
    def test_lists_exactly_the_immediate_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_bytes(b"hello")
            (root / "empty.bin").write_bytes(b"")
            sub = root / "sub"
            sub.mkdir()
            (sub / "nested.txt").write_text("not listed\n", encoding="utf-8")

            entries = list(iter_directory_entries(root))

            by_name = {entry.name: entry for entry in entries}
            self.assertEqual(set(by_name), {"a.txt", "empty.bin", "sub"})
            self.assertEqual(by_name["a.txt"].size, 5)
            self.assertEqual(by_name["empty.bin"].size_label, "0")
            self.assertFalse(by_name["sub"].is_file)
            self.assertEqual(by_name["sub"].size_label, DIRECTORY_MARKER)
            self.assertIsNotNone(by_name["a.txt"].mtime_ns)

    def test_missing_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                list(iter_directory_entries(Path(tmp) / "missing"))

    def test_file_instead_of_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "plain.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(NotADirectoryError):
                list(iter_directory_entries(target))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_dangling_symlink_aborts_scan(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            try:
                os.symlink(root / "gone", root / "dangling")
            except OSError:
                self.skipTest("cannot create symlinks here")

            with self.assertRaises(FileNotFoundError):
                list(iter_directory_entries(root))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_symlink_to_file_reports_target_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "target.txt"
            target.write_bytes(b"abc")
            try:
                os.symlink(target, root / "link.txt")
            except OSError:
                self.skipTest("cannot create symlinks here")

            by_name = {entry.name: entry for entry in iter_directory_entries(root)}
            self.assertEqual(by_name["link.txt"].size_label, "3")


if __name__ == "__main__":
    unittest.main()
