"""Tests for ordered tree traversal and its error reporting."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from walktriage.errors import TraversalError
from walktriage.walk_model import walk_tree


class WalkTreeTests(unittest.TestCase):
    def test_yields_root_first_then_children_in_lexical_pre_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b").mkdir()
            (root / "b" / "inner.txt").write_text("x", encoding="utf-8")
            (root / "a.txt").write_text("abc", encoding="utf-8")
            (root / "c.txt").write_text("", encoding="utf-8")

            entries = list(walk_tree(root))

            self.assertEqual(
                [entry.path for entry in entries],
                [root, root / "a.txt", root / "b", root / "b" / "inner.txt", root / "c.txt"],
            )
            self.assertTrue(entries[0].is_dir)
            self.assertEqual(entries[1].size, 3)
            self.assertTrue(entries[2].is_dir)

    def test_file_root_yields_only_itself(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "single.log"
            target.write_text("hello", encoding="utf-8")

            entries = list(walk_tree(target))

            self.assertEqual(len(entries), 1)
            self.assertEqual(entries[0].path, target)
            self.assertFalse(entries[0].is_dir)
            self.assertEqual(entries[0].size, 5)

    def test_paths_keep_relative_root_spelling(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "testdata").mkdir()
            (root / "testdata" / "dir.log").write_text("x", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                paths = [str(entry.path) for entry in walk_tree(Path("testdata"))]
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(paths, ["testdata", os.path.join("testdata", "dir.log")])

    def test_missing_root_raises_traversal_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"

            with self.assertRaises(TraversalError) as exc_info:
                list(walk_tree(missing))

            self.assertEqual(exc_info.exception.path, missing)
            self.assertIsInstance(exc_info.exception.__cause__, FileNotFoundError)

    def test_unreadable_directory_aborts_iteration(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").mkdir()
            (root / "a" / "one.txt").write_text("1", encoding="utf-8")
            (root / "z.txt").write_text("z", encoding="utf-8")
            real_scandir = os.scandir

            def failing_scandir(path):
                if Path(path) == root / "a":
                    raise PermissionError(13, "Permission denied", str(path))
                return real_scandir(path)

            seen: list[Path] = []
            with mock.patch("walktriage.walk_model.fs.os.scandir", side_effect=failing_scandir):
                with self.assertRaises(TraversalError) as exc_info:
                    for entry in walk_tree(root):
                        seen.append(entry.path)

            self.assertEqual(seen, [root, root / "a"])
            self.assertEqual(exc_info.exception.path, root / "a")
            self.assertIsInstance(exc_info.exception.__cause__, PermissionError)

    def test_children_are_stated_as_they_are_visited(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a.txt", "b.txt", "c.txt"):
                (root / name).write_text(name, encoding="utf-8")
            real_lstat = Path.lstat

            def failing_lstat(path, *args, **kwargs):
                if path.name == "c.txt":
                    raise PermissionError(13, "Permission denied", str(path))
                return real_lstat(path, *args, **kwargs)

            seen: list[Path] = []
            with mock.patch.object(Path, "lstat", failing_lstat):
                with self.assertRaises(TraversalError) as exc_info:
                    for entry in walk_tree(root):
                        seen.append(entry.path)

            self.assertEqual(seen, [root, root / "a.txt", root / "b.txt"])
            self.assertEqual(exc_info.exception.path, root / "c.txt")


if __name__ == "__main__":
    unittest.main()
