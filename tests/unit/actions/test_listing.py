"""Tests for the list action."""

from __future__ import annotations

import io
import unittest
from pathlib import Path

from walktriage.actions import list_file
from walktriage.errors import ActionError


class ListFileTests(unittest.TestCase):
    def test_writes_path_and_newline(self) -> None:
        out = io.StringIO()
        list_file(Path("testdata/dir.log"), out)
        list_file(Path("testdata/dir2/script.sh"), out)
        self.assertEqual(out.getvalue(), "testdata/dir.log\ntestdata/dir2/script.sh\n")

    def test_closed_sink_raises_action_error(self) -> None:
        out = io.StringIO()
        out.close()

        with self.assertRaises(ActionError) as exc_info:
            list_file(Path("testdata/dir.log"), out)

        self.assertEqual(exc_info.exception.action, "list")
        self.assertEqual(exc_info.exception.path, Path("testdata/dir.log"))


if __name__ == "__main__":
    unittest.main()
