import os
import tempfile
import unittest
from unittest import mock
from datetime import datetime, timezone
from pathlib import Path

from frame_capture import (
    MAX_CAPTURED_FRAMES, create_output_path, frame_path, project_path, should_capture,
)


class FramePathTest(unittest.TestCase):

    def test_zero_padded(self):
        root = Path("out") / "run"
        self.assertEqual(frame_path(root, 7), root / "007.png")
        self.assertEqual(frame_path(root, 0), root / "000.png")
        self.assertEqual(frame_path(root, 999), root / "999.png")

    def test_capture_limit(self):
        self.assertEqual(MAX_CAPTURED_FRAMES, 1000)
        self.assertTrue(should_capture(0))
        self.assertTrue(should_capture(999))
        self.assertFalse(should_capture(1000))
        self.assertFalse(should_capture(5000))


class OutputPathTest(unittest.TestCase):

    def test_timestamped_directory(self):
        now = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
        path = create_output_path(Path("/project"), now)
        self.assertEqual(path, Path("/project") / "out" / "2024-03-05_07-08-09")

    def test_timestamp_is_portable(self):
        path = create_output_path(Path("/project"))
        self.assertEqual(path.parent, Path("/project") / "out")
        self.assertEqual(len(path.name), len("2024-03-05_07-08-09"))
        self.assertNotIn(":", path.name)

    def test_project_path_walks_up(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "pyproject.toml").write_text("[project]\n", encoding="utf-8")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)
            self.assertEqual(project_path(nested), root)


class InstalledProjectPathTest(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        if any((p / "pyproject.toml").is_file() for p in (self.root, *self.root.parents)):
            self.skipTest("temporary directory sits inside a project")
        # stands in for site-packages
        self.site = self.root / "site-packages"
        self.site.mkdir()
        self.cwd = self.root / "work"
        self.cwd.mkdir()
        self.addCleanup(os.chdir, os.getcwd())
        os.chdir(self.cwd)

    def test_falls_back_to_working_directory(self):
        self.assertEqual(project_path(self.site).resolve(), self.cwd)

    def test_unwritable_working_directory(self):
        with mock.patch("frame_capture.os.access", return_value=False):
            with self.assertRaises(RuntimeError):
                project_path(self.site)


if __name__ == '__main__':
    unittest.main()
