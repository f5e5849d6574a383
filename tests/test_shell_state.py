import os
import tempfile
import unittest
from unittest.mock import patch

from shell_state import ShellState


class TestShellState(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.state = ShellState(cwd=self.tmpdir.name)

    def test_defaults_to_process_directory(self):
        self.assertEqual(os.path.abspath(os.getcwd()), ShellState().cwd)

    def test_default_status_is_zero(self):
        self.assertEqual(0, self.state.last_status)

    def test_set_status(self):
        self.state.set_status(7)
        self.assertEqual(7, self.state.last_status)
        self.state.set_status(None)
        self.assertEqual(0, self.state.last_status)

    def test_resolve_relative_path(self):
        self.assertEqual(
            os.path.join(self.state.cwd, "a", "b.txt"),
            self.state.resolve("a/./b.txt"),
        )

    def test_resolve_absolute_path(self):
        other = os.path.abspath(os.sep)
        self.assertEqual(other, self.state.resolve(other))

    def test_resolve_parent(self):
        self.assertEqual(os.path.dirname(self.state.cwd), self.state.resolve(".."))

    def test_resolve_keeps_tilde_literal(self):
        with patch.dict(os.environ, {"HOME": os.sep + "home"}):
            self.assertEqual(os.path.join(self.state.cwd, "~", "x"), self.state.resolve(os.path.join("~", "x")))

    def test_change_dir_remembers_previous(self):
        start = self.state.cwd
        self.state.change_dir("/somewhere")
        self.assertEqual("/somewhere", self.state.cwd)
        self.assertEqual(start, self.state.previous_dir)

    def test_change_dir_to_same_directory_keeps_previous(self):
        self.state.change_dir("/a")
        self.state.change_dir("/a")
        self.assertNotEqual("/a", self.state.previous_dir)

    def test_change_dir_does_not_touch_process_cwd(self):
        before = os.getcwd()
        self.state.change_dir(self.tmpdir.name)
        self.assertEqual(before, os.getcwd())

    def test_search_path_defaults_to_environment(self):
        with patch.dict(os.environ, {"PATH": "/x:/y"}):
            self.assertEqual("/x:/y", self.state.search_path())

    def test_search_path_override(self):
        state = ShellState(path="/only/here")
        with patch.dict(os.environ, {"PATH": "/x:/y"}):
            self.assertEqual("/only/here", state.search_path())


if __name__ == "__main__":
    unittest.main()
