import dataclasses
import unittest

from command import ParsedCommand, ParseError, ParseErrorKind


class TestParsedCommand(unittest.TestCase):
    def test_defaults(self):
        cmd = ParsedCommand("ls")
        self.assertEqual((), cmd.args)
        self.assertIsNone(cmd.stdout)
        self.assertFalse(cmd.stdout_append)
        self.assertIsNone(cmd.stderr)
        self.assertFalse(cmd.stderr_append)
        self.assertFalse(cmd.has_redirection)

    def test_args_list_is_stored_as_tuple(self):
        args = ["a", "b"]
        cmd = ParsedCommand("echo", args)
        args.append("c")
        self.assertEqual(("a", "b"), cmd.args)

    def test_is_immutable(self):
        cmd = ParsedCommand("echo")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cmd.name = "other"

    def test_empty_name_rejected(self):
        for name in ("", "   ", "\t"):
            with self.assertRaises(ValueError):
                ParsedCommand(name)

    def test_has_redirection(self):
        self.assertTrue(ParsedCommand("x", stdout="o").has_redirection)
        self.assertTrue(ParsedCommand("x", stderr="e").has_redirection)

    def test_equality(self):
        self.assertEqual(ParsedCommand("a", ["b"]), ParsedCommand("a", ("b",)))
        self.assertNotEqual(ParsedCommand("a", stdout="o"), ParsedCommand("a", stdout="o", stdout_append=True))

    def test_str(self):
        cmd = ParsedCommand("ls", ("-l",), stdout="out", stdout_append=True, stderr="err")
        self.assertEqual("ls -l >> out 2> err", str(cmd))
        self.assertEqual("pwd", str(ParsedCommand("pwd")))


class TestParseError(unittest.TestCase):
    def test_str_is_message(self):
        err = ParseError(ParseErrorKind.NO_COMMAND, "no command")
        self.assertEqual("no command", str(err))
        self.assertIsNone(err.offset)
        self.assertIsNone(err.operator)
        self.assertIsNone(err.stream)


if __name__ == "__main__":
    unittest.main()
