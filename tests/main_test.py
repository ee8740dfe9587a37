import contextlib
import io
import unittest
from unittest import mock

from lambdastep.main import main, parse_args


class MainTestCase(unittest.TestCase):

    def run_main(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(list(argv))
        return out.getvalue().splitlines()

    def test_parse_args(self):
        args = parse_args(["-n", "3", "-d", "I:=λx.x", "-d", "K:=λx.λy.x", "I y"])
        self.assertEqual("I y", args.expression)
        self.assertEqual(3, args.steps)
        self.assertEqual(["I:=λx.x", "K:=λx.λy.x"], args.define)
        self.assertFalse(args.verbose)

    def test_single_step(self):
        self.assertEqual(["λy1.y"], self.run_main("(\\x. \\y. x) y"))

    def test_normal_form(self):
        self.assertEqual(["x y"], self.run_main("x y"))

    def test_many_steps(self):
        self.assertEqual(["(λy.y) ((λy.y) z)", "(λy.y) z", "z"],
                         self.run_main("-n", "10", "(\\x. (\\y. y) ((\\y. y) x)) z"))

    def test_definitions(self):
        self.assertEqual(["(λy.b) a", "b"], self.run_main("-d", "K := λx.λy.x", "-n", "2", "K b a"))

    def test_error_exits(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit):
                main(["\\x x"])
        self.assertIn("Expected '.' after lambda parameter", out.getvalue())

    def test_bad_definitions_exit(self):
        cases = {
            ("-d", "I", "I y"): "'I' is not a NAME:=TERM definition",
            ("-d", "I := λx x", "I y"): "Expected '.' after lambda parameter",
            ("-d", "x y := z", "z"): "'x y' is not a valid name",
            ("-d", "I := λx.x", "-d", "I"): "'I' is not a NAME:=TERM definition",
        }
        for argv, msg in cases.items():
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                with self.assertRaises(SystemExit, msg=argv):
                    main(list(argv))
            self.assertIn(msg, out.getvalue(), argv)

    @mock.patch("lambdastep.main.Shell")
    def test_bad_definition_does_not_start_shell(self, shell):
        with contextlib.redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["-d", "I"])
        shell.assert_not_called()

    @mock.patch("lambdastep.main.Shell")
    def test_definitions_reach_shell(self, shell):
        main(["-d", "I := λx.x"])
        shell.assert_called_once()
        sess = shell.call_args[0][0]
        self.assertEqual({"I": "λx.x"}, sess.definitions)
        shell.return_value.cmdloop.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
