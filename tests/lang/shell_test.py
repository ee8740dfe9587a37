import io
import unittest

from lambdastep.lang.session import Session
from lambdastep.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.stdout = io.StringIO()
        self.shell = Shell(Session(), stdout=self.stdout)

    def run_lines(self, *lines):
        for line in lines:
            self.shell.onecmd(line)
        return self.stdout.getvalue()

    def test_step_and_emptyline(self):
        output = self.run_lines("(\\x. x x) ((\\y. y) z)", "", "", "")
        lines = output.splitlines()
        self.assertTrue(lines[0].endswith("(λy.y) z ((λy.y) z)"), lines[0])
        self.assertTrue(lines[1].endswith("z ((λy.y) z)"), lines[1])
        self.assertTrue(lines[2].endswith("z z"), lines[2])
        self.assertIn(Shell.NO_REDEX, lines[3])

    def test_definitions(self):
        output = self.run_lines("I := λx.x", "defs", "I y")
        self.assertIn("λx.x", output)
        self.assertTrue(output.splitlines()[-1].endswith(" y"))

        self.run_lines("undef I")
        self.assertEqual({}, self.shell.sess.definitions)

    def test_errors_do_not_exit(self):
        output = self.run_lines("\\x x", "undef nothing", "")
        self.assertIn("Expected '.' after lambda parameter", output)
        self.assertIn("'nothing' is not defined", output)
        self.assertIn("no term loaded", output)

    def test_history(self):
        self.run_lines("(λx.x) y")
        self.stdout.truncate(0)
        self.stdout.seek(0)

        self.assertEqual("(λx.x) y → y\n", self.run_lines("history"))

        self.run_lines("clear")
        self.assertEqual([], self.shell.sess.history)

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))
        self.assertTrue(self.shell.onecmd("EOF"))


if __name__ == '__main__':
    unittest.main()
