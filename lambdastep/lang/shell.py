"""Handles interactive mode for the stepper. Uses cmd as backend."""

import cmd

from termcolor import colored

from lambdastep.lang.error import ErrorHandler
from lambdastep.pure.printer import print_term


class Shell(cmd.Cmd):
    """Lambda calculus stepper shell."""
    intro = "Lambda calculus stepper :: one β-reduction at a time\nType '?' or 'help' for more information."
    prompt = "> "
    NO_REDEX = "No further reduction possible."

    def __init__(self, sess, error_handler=None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.error_handler = error_handler if error_handler else ErrorHandler(fatal=False, file=self.stdout)

    def show_step(self, step):
        if step is None:
            self.error_handler.warn(Shell.NO_REDEX)
        else:
            self.stdout.write(f"{colored('→', attrs=['bold'])} {print_term(step.after)}\n")

    def default(self, line):
        """Loads and steps a λ-term, or saves a named expression."""
        with self.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            if self.sess.is_definition(line):
                self.sess.add(line)
            else:
                self.show_step(self.sess.add(line))

    def emptyline(self):
        """An empty line steps the current term once more."""
        with self.error_handler:
            self.show_step(self.sess.step())

    def do_step(self, arg):
        """Steps the current term once."""
        self.emptyline()

    def do_defs(self, arg):
        """Lists named expressions."""
        for name, expr in self.sess.definitions.items():
            self.stdout.write(f"{colored(name, attrs=['bold'])} := {expr}\n")

    def do_undef(self, arg):
        """Deletes a named expression: undef NAME"""
        with self.error_handler:
            self.sess.undefine(arg.strip())

    def do_history(self, arg):
        """Shows every step taken since the last clear."""
        for step in self.sess.history:
            self.stdout.write(f"{step}\n")

    def do_clear(self, arg):
        """Clears the step history."""
        self.sess.clear_history()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        self.stdout.write(
            "Welcome to the lambda calculus stepper!\n\n"
            "Type a λ-term such as '(λx.x) y' ('\\' works as well as 'λ') to load it and reduce\n"
            "its leftmost outermost redex. Press enter on an empty line to take the next step.\n\n"
            "Save a term under a name with 'I := λx.x'; names are expanded in later terms.\n"
            "Commands: defs, undef NAME, history, clear, exit.\n")

    def do_EOF(self, arg):
        """Exits stepper."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits stepper."""
        return True
