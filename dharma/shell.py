"""Interactive read-eval-print shell for dharma. Uses cmd as backend."""

import cmd
import logging
import sys

from termcolor import colored

from .core import Interpreter
from .utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


class Shell(cmd.Cmd):
    """Dharma interpreter shell.

    Every line is one program. Errors are reported and the session goes on.
    """
    ERROR = "red"

    def __init__(self, interpreter=None, settings: Settings = None, stdin=None, stdout=None, stderr=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.settings = settings or DEFAULT_SETTINGS
        self.interpreter = interpreter or Interpreter(self.settings)
        self.stderr = stderr or sys.stderr
        if stdin is not None:
            self.use_rawinput = False

        self.prompt = self.settings.prompt
        self.intro = self.settings.intro
        self.line_num = 0

    def onecmd(self, line):
        """Stops on the exit command, otherwise dispatches as usual."""
        if line.strip() == self.settings.exit_command:
            return True
        return super().onecmd(line)

    def default(self, line):
        """Runs one dharma program."""
        self.line_num += 1
        result = self.interpreter.run(line)
        if result.success:
            print(result.value, file=self.stdout)
        else:
            logger.debug("line %d failed: %s", self.line_num, result.error_message)
            print(colored(result.error_message, self.ERROR), file=self.stderr)

    def do_help(self, arg):
        """Prints a short usage note instead of command docs."""
        print("Type a digit or a parenthesized expression such as ((1+2)*4).\n"
              f"Only + and * are supported. Type '{self.settings.exit_command}' to quit.",
              file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return True


def start_interactive_shell(settings: Settings = None) -> int:
    """Run the shell until the user exits."""
    Shell(settings=settings).cmdloop()
    return 0
