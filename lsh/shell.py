import logging
import sys

from lsh.builtin import Continuation
from lsh.config import EXIT_FAILURE, EXIT_SUCCESS, PROMPT, SHELL_NAME
from lsh.executor import execute
from lsh.parser import split_line
from lsh.session import ShellSession

try:
    import readline
except ImportError:
    readline = None

logger = logging.getLogger(__name__)


def init_readline():
    """Set up readline line editing when running in a real terminal"""
    if readline is None or not sys.stdin.isatty():
        return

    readline.parse_and_bind("set editing-mode emacs")
    readline.parse_and_bind("\\e[1;5D: backward-word")
    readline.parse_and_bind("\\e[1;5C: forward-word")


def read_line(prompt=PROMPT):
    """
    Read one line from the user.
    Returns: the line, or None at end of input
    """
    try:
        return input(prompt)
    except EOFError:
        return None


class Shell:
    def __init__(self, session=None, read_line=read_line):
        self.session = session if session is not None else ShellSession()
        self.read_line = read_line

    def run(self):
        """Main shell loop"""
        while True:
            try:
                line = self.read_line(PROMPT)
            except KeyboardInterrupt:
                print()
                continue
            except UnicodeDecodeError as e:
                print(f"{SHELL_NAME}: {e}", file=sys.stderr)
                continue
            except OSError as e:
                print(f"{SHELL_NAME}: {e}", file=sys.stderr)
                return EXIT_FAILURE

            if line is None:
                print()
                return EXIT_SUCCESS

            tokens = split_line(line)
            if not tokens:
                continue

            self.session.history.record(tokens)
            logger.debug("dispatching %s", tokens)
            if execute(tokens, self.session) is Continuation.TERMINATE:
                return EXIT_SUCCESS
