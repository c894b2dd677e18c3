import os

from lsh.builtin import BUILTINS
from lsh.history import History


class ShellSession:
    """
    State owned by one running shell.
    The working directory lives in the process itself so that launched
    programs inherit it.
    """

    def __init__(self, history=None, builtins=BUILTINS):
        self.history = history if history is not None else History()
        self.builtins = builtins
        self.last_outcome = None

    def chdir(self, path):
        """Change the working directory of the shell process"""
        os.chdir(path)
