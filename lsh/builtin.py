import enum
import logging
import sys
from types import MappingProxyType

from lsh.config import HELP_FOOTER, HELP_HEADER, SHELL_NAME

logger = logging.getLogger(__name__)


class Continuation(enum.Enum):
    """Whether the shell loop keeps reading commands after one has run."""
    CONTINUE = "continue"
    TERMINATE = "terminate"


def builtin_cd(args, session):
    """Change directory"""
    if len(args) < 2:
        print(f'{SHELL_NAME}: expected argument to "cd"', file=sys.stderr)
        return Continuation.CONTINUE

    path = args[1]
    try:
        session.chdir(path)
    except OSError as e:
        print(f"{SHELL_NAME}: cd: {path}: {e.strerror}", file=sys.stderr)
    except ValueError as e:
        # e.g. an embedded NUL byte
        print(f"{SHELL_NAME}: cd: {e}", file=sys.stderr)
    return Continuation.CONTINUE


def builtin_help(args, session):
    """Print help message"""
    print(HELP_HEADER)
    for name in builtin_names(session.builtins):
        print(f"  {name}")
    print(HELP_FOOTER)
    return Continuation.CONTINUE


def builtin_exit(args, session):
    return Continuation.TERMINATE


def builtin_history(args, session):
    """Show command history"""
    session.history.show()
    return Continuation.CONTINUE


# Looked up in this order; the first name that matches wins
BUILTINS = MappingProxyType({
    "cd": builtin_cd,
    "help": builtin_help,
    "exit": builtin_exit,
    "history": builtin_history,
})


def builtin_names(builtins=BUILTINS):
    return list(builtins)


def lookup_builtin(name, builtins=BUILTINS):
    """
    Find the handler registered for a command name.
    Returns: handler or None
    """
    for builtin_name, handler in builtins.items():
        if builtin_name == name:
            logger.debug("builtin matched: %s", name)
            return handler
    return None
