import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

import psutil

from lsh.builtin import Continuation, lookup_builtin
from lsh.config import EXIT_NOT_EXECUTABLE, EXIT_NOT_FOUND, SHELL_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessOutcome:
    """How a launched program ended: a normal exit code or a terminating signal."""
    pid: Optional[int]
    exit_code: Optional[int] = None
    signal: Optional[int] = None

    @property
    def returncode(self):
        # Same convention as subprocess: negative signal number
        if self.signal is not None:
            return -self.signal
        return self.exit_code


def describe_process(pid):
    """Status of a process as reported by psutil, or 'unknown'"""
    try:
        return psutil.Process(pid).status()
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return "unknown"


def wait_for(pid, command=""):
    """
    Block until the process has exited or was killed by a signal.
    Stop notifications do not end the wait.
    Returns: ProcessOutcome
    """
    logger.debug("waiting for pid %d", pid)
    while True:
        try:
            _, status = os.waitpid(pid, os.WUNTRACED)
        except KeyboardInterrupt:
            # The foreground child got the same SIGINT; keep waiting for it
            continue

        if os.WIFEXITED(status):
            return ProcessOutcome(pid, exit_code=os.WEXITSTATUS(status))
        if os.WIFSIGNALED(status):
            return ProcessOutcome(pid, signal=os.WTERMSIG(status))
        if os.WIFSTOPPED(status):
            logger.debug("pid %d stopped by signal %d", pid, os.WSTOPSIG(status))
            print(f"[{pid}] stopped: {command} ({describe_process(pid)})", file=sys.stderr)


def launch(args, session):
    """
    Run an external program in the foreground.
    Returns: Continuation.CONTINUE, whatever the program did
    """
    if not args:
        return Continuation.CONTINUE

    try:
        proc = subprocess.Popen(args)
    except FileNotFoundError as e:
        print(f"{SHELL_NAME}: {args[0]}: {e.strerror}", file=sys.stderr)
        session.last_outcome = ProcessOutcome(None, exit_code=EXIT_NOT_FOUND)
        return Continuation.CONTINUE
    except PermissionError as e:
        print(f"{SHELL_NAME}: {args[0]}: {e.strerror}", file=sys.stderr)
        session.last_outcome = ProcessOutcome(None, exit_code=EXIT_NOT_EXECUTABLE)
        return Continuation.CONTINUE
    except OSError as e:
        if e.filename is not None:
            # exec failed inside the child
            print(f"{SHELL_NAME}: {args[0]}: {e.strerror}", file=sys.stderr)
            session.last_outcome = ProcessOutcome(None, exit_code=EXIT_NOT_EXECUTABLE)
        else:
            # fork itself failed
            print(f"{SHELL_NAME}: {e.strerror}", file=sys.stderr)
        return Continuation.CONTINUE
    except ValueError as e:
        # argv the OS cannot accept, e.g. an embedded NUL byte
        print(f"{SHELL_NAME}: {e}", file=sys.stderr)
        return Continuation.CONTINUE

    outcome = None
    while outcome is None:
        try:
            outcome = wait_for(proc.pid, " ".join(args))
        except KeyboardInterrupt:
            continue
    # Already reaped; keep Popen from waiting on the pid again
    proc.returncode = outcome.returncode

    logger.debug("pid %d finished with returncode %s", proc.pid, outcome.returncode)
    session.last_outcome = outcome
    return Continuation.CONTINUE


def execute(args, session):
    """
    Execute one tokenized command: a builtin if the name matches, otherwise
    an external program.
    Returns: Continuation
    """
    if not args:
        return Continuation.CONTINUE

    handler = lookup_builtin(args[0], session.builtins)
    if handler is not None:
        return handler(args, session)

    return launch(args, session)
