import argparse
import logging
import sys

from lsh import __version__
from lsh.config import SHELL_NAME
from lsh.shell import Shell, init_readline


def configure_logging(debug=False):
    """Send lsh log records to stderr"""
    root = logging.getLogger("lsh")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)


def configure_streams():
    """Pass bytes that do not decode through to argv and back out unchanged"""
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


def main(argv=None):
    parser = argparse.ArgumentParser(prog=SHELL_NAME, description="A small interactive shell")
    parser.add_argument("--debug", action="store_true", help="log dispatch and process outcomes")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    configure_logging(args.debug)
    configure_streams()
    init_readline()
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())
