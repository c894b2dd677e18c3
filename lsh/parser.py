import re

from lsh.config import TOKEN_DELIMITERS

_TOKEN_RE = re.compile(f"[^{re.escape(TOKEN_DELIMITERS)}]+")


def split_line(line):
    """
    Split a command line into tokens.
    No quoting or escaping: every run of non-delimiter characters is one token.
    Returns: list of non-empty strings
    """
    return _TOKEN_RE.findall(line)
