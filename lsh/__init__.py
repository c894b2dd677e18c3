"""
lsh - a small interactive shell in Python 3
Features:
 - Builtins: cd, help, exit, history
 - External commands launched in the foreground and waited for
 - In-memory command history
"""

__version__ = "0.1.0"
