SHELL_NAME = "lsh"
PROMPT = "> "

# Characters that separate tokens on a command line
TOKEN_DELIMITERS = " \t\r\n\a"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Outcome codes recorded when the program could not be executed
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

HELP_HEADER = """Type program names and arguments, and hit enter.
The following are built-in commands:"""
HELP_FOOTER = "Use the man command for information on other programs."
