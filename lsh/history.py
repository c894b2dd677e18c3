class History:
    """In-memory record of submitted commands, oldest first."""

    def __init__(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def record(self, tokens):
        """Add the command name and its first argument as a new entry"""
        text = ""
        if tokens:
            text = tokens[0] + " "
        if len(tokens) > 1:
            text += tokens[1]
        self._entries.append(text)

    def entries(self):
        """
        Numbered view of the history.
        Returns: list of (index, text), index starting at 1
        """
        return list(enumerate(self._entries, start=1))

    def show(self):
        """Print the whole history"""
        for i, text in self.entries():
            print(f" {i} {text}")
