"""Exceptions raised while preparing the documentation corpus."""


class CorpusError(ValueError):
    """The corpus is missing data needed to flatten and index it.

    Raised during startup only. The server must not begin serving a corpus
    it cannot fully index.
    """

    def __init__(self, message: str, *, location: str | None = None):
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)
