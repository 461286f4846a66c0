"""Error types raised at the I/O boundary of the spell checker."""


class SpellError(Exception):
    """Base exception for textspell errors."""

    def __init__(self, message, path=None, reason=None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.reason = reason


def _with_reason(message, reason):
    return f"{message} ({reason})" if reason else message


class DictionaryUnreadable(SpellError):
    """Raised when the word list cannot be opened or read. Fatal for the run."""

    def __init__(self, path, reason=None):
        message = _with_reason(f"Cannot open dictionary file '{path}'", reason)
        super().__init__(message, path, reason)


class InputUnreadable(SpellError):
    """Raised when a named input file or directory cannot be opened."""

    def __init__(self, path, reason=None):
        message = _with_reason(f"Cannot open '{path}'", reason)
        super().__init__(message, path, reason)
