class _MessageError(Exception):
    def __init__(self, message: str | None = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message


class NullPointerException(_MessageError):
    """Raised when a value required to be non-None is None."""


class NoSuchElementException(_MessageError):
    """Raised when a value is accessed on an empty Optional."""
