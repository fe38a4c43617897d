"""Exceptions raised by mimecharset."""


class CharsetError(Exception):
    """Base exception for mimecharset errors."""


class InvalidCharsetError(CharsetError, ValueError):
    """Raised when a value does not denote a usable charset.

    No input is rejected by :func:`mimecharset.parse` today; unknown names
    fall back to :class:`~mimecharset.Unregistered`.  The exception is part
    of the public API so that stricter parsing can be introduced without
    changing what callers catch.
    """

    def __init__(self, message: str = "The given charset is invalid") -> None:
        super().__init__(message)
