class BookmarksClientError(RuntimeError):
    """Base class for failures that end an invocation with a non-zero status."""


class SerializationError(BookmarksClientError):
    pass


class TransportError(BookmarksClientError):
    pass


class DecodeError(BookmarksClientError):
    pass
