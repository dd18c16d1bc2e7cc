from __future__ import annotations


class MediaTypeError(ValueError):
    """Base error class for this library."""


class ArgumentConflictError(MediaTypeError):
    """This exception is raised when two options that exclude each other are
    passed together - for example, a ``mime_type`` together with a ``type``
    or ``subtype`` in :meth:`MediaType.change`.
    """


class MalformedMimeTypeError(MediaTypeError):
    """This exception is raised when a MIME type string does not have the
    form ``type/subtype``.
    """

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)

        #: The string that could not be split into a type and a subtype.
        self.value = value


class FinalizedError(MediaTypeError, RuntimeError):
    """This exception is raised when :meth:`MultipartFile.finalize` is called
    on a file that has already been finalized.
    """


class StreamConsumedError(MediaTypeError, RuntimeError):
    """This exception is raised when a :class:`ByteStream` is iterated after
    its data has already been handed out once.
    """


class StreamClosedError(StreamConsumedError):
    """This exception is raised when a :class:`ByteStream` is read after it
    has been closed.
    """
