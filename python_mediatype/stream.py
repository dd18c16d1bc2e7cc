from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from .encodings import UTF8
from .exceptions import StreamClosedError, StreamConsumedError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterable, Iterator
    from typing import Protocol

    from .encodings import Encoding

    class SupportsRead(Protocol):
        def read(self, __n: int) -> bytes: ...

    StreamSource = ByteStream | bytes | bytearray | memoryview | SupportsRead | Iterable[bytes]

# Read files in 1 MiB chunks by default.
DEFAULT_CHUNK_SIZE = 1048576


class ByteStream:
    """
    A stream of byte chunks that can be read exactly once.

    The stream is lazy: nothing is read from the underlying source until the
    stream is iterated.  Iterating a second time raises
    :class:`StreamConsumedError`, and iterating after :meth:`close` raises
    :class:`StreamClosedError`.
    """

    def __init__(self, chunks: Iterable[bytes], on_close: Callable[[], None] | None = None) -> None:
        self.logger = logging.getLogger(__name__)
        self._chunks = chunks
        self._on_close = on_close
        self._consumed = False
        self._closed = False

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> ByteStream:
        data = bytes(data)
        return cls([data] if data else [])

    @classmethod
    def from_file(cls, fileobj: SupportsRead, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteStream:
        """
        Creates a stream that reads ``fileobj`` in chunks of ``chunk_size``
        bytes.  Closing the stream closes ``fileobj`` too, if it can be closed.
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be a positive number, not %r" % chunk_size)

        def read_chunks() -> Iterator[bytes]:
            while True:
                buff = fileobj.read(chunk_size)
                if not buff:
                    break
                yield buff

        return cls(read_chunks(), on_close=getattr(fileobj, "close", None))

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteStream:
        """
        Creates a stream over the file at ``path``.  The file isn't opened
        until the stream is iterated, and is closed again once iteration
        finishes.
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be a positive number, not %r" % chunk_size)

        def read_chunks() -> Iterator[bytes]:
            stream.logger.debug("Opening file: %r", path)
            with open(path, "rb") as f:
                while True:
                    buff = f.read(chunk_size)
                    if not buff:
                        break
                    yield buff

        stream = cls(read_chunks())
        return stream

    @classmethod
    def from_source(cls, source: StreamSource) -> ByteStream:
        """
        Turns anything that can provide bytes into a :class:`ByteStream`: an
        existing stream (returned as-is), a bytes-like object, an object with
        a ``read`` method, or an iterable of byte chunks.
        """
        if isinstance(source, str):
            raise TypeError("Can't stream a str, encode it to bytes first")
        if isinstance(source, ByteStream):
            return source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls.from_bytes(source)
        if hasattr(source, "read"):
            return cls.from_file(source)
        return cls(source)

    @property
    def is_consumed(self) -> bool:
        """Whether the stream has already been iterated."""
        return self._consumed

    def __iter__(self) -> Iterator[bytes]:
        if self._consumed:
            self.logger.warning("Trying to read a stream that was already read")
            raise StreamConsumedError("This stream has already been read")
        if self._closed:
            self.logger.warning("Trying to read a stream that was closed")
            raise StreamClosedError("This stream has been closed")

        self._consumed = True
        return self._iter_chunks()

    def _iter_chunks(self) -> Iterator[bytes]:
        try:
            for chunk in self._chunks:
                if chunk:
                    yield bytes(chunk)
        finally:
            self.close()

    def to_bytes(self) -> bytes:
        """Reads the whole stream and returns its contents."""
        return b"".join(self)

    def to_string(self, encoding: Encoding = UTF8) -> str:
        """Reads the whole stream and decodes it with ``encoding``."""
        return encoding.decode(self.to_bytes())

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        close_chunks = getattr(self._chunks, "close", None)
        if close_chunks is not None:
            close_chunks()
        if self._on_close is not None:
            self._on_close()

    def __enter__(self) -> ByteStream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(consumed={self._consumed!r})"
