from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from .encodings import UTF8, encoding_for_charset
from .exceptions import FinalizedError
from .mediatype import OCTET_STREAM, MediaType
from .stream import DEFAULT_CHUNK_SIZE, ByteStream

if TYPE_CHECKING:  # pragma: no cover
    from typing import TypedDict

    from .stream import StreamSource

    class MultipartFileConfig(TypedDict, total=False):
        CHUNK_SIZE: int


class MultipartFile:
    """
    A file to be uploaded as one part of a multipart request.  It doesn't
    need to correspond to a file on disk.

    The file owns its byte stream until :meth:`finalize` hands it over to
    whoever is building the request.  That can only happen once.
    """

    def __init__(
        self,
        field: str,
        stream: StreamSource,
        length: int,
        filename: str | None = None,
        content_type: MediaType | None = None,
    ) -> None:
        self.logger = logging.getLogger(__name__)

        self._field = field
        self._stream = ByteStream.from_source(stream)
        self._length = length
        self._filename = filename
        self._content_type = content_type if content_type is not None else OCTET_STREAM
        self._is_finalized = False

    @classmethod
    def from_bytes(
        cls,
        field: str,
        value: bytes | bytearray | memoryview,
        filename: str | None = None,
        content_type: MediaType | None = None,
    ) -> MultipartFile:
        """Creates a file from a bytes-like object."""
        value = bytes(value)
        return cls(field, ByteStream.from_bytes(value), len(value), filename=filename, content_type=content_type)

    @classmethod
    def from_string(
        cls,
        field: str,
        value: str,
        filename: str | None = None,
        content_type: MediaType | None = None,
    ) -> MultipartFile:
        """
        Creates a file from a string.

        ``value`` is encoded with the charset given in ``content_type``, or
        UTF-8 if there is none.  ``content_type`` defaults to ``text/plain``,
        and the returned file's content type always carries the canonical
        name of the charset that was used, e.g. ``text/plain; charset=utf-8``.
        """
        if content_type is None:
            content_type = MediaType("text", "plain")

        encoding = encoding_for_charset(content_type.parameters.get("charset"), UTF8)
        content_type = content_type.change(parameters={"charset": encoding.name})

        return cls.from_bytes(field, encoding.encode(value), filename=filename, content_type=content_type)

    @classmethod
    def from_path(
        cls,
        field: str,
        path: str | os.PathLike[str],
        filename: str | None = None,
        content_type: MediaType | None = None,
        config: MultipartFileConfig = {},
    ) -> MultipartFile:
        """
        Creates a file that streams the contents of the file at ``path``.

        The length is taken from the file's current size, and ``filename``
        defaults to the last component of ``path``.  The file is only opened
        once the stream is read.
        """
        path = os.fspath(path)
        length = os.path.getsize(path)
        if filename is None:
            filename = os.path.basename(path)

        chunk_size = config.get("CHUNK_SIZE", DEFAULT_CHUNK_SIZE)
        stream = ByteStream.from_path(path, chunk_size=chunk_size)
        return cls(field, stream, length, filename=filename, content_type=content_type)

    @property
    def field(self) -> str:
        """The name of the form field for the file."""
        return self._field

    @property
    def length(self) -> int:
        """The number of bytes the stream will emit."""
        return self._length

    @property
    def filename(self) -> str | None:
        """The basename of the file.  May be None."""
        return self._filename

    @property
    def content_type(self) -> MediaType:
        """The content type of the file.  Defaults to ``application/octet-stream``."""
        return self._content_type

    @property
    def is_finalized(self) -> bool:
        """Whether :meth:`finalize` has been called."""
        return self._is_finalized

    def finalize(self) -> ByteStream:
        """
        Hands over the stream that emits the body of the file, in preparation
        for sending it as part of a multipart request.  This can only be
        called once; calling it again raises :class:`FinalizedError`.
        """
        if self._is_finalized:
            self.logger.warning("Trying to finalize a finalized file: %r", self)
            raise FinalizedError("Can't finalize a finalized MultipartFile.")

        self._is_finalized = True
        self.logger.debug("Finalized %r", self)
        return self._stream

    def __repr__(self) -> str:
        return "%s(field=%r, filename=%r, content_type=%r, length=%d)" % (
            self.__class__.__name__,
            self.field,
            self.filename,
            str(self.content_type),
            self.length,
        )
