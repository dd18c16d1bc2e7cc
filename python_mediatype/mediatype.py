from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .datastructures import ImmutableCaseInsensitiveMap
from .exceptions import ArgumentConflictError, MalformedMimeTypeError
from .grammar import has_non_token_char, quote_string

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

# Get logger for this module.
logger = logging.getLogger(__name__)


class MediaType:
    """
    An HTTP media type, as used in a ``Content-Type`` header: a type, a
    subtype and a set of parameters, e.g. ``text/plain; charset=utf-8``.

    Media types are immutable.  ``type`` and ``subtype`` are always
    lowercase, and the parameter names are case-insensitive.  Use
    :meth:`change` to get a modified copy.
    """

    __slots__ = ("_type", "_subtype", "_parameters")

    def __init__(self, type: str, subtype: str, parameters: Mapping[str, str] | None = None) -> None:
        self._type = type.lower()
        self._subtype = subtype.lower()
        self._parameters: ImmutableCaseInsensitiveMap[str] = ImmutableCaseInsensitiveMap(parameters)

    @property
    def type(self) -> str:
        """The primary identifier of the MIME type.  Always lowercase."""
        return self._type

    @property
    def subtype(self) -> str:
        """The secondary identifier of the MIME type.  Always lowercase."""
        return self._subtype

    @property
    def parameters(self) -> ImmutableCaseInsensitiveMap[str]:
        """The parameters of the media type.  Keys are case-insensitive."""
        return self._parameters

    @property
    def mime_type(self) -> str:
        return f"{self._type}/{self._subtype}"

    def change(
        self,
        type: str | None = None,
        subtype: str | None = None,
        mime_type: str | None = None,
        parameters: Mapping[str, str] | None = None,
        clear_parameters: bool = False,
    ) -> MediaType:
        """
        Returns a copy of this media type with some fields altered.

        ``type`` and ``subtype`` replace the corresponding fields.
        ``mime_type`` is split on ``/`` and replaces both; it can't be passed
        along with ``type`` or ``subtype``.

        ``parameters`` are added to the existing parameters, overwriting any
        with the same (case-insensitive) name.  If ``clear_parameters`` is
        true, they replace the existing parameters entirely instead.
        """
        if mime_type is not None:
            if type is not None:
                logger.warning("Both type and mime_type given")
                raise ArgumentConflictError("You may not pass both type and mime_type.")
            elif subtype is not None:
                logger.warning("Both subtype and mime_type given")
                raise ArgumentConflictError("You may not pass both subtype and mime_type.")

            segments = mime_type.split("/")
            if len(segments) != 2:
                logger.warning("Invalid mime type: %r", mime_type)
                raise MalformedMimeTypeError(f'Invalid mime type "{mime_type}".', value=mime_type)

            type, subtype = segments

        if type is None:
            type = self._type
        if subtype is None:
            subtype = self._subtype
        if parameters is None:
            parameters = {}

        if not clear_parameters:
            merged = self._parameters.mutable_copy()
            merged.update(parameters)
            parameters = merged

        return MediaType(type, subtype, parameters)

    def __str__(self) -> str:
        """
        Formats the media type as a valid HTTP header value.  Parameter values
        that aren't tokens are written as quoted strings.
        """
        parts = [self.mime_type]
        for name, value in self._parameters.items():
            if has_non_token_char(value):
                value = quote_string(value)
            parts.append(f"; {name}={value}")
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MediaType):
            return (
                self._type == other._type
                and self._subtype == other._subtype
                and self._parameters == other._parameters
            )
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash((self._type, self._subtype, self._parameters))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


def media_type(mime_type: str, parameters: Mapping[str, str] | None = None) -> MediaType:
    """
    Builds a media type from a ``type/subtype`` string, e.g.
    ``media_type("text/html", {"charset": "utf-8"})``.
    """
    return OCTET_STREAM.change(
        mime_type=mime_type, parameters=parameters, clear_parameters=True
    )


# The content type used for files that don't say otherwise.
OCTET_STREAM = MediaType("application", "octet-stream")
