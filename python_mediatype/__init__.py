__version__ = "0.1.0"

from .datastructures import CanonicalizedMap, CaseInsensitiveMap, ImmutableCaseInsensitiveMap
from .encodings import Encoding, encoding_for_charset
from .exceptions import (
    ArgumentConflictError,
    FinalizedError,
    MalformedMimeTypeError,
    MediaTypeError,
    StreamClosedError,
    StreamConsumedError,
)
from .mediatype import MediaType, media_type
from .multipart import MultipartFile
from .stream import ByteStream

__all__ = (
    "ArgumentConflictError",
    "ByteStream",
    "CanonicalizedMap",
    "CaseInsensitiveMap",
    "Encoding",
    "FinalizedError",
    "ImmutableCaseInsensitiveMap",
    "MalformedMimeTypeError",
    "MediaType",
    "MediaTypeError",
    "MultipartFile",
    "StreamClosedError",
    "StreamConsumedError",
    "encoding_for_charset",
    "media_type",
)
