from __future__ import annotations

import codecs
import logging

# Get logger for this module.
logger = logging.getLogger(__name__)

# Preferred MIME names (as registered with IANA) for the codecs we know, keyed
# by the name the codecs registry reports.  Codecs missing from this table
# keep the label they were looked up with.
MIME_NAMES = {
    "ascii": "us-ascii",
    "utf-8": "utf-8",
    "utf-16": "utf-16",
    "utf-16-le": "utf-16le",
    "utf-16-be": "utf-16be",
    "utf-32": "utf-32",
    "utf-32-le": "utf-32le",
    "utf-32-be": "utf-32be",
    "iso8859-1": "iso-8859-1",
    "iso8859-2": "iso-8859-2",
    "iso8859-3": "iso-8859-3",
    "iso8859-4": "iso-8859-4",
    "iso8859-5": "iso-8859-5",
    "iso8859-6": "iso-8859-6",
    "iso8859-7": "iso-8859-7",
    "iso8859-8": "iso-8859-8",
    "iso8859-9": "iso-8859-9",
    "iso8859-10": "iso-8859-10",
    "iso8859-13": "iso-8859-13",
    "iso8859-14": "iso-8859-14",
    "iso8859-15": "iso-8859-15",
    "iso8859-16": "iso-8859-16",
    "cp1250": "windows-1250",
    "cp1251": "windows-1251",
    "cp1252": "windows-1252",
    "cp1253": "windows-1253",
    "cp1254": "windows-1254",
    "cp1255": "windows-1255",
    "cp1256": "windows-1256",
    "cp1257": "windows-1257",
    "cp1258": "windows-1258",
    "koi8-r": "koi8-r",
    "koi8-u": "koi8-u",
    "mac-roman": "macintosh",
    "euc_jp": "euc-jp",
    "shift_jis": "shift_jis",
    "iso2022_jp": "iso-2022-jp",
    "euc_kr": "euc-kr",
    "gb2312": "gb2312",
    "gbk": "gbk",
    "gb18030": "gb18030",
    "big5": "big5",
}


class Encoding:
    """
    A text encoding looked up in the :mod:`codecs` registry.  ``name`` is the
    encoding's preferred MIME name, e.g. ``utf-8`` or ``iso-8859-1``, which is
    what gets written into a ``charset`` parameter.
    """

    def __init__(self, codec_info: codecs.CodecInfo, label: str | None = None) -> None:
        self._codec_info = codec_info
        self._name = MIME_NAMES.get(codec_info.name, label if label is not None else codec_info.name)

    @classmethod
    def lookup(cls, charset: str) -> Encoding:
        """
        Raises LookupError if there is no codec called ``charset``, or if it
        isn't a text encoding (like ``base64`` or ``rot13``).
        """
        codec_info = codecs.lookup(charset)
        "".encode(codec_info.name)
        return cls(codec_info, charset)

    @property
    def name(self) -> str:
        return self._name

    @property
    def codec_name(self) -> str:
        """The name of the codec in Python's :mod:`codecs` registry."""
        return self._codec_info.name

    def encode(self, value: str) -> bytes:
        return value.encode(self.codec_name)

    def decode(self, data: bytes) -> str:
        return data.decode(self.codec_name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Encoding):
            return self.codec_name == other.codec_name
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.codec_name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


UTF8 = Encoding.lookup("utf-8")
LATIN1 = Encoding.lookup("latin-1")
ASCII = Encoding.lookup("ascii")


def encoding_for_charset(charset: str | None, fallback: Encoding = UTF8) -> Encoding:
    """
    Returns the encoding called ``charset``.  If ``charset`` is None or names
    an encoding we don't know, ``fallback`` is returned instead.
    """
    if charset is None:
        return fallback

    try:
        return Encoding.lookup(charset)
    except LookupError:
        logger.warning("Unknown charset %r, falling back to %s", charset, fallback.name)
        return fallback
