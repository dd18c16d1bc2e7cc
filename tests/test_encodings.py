from __future__ import annotations

import logging

import pytest

from python_mediatype.encodings import ASCII, LATIN1, UTF8, Encoding, encoding_for_charset


def test_mime_names() -> None:
    assert UTF8.name == "utf-8"
    assert LATIN1.name == "iso-8859-1"
    assert ASCII.name == "us-ascii"
    assert Encoding.lookup("UTF8").name == "utf-8"
    assert LATIN1.codec_name == "iso8859-1"


@pytest.mark.parametrize(
    "charset, name",
    [
        ("ISO-8859-1", "iso-8859-1"),
        ("US-ASCII", "us-ascii"),
        ("windows-1252", "windows-1252"),
        ("EUC-JP", "euc-jp"),
        ("Shift_JIS", "shift_jis"),
        ("UTF-16LE", "utf-16le"),
        ("macintosh", "macintosh"),
        ("latin2", "iso-8859-2"),
    ],
)
def test_lookup_uses_preferred_mime_name(charset: str, name: str) -> None:
    assert Encoding.lookup(charset).name == name


def test_lookup_keeps_label_without_mime_name() -> None:
    encoding = Encoding.lookup("UTF-8-SIG")
    assert encoding.name == "UTF-8-SIG"
    assert encoding.codec_name == "utf-8-sig"
    assert encoding.encode("a") == b"\xef\xbb\xbfa"


def test_encode_decode() -> None:
    assert UTF8.encode("é") == b"\xc3\xa9"
    assert LATIN1.encode("é") == b"\xe9"
    assert LATIN1.decode(b"\xe9") == "é"


def test_lookup_rejects_non_text_codecs() -> None:
    with pytest.raises(LookupError):
        Encoding.lookup("base64")
    with pytest.raises(LookupError):
        Encoding.lookup("no-such-charset")


def test_equality() -> None:
    assert Encoding.lookup("latin-1") == LATIN1
    assert Encoding.lookup("latin-1") != UTF8
    assert len({Encoding.lookup("utf8"), UTF8}) == 1


def test_encoding_for_charset() -> None:
    assert encoding_for_charset(None) is UTF8
    assert encoding_for_charset(None, LATIN1) is LATIN1
    assert encoding_for_charset("ISO-8859-1") == LATIN1


def test_unknown_charset_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="python_mediatype.encodings"):
        assert encoding_for_charset("klingon") is UTF8
    assert "klingon" in caplog.text
