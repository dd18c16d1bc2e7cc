"""
Pieces of the HTTP grammar (RFC 7230, section 3.2) that media type values are
built from.  Only the serializer uses them here, but they are public so that
a parser can share them.
"""

from __future__ import annotations

import re

# The separator characters that may not appear in a token.
SEPARATORS = '()<>@,;:"\\/[]?={} \t'

_SEPARATORS_CLASS = re.escape(SEPARATORS)
_CONTROL_CLASS = r"\x00-\x1f\x7f"

# An HTTP token.
TOKEN_RE = re.compile(r"[^" + _SEPARATORS_CLASS + _CONTROL_CLASS + r"]+")

# A single character that is *not* allowed in an HTTP token.
NON_TOKEN_RE = re.compile(r"[" + _SEPARATORS_CLASS + _CONTROL_CLASS + r"]")

# Linear whitespace: an optional CRLF followed by spaces and tabs.
LWS_RE = re.compile(r"(?:\r\n)?[ \t]+")

# Any number of linear whitespace runs in a row.
WHITESPACE_RE = re.compile(r"(?:" + LWS_RE.pattern + r")*")

# Characters that have to be backslash-escaped inside a quoted string.
_ESCAPED_CHAR_RE = re.compile(r'["' + _CONTROL_CLASS + r"]")


def is_token(value: str) -> bool:
    """Whether ``value`` is a complete, non-empty HTTP token."""
    return TOKEN_RE.fullmatch(value) is not None


def has_non_token_char(value: str) -> bool:
    """Whether ``value`` contains any character that a token can't hold."""
    return NON_TOKEN_RE.search(value) is not None


def quote_string(value: str) -> str:
    """
    Wraps ``value`` in double quotes, putting a backslash in front of every
    double quote and control character in it.
    """
    return '"' + _ESCAPED_CHAR_RE.sub(lambda m: "\\" + m.group(0), value) + '"'
