"""
Buffer encodings — byte/text conversion using Node-style encoding names.

Build configurations name encodings the way Node's ``Buffer`` does
(``utf8``, ``hex``, ``base64``, ``binary``, ...).  ``hex`` and
``base64`` are not text codecs: decoding yields the digits, encoding
parses them back into bytes.  Unknown names go to Python's codec
registry and raise ``LookupError`` if it does not know them either.
"""

from __future__ import annotations

import base64

_TEXT_CODECS: dict[str, str] = {
    "utf8": "utf-8",
    "utf-8": "utf-8",
    "latin1": "latin-1",
    "binary": "latin-1",
    "ascii": "ascii",
    "ucs2": "utf-16-le",
    "ucs-2": "utf-16-le",
    "utf16le": "utf-16-le",
    "utf-16le": "utf-16-le",
}


def _codec(encoding: str) -> str:
    return _TEXT_CODECS.get(encoding.lower(), encoding)


def decode_contents(contents: bytes, encoding: str) -> str:
    """Interpret file bytes as text.

    Undecodable bytes become U+FFFD, as they do when Node decodes a
    buffer.
    """
    name = encoding.lower()
    if name == "hex":
        return contents.hex()
    if name == "base64":
        return base64.b64encode(contents).decode("ascii")
    return contents.decode(_codec(encoding), errors="replace")


def encode_text(text: str, encoding: str) -> bytes:
    """Turn generated text back into bytes.

    Raises:
        ValueError: Invalid hex or base64 digits.
        UnicodeEncodeError: A character the codec cannot represent.
    """
    name = encoding.lower()
    if name == "hex":
        return bytes.fromhex(text)
    if name == "base64":
        return base64.b64decode(text, validate=True)
    return text.encode(_codec(encoding))
