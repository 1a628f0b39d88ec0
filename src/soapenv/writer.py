"""
XML token writers.

The envelope driver only needs something with ``write_token`` and
``flush``.  ``SaxTokenWriter`` is the stock implementation on top of
``xml.sax.saxutils.XMLGenerator``, which handles escaping of character
data and attribute values.
"""

from __future__ import annotations

import logging
from typing import IO, Protocol
from xml.sax.saxutils import XMLGenerator

from .tokens import CharData, EndElement, StartElement, Token

__all__ = ["SaxTokenWriter", "TokenWriter"]

_logger = logging.getLogger(__name__)


class TokenWriter(Protocol):
    """Sink for an ordered stream of XML tokens."""

    def write_token(self, token: Token) -> None:
        """Write one token.  Errors abort the encode."""
        ...

    def flush(self) -> None:
        """Push everything written so far to the underlying output."""
        ...


class SaxTokenWriter:
    """Write tokens as XML text through ``XMLGenerator``.

    Args:
        out: Text or binary file-like object.
        encoding: Output encoding (used for binary outputs and the
            XML declaration).
        xml_declaration: Write ``<?xml ...?>`` before the first token.
    """

    def __init__(
        self, out: IO[str] | IO[bytes], encoding: str = "utf-8", *, xml_declaration: bool = False
    ) -> None:
        self._generator = XMLGenerator(out, encoding=encoding, short_empty_elements=False)
        self._pending_declaration = xml_declaration

    def write_token(self, token: Token) -> None:
        if self._pending_declaration:
            self._generator.startDocument()
            self._pending_declaration = False

        if isinstance(token, StartElement):
            self._generator.startElement(token.name, dict(token.attrs))
        elif isinstance(token, EndElement):
            self._generator.endElement(token.name)
        elif isinstance(token, CharData):
            self._generator.characters(token.text)
        else:
            raise TypeError(f"Not an XML token: {token!r}")

    def flush(self) -> None:
        self._generator.endDocument()
        _logger.debug("XML writer flushed")
