"""
XML token types and the append-only token stream.

Assemblers and the value encoder only append to a ``TokenStream``;
nothing reads it until the envelope driver hands the tokens to a writer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["CharData", "EndElement", "StartElement", "Token", "TokenStream"]


@dataclass(frozen=True)
class StartElement:
    """Opening tag.

    Attributes:
        name: Literal tag name, already prefixed where needed
            (e.g. ``soap:Envelope``). No namespace URI is bound to it.
        attrs: Attribute (name, value) pairs in emission order.
    """

    name: str
    attrs: tuple[tuple[str, str], ...] = ()

    def end(self) -> EndElement:
        """Return the end tag that closes this element."""
        return EndElement(self.name)


@dataclass(frozen=True)
class EndElement:
    """Closing tag."""

    name: str


@dataclass(frozen=True)
class CharData:
    """Character data. Escaping is left to the writer."""

    text: str


Token = Union[StartElement, EndElement, CharData]


class TokenStream:
    """Append-only ordered sequence of XML tokens."""

    def __init__(self) -> None:
        self._tokens: list[Token] = []

    def append(self, *tokens: Token) -> None:
        self._tokens.extend(tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def tokens(self) -> list[Token]:
        """Return a copy of the accumulated tokens."""
        return list(self._tokens)
