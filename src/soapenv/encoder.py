"""
Recursive encoder from parameter trees to XML tokens.

Supported value shapes, checked in this order:

- ``NamespaceParam``: one ``namespace:name`` element around its value.
- mapping: one element per key, around the entry's value.
- ``list``: each item encoded in place, no wrapping element.
- 2-tuple: ``(name, value)`` -- one element named by position 0.
- ``str``: character data.
- ``int`` (not ``bool``): character data in base 10.

Anything else is unsupported.  By default it is dropped without output;
with ``strict=True`` it raises ``UnsupportedValueError``.

Mappings are written in iteration order.  For ``dict`` that is insertion
order, but arbitrary ``Mapping`` types make no promise: when element
order matters on the wire, pass a list of 2-tuples instead.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import UnsupportedValueError
from .models import NamespaceParam
from .tokens import CharData, StartElement, TokenStream

__all__ = ["encode_value"]

_logger = logging.getLogger(__name__)


def _wrap(stream: TokenStream, name: str, value: Any, strict: bool) -> None:
    start = StartElement(name)
    stream.append(start)
    encode_value(stream, value, strict=strict)
    stream.append(start.end())


def _pair_label(label: Any, strict: bool) -> str:
    if isinstance(label, str):
        return label
    if strict:
        raise UnsupportedValueError(
            f"Ordered pair label must be a string, got {type(label).__name__}"
        )
    return str(label)


def encode_value(stream: TokenStream, value: Any, *, strict: bool = False) -> None:
    """
    Append the tokens for ``value`` to ``stream``.

    Raises:
        UnsupportedValueError: In strict mode, for values outside the
            supported shapes and for non-string pair labels.
    """
    if isinstance(value, NamespaceParam):
        _wrap(stream, f"{value.namespace}:{value.name}", value.value, strict)
    elif isinstance(value, Mapping):
        for key, item in value.items():
            _wrap(stream, str(key), item, strict)
    elif isinstance(value, list):
        for item in value:
            encode_value(stream, item, strict=strict)
    elif isinstance(value, tuple) and len(value) == 2:
        _wrap(stream, _pair_label(value[0], strict), value[1], strict)
    elif isinstance(value, str):
        stream.append(CharData(value))
    elif isinstance(value, int) and not isinstance(value, bool):
        stream.append(CharData(str(value)))
    elif strict:
        raise UnsupportedValueError(f"Cannot encode value of type {type(value).__name__}")
    else:
        _logger.debug("Dropping unsupported value of type %s", type(value).__name__)
