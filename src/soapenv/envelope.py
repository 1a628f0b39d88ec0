"""
SOAP envelope assembly.

The assemblers append balanced start/end tag pairs for the Envelope,
Header and Body sections.  ``EnvelopeEncoder`` runs them in a fixed
order around the encoded parameter trees and writes the result:

    Envelope
      Header            (only when header params are present)
        <header_name>   (only when header name and namespace are set)
      Body
        <method>
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sized
from typing import TYPE_CHECKING, Any

from .config import EnvelopeConfig, get_envelope_config
from .encoder import encode_value
from .errors import BodyContractError, DefinitionsMissingError
from .tokens import EndElement, StartElement, Token, TokenStream
from .writer import SaxTokenWriter

if TYPE_CHECKING:
    from .models import Process
    from .writer import TokenWriter

__all__ = [
    "EnvelopeEncoder",
    "encode_envelope",
    "end_body",
    "end_envelope",
    "end_header",
    "envelope_to_string",
    "start_body",
    "start_envelope",
    "start_header",
]

_logger = logging.getLogger(__name__)


# ── Assemblers ───────────────────────────────────────────────────────


def start_envelope(stream: TokenStream, config: EnvelopeConfig) -> None:
    stream.append(StartElement(config.tag("Envelope"), config.namespace_attributes()))


def end_envelope(stream: TokenStream, config: EnvelopeConfig) -> None:
    stream.append(EndElement(config.tag("Envelope")))


def start_header(stream: TokenStream, config: EnvelopeConfig, name: str, namespace: str) -> None:
    """Open the Header section.

    The named header element is only written when both ``name`` and
    ``namespace`` are set; otherwise the params sit directly in Header.
    """
    header = StartElement(config.tag("Header"))
    if not name or not namespace:
        stream.append(header)
        return
    stream.append(header, StartElement(name, (("xmlns", namespace),)))


def end_header(stream: TokenStream, config: EnvelopeConfig, name: str, namespace: str) -> None:
    """Close the Header section opened by ``start_header`` with the same arguments."""
    if name and namespace:
        stream.append(EndElement(name))
    stream.append(EndElement(config.tag("Header")))


def _method_tag(method: str, prefix_namespace: str) -> str:
    return f"{prefix_namespace}:{method}" if prefix_namespace else method


def start_body(
    stream: TokenStream,
    config: EnvelopeConfig,
    method: str,
    namespace: str,
    prefix_namespace: str = "",
) -> None:
    """
    Open the Body section and the operation element.

    With ``prefix_namespace`` the operation is written as
    ``prefix_namespace:method``; otherwise as ``method`` with an ``xmlns``
    attribute bound to ``namespace``.

    Raises:
        BodyContractError: If method or namespace is empty.  Nothing is
            appended in that case.
    """
    if not method or not namespace:
        raise BodyContractError("method or namespace is empty")

    if prefix_namespace:
        operation = StartElement(_method_tag(method, prefix_namespace))
    else:
        operation = StartElement(method, (("xmlns", namespace),))
    stream.append(StartElement(config.tag("Body")), operation)


def end_body(
    stream: TokenStream, config: EnvelopeConfig, method: str, prefix_namespace: str = ""
) -> None:
    stream.append(
        EndElement(_method_tag(method, prefix_namespace)),
        EndElement(config.tag("Body")),
    )


# ── Driver ───────────────────────────────────────────────────────────


def _has_params(params: Any) -> bool:
    if params is None:
        return False
    if isinstance(params, Sized):
        return len(params) > 0
    return True


class EnvelopeEncoder:
    """Encode a ``Process`` into a complete SOAP envelope.

    The config is captured when the encoder is created; later calls to
    ``configure_envelope()`` do not affect this instance.

    Args:
        config: Envelope settings.  Defaults to the process-wide config
            at construction time.
    """

    def __init__(self, config: EnvelopeConfig | None = None) -> None:
        self.config = config if config is not None else get_envelope_config()

    def build_tokens(self, process: Process) -> list[Token]:
        """
        Build the envelope token list without writing it anywhere.

        Raises:
            DefinitionsMissingError: If the client has no definitions.
            BodyContractError: If the request method or namespace is empty.
            UnsupportedValueError: In strict mode, on unsupported params.
        """
        client = process.client
        request = process.request

        if client.definitions is None:
            raise DefinitionsMissingError("Client has no schema definitions")

        namespace = request.namespace or client.definitions.target_namespace()
        strict = self.config.strict
        stream = TokenStream()

        start_envelope(stream, self.config)

        if _has_params(client.header_params):
            start_header(stream, self.config, client.header_name, namespace)
            encode_value(stream, client.header_params, strict=strict)
            end_header(stream, self.config, client.header_name, namespace)

        start_body(stream, self.config, request.method, namespace, request.prefix_namespace)
        encode_value(stream, request.params, strict=strict)
        end_body(stream, self.config, request.method, request.prefix_namespace)

        end_envelope(stream, self.config)

        _logger.debug("Built envelope for %s: %d tokens", request.method, len(stream))
        return stream.tokens()

    def encode(self, process: Process, writer: TokenWriter) -> None:
        """
        Build the envelope and write every token through ``writer``, then flush.

        The full token list is built before anything is written, so a
        contract error never leaves partial output.  Writer errors
        propagate immediately; partial output is the writer's to discard.
        """
        for token in self.build_tokens(process):
            writer.write_token(token)
        writer.flush()


def encode_envelope(
    process: Process, writer: TokenWriter, config: EnvelopeConfig | None = None
) -> None:
    """Encode ``process`` through ``writer`` with a one-off encoder."""
    EnvelopeEncoder(config).encode(process, writer)


def envelope_to_string(
    process: Process, config: EnvelopeConfig | None = None, *, xml_declaration: bool = False
) -> str:
    """Encode ``process`` and return the envelope as XML text."""
    out = io.StringIO()
    encode_envelope(process, SaxTokenWriter(out, xml_declaration=xml_declaration), config)
    return out.getvalue()
