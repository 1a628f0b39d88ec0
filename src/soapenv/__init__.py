"""
soapenv — SOAP 1.1 envelope encoder.

Turns nested Python parameter trees (dicts, lists, ``(name, value)``
pairs, ``NamespaceParam`` wrappers, strings and ints) into a SOAP
Envelope/Header/Body token stream and XML document.
"""

from __future__ import annotations

from .config import (
    EnvelopeConfig,
    configure_envelope,
    envelope_config_from_env,
    get_envelope_config,
    reset_envelope_config,
)
from .constants import __version__
from .encoder import encode_value
from .envelope import EnvelopeEncoder, encode_envelope, envelope_to_string
from .errors import (
    BodyContractError,
    ConfigError,
    DefinitionsMissingError,
    SoapEnvError,
    UnsupportedValueError,
)
from .models import Client, Definitions, NamespaceParam, Process, Request, WsdlTypes, XsdSchema
from .tokens import CharData, EndElement, StartElement, TokenStream
from .writer import SaxTokenWriter, TokenWriter

__all__ = [
    "BodyContractError",
    "CharData",
    "Client",
    "ConfigError",
    "Definitions",
    "DefinitionsMissingError",
    "EndElement",
    "EnvelopeConfig",
    "EnvelopeEncoder",
    "NamespaceParam",
    "Process",
    "Request",
    "SaxTokenWriter",
    "SoapEnvError",
    "StartElement",
    "TokenStream",
    "TokenWriter",
    "UnsupportedValueError",
    "WsdlTypes",
    "XsdSchema",
    "__version__",
    "configure_envelope",
    "encode_envelope",
    "encode_value",
    "envelope_config_from_env",
    "envelope_to_string",
    "get_envelope_config",
    "reset_envelope_config",
]
