"""soapenv error types."""

from __future__ import annotations

__all__ = [
    "BodyContractError",
    "ConfigError",
    "DefinitionsMissingError",
    "SoapEnvError",
    "UnsupportedValueError",
]


class SoapEnvError(Exception):
    """Base error for soapenv operations."""


class DefinitionsMissingError(SoapEnvError):
    """No schema definitions were attached to the client."""


class BodyContractError(SoapEnvError):
    """Body cannot be assembled: method name or namespace is empty."""


class UnsupportedValueError(SoapEnvError):
    """A parameter value has a shape the encoder cannot represent.

    Only raised when the encoder runs in strict mode; otherwise such
    values are dropped.
    """


class ConfigError(SoapEnvError):
    """Envelope configuration validation error."""
