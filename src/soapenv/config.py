"""
Envelope configuration.

An ``EnvelopeConfig`` fixes the tag prefix and the namespace attributes
written on the Envelope element.  Encoders capture one at construction,
so reconfiguring never affects an encode already in flight.

The module also keeps a process-wide default for callers that do not
pass a config explicitly.  ``configure_envelope()`` replaces it.
"""

from __future__ import annotations

__all__ = [
    "EnvelopeConfig",
    "configure_envelope",
    "envelope_config_from_env",
    "get_envelope_config",
    "reset_envelope_config",
]

import logging
import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .constants import DEFAULT_SOAP_PREFIX, ENV_PREFIX, ENV_STRICT, NS_SOAP_ENVELOPE, NS_XSD, NS_XSI
from .errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

_logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class EnvelopeConfig:
    """Immutable envelope settings.

    Attributes:
        prefix: Prefix for the Envelope, Header and Body tags.
        attributes: Replacement attribute set for the Envelope element,
            as (name, value) pairs.  None means the default xsi/xsd/soap
            namespace declarations.
        strict: Reject unsupported parameter values instead of dropping
            them.
    """

    prefix: str = DEFAULT_SOAP_PREFIX
    attributes: tuple[tuple[str, str], ...] | None = None
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str) or not self.prefix:
            raise ConfigError(f"Envelope prefix must be a non-empty string, got {self.prefix!r}")
        if ":" in self.prefix or any(ch.isspace() for ch in self.prefix):
            raise ConfigError(f"Envelope prefix must not contain ':' or whitespace: {self.prefix!r}")
        if self.attributes is not None:
            seen: set[str] = set()
            for name, value in self.attributes:
                if not isinstance(name, str) or not name:
                    raise ConfigError(f"Envelope attribute name must be a non-empty string: {name!r}")
                if not isinstance(value, str):
                    raise ConfigError(f"Envelope attribute {name!r} must have a string value")
                if name in seen:
                    raise ConfigError(f"Duplicate envelope attribute {name!r}")
                seen.add(name)

    @classmethod
    def create(
        cls,
        prefix: str = DEFAULT_SOAP_PREFIX,
        attributes: Mapping[str, str] | None = None,
        *,
        strict: bool = False,
    ) -> EnvelopeConfig:
        """Build a config from a mapping of attributes (order preserved)."""
        attrs = tuple(attributes.items()) if attributes is not None else None
        return cls(prefix=prefix, attributes=attrs, strict=strict)

    def tag(self, local: str) -> str:
        """Return ``local`` qualified with the envelope prefix."""
        return f"{self.prefix}:{local}"

    def namespace_attributes(self) -> tuple[tuple[str, str], ...]:
        """Attributes to write on the Envelope element."""
        if self.attributes is not None:
            return self.attributes
        return (
            ("xmlns:xsi", NS_XSI),
            ("xmlns:xsd", NS_XSD),
            (f"xmlns:{self.prefix}", NS_SOAP_ENVELOPE),
        )


# ── Process-wide default ─────────────────────────────────────────────

_default_config = EnvelopeConfig()


def get_envelope_config() -> EnvelopeConfig:
    """Return the process-wide default envelope config."""
    return _default_config


def configure_envelope(prefix: str, attributes: Mapping[str, str] | None = None) -> EnvelopeConfig:
    """
    Set the process-wide envelope prefix and, optionally, its attributes.

    A non-None ``attributes`` replaces the default attribute set entirely
    (no merge).  None leaves the current attribute set untouched.  The last
    call wins.  Call this before starting encodes; encoders created
    earlier keep the config they captured.

    Returns:
        The new default config.
    """
    global _default_config
    updated = replace(_default_config, prefix=prefix)
    if attributes is not None:
        updated = replace(updated, attributes=tuple(attributes.items()))
    _default_config = updated
    _logger.debug(
        "Envelope configured: prefix=%s, custom_attributes=%s",
        updated.prefix,
        updated.attributes is not None,
    )
    return updated


def reset_envelope_config() -> None:
    """Restore the built-in defaults."""
    global _default_config
    _default_config = EnvelopeConfig()


def envelope_config_from_env() -> EnvelopeConfig:
    """
    Build a config from environment variables, over the current default.

    ``SOAPENV_PREFIX`` sets the prefix; ``SOAPENV_STRICT`` enables strict
    value checking.  Invalid values are logged and ignored.
    """
    config = get_envelope_config()

    prefix = os.environ.get(ENV_PREFIX, "").strip()
    if prefix:
        try:
            config = replace(config, prefix=prefix)
        except ConfigError as e:
            _logger.warning("Invalid %s value %r, using default: %s", ENV_PREFIX, prefix, e)

    strict_str = os.environ.get(ENV_STRICT, "").strip().lower()
    if strict_str in _TRUE_VALUES:
        config = replace(config, strict=True)
    elif strict_str not in _FALSE_VALUES:
        _logger.warning("Invalid %s value %r, using default", ENV_STRICT, strict_str)

    return config
