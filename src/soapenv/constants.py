"""
Package-wide constants for soapenv.

Namespace URIs, the default envelope prefix, and environment variable
names are centralized here.
"""

from __future__ import annotations

import importlib.metadata

try:
    __version__ = importlib.metadata.version("soapenv")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "DEFAULT_SOAP_PREFIX",
    "ENV_PREFIX",
    "ENV_STRICT",
    "NS_SOAP_ENVELOPE",
    "NS_XSD",
    "NS_XSI",
    "__version__",
]

# ── Envelope ─────────────────────────────────────────────────────────

# Tag prefix used for Envelope/Header/Body unless reconfigured
DEFAULT_SOAP_PREFIX = "soap"

NS_XSI = "http://www.w3.org/2001/XMLSchema-instance"
NS_XSD = "http://www.w3.org/2001/XMLSchema"
NS_SOAP_ENVELOPE = "http://schemas.xmlsoap.org/soap/envelope/"


# ── Environment variable names ──────────────────────────────────────

ENV_PREFIX = "SOAPENV_PREFIX"
ENV_STRICT = "SOAPENV_STRICT"
