"""
Data model for one envelope encoding pass.

``Definitions`` is the slice of a parsed WSDL the encoder needs; the
rest of the types describe who is calling (``Client``), what is called
(``Request``), and the pair of them (``Process``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Client",
    "Definitions",
    "NamespaceParam",
    "Process",
    "Request",
    "WsdlTypes",
    "XsdSchema",
]


@dataclass(frozen=True)
class NamespaceParam:
    """Wrap ``value`` in one ``namespace:name`` element.

    Use it when a leaf or subtree must carry an explicit prefix different
    from the ambient one.
    """

    namespace: str
    name: str
    value: Any = None


@dataclass(frozen=True)
class XsdSchema:
    """An ``<xsd:schema>`` declaration."""

    target_namespace: str = ""


@dataclass(frozen=True)
class WsdlTypes:
    """A WSDL ``<types>`` section."""

    schemas: tuple[XsdSchema, ...] = ()


@dataclass(frozen=True)
class Definitions:
    """Schema metadata from a WSDL document.

    Attributes:
        types: Declared ``<types>`` sections, or None when the WSDL
            declares none.
    """

    types: tuple[WsdlTypes, ...] | None = None

    @classmethod
    def for_namespace(cls, target_namespace: str) -> Definitions:
        """Build definitions declaring a single schema."""
        return cls(types=(WsdlTypes(schemas=(XsdSchema(target_namespace),)),))

    def target_namespace(self) -> str:
        """Target namespace of the first declared schema, or "" if none."""
        if not self.types:
            return ""
        schemas = self.types[0].schemas
        if not schemas:
            return ""
        return schemas[0].target_namespace


@dataclass
class Client:
    """Caller-side state shared by every request.

    Attributes:
        definitions: Schema metadata; encoding fails without it.
        header_params: Parameter tree for the SOAP header. Empty means
            no Header element is written.
        header_name: Optional element wrapping the header params.
    """

    definitions: Definitions | None
    header_params: Any = field(default_factory=dict)
    header_name: str = ""


@dataclass
class Request:
    """One operation call.

    Attributes:
        method: Operation name, written as the element inside Body.
        params: Body parameter tree.
        prefix_namespace: When set, the operation element is written as
            ``prefix_namespace:method`` instead of carrying ``xmlns``.
        namespace: Overrides the target namespace taken from the
            client's definitions.
    """

    method: str
    params: Any = None
    prefix_namespace: str = ""
    namespace: str = ""


@dataclass
class Process:
    """A client/request pair to be encoded as one envelope."""

    client: Client
    request: Request
