"""
XAPI SDK

A Python client library for the XAPI business-object API. Every request
is signed with the X_APIKEY / X_TIMESTAMP / X_SIGNATURE header scheme.

Example usage:
    from xapi_sdk import XAPISdkConfiguration, ClientFactory, Contatto

    conf = XAPISdkConfiguration("http://api.mosaicox.net", "public-key", "private-key")
    contatti = ClientFactory(conf).client_for(Contatto)
    contatto = contatti.get("42")
    natura = contatto.get_natura_giuridica()

Business objects hold their client weakly: keep ``contatti`` referenced
while ``contatto`` makes follow-up calls.
"""

from .client import (
    XAPIClient,
    ContattiClient,
    NatureGiuridicheClient,
    CausaliContabiliClient,
    ClientFactory,
    CLIENT_REGISTRY,
)
from .business_objects import (
    BusinessObject,
    ResourceDescriptor,
    Contatto,
    NaturaGiuridica,
    CausaleContabile,
)
from .configuration import XAPISdkConfiguration
from .exceptions import (
    XAPIError,
    ClientError,
    ResourceNotFoundError,
    ConfigurationError,
    TransportError
)
from .request import (
    NO_ID,
    RequestBuilder,
    build_resource_path,
    build_query,
    build_uri
)
from .response import interpret_get, interpret_add, interpret_list
from .security import sign, verify, format_timestamp
from .constants import (
    HEADER_APIKEY,
    HEADER_TIMESTAMP,
    HEADER_SIGNATURE,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "XAPIClient",
    "ContattiClient",
    "NatureGiuridicheClient",
    "CausaliContabiliClient",
    "ClientFactory",
    "CLIENT_REGISTRY",
    "BusinessObject",
    "ResourceDescriptor",
    "Contatto",
    "NaturaGiuridica",
    "CausaleContabile",
    "XAPISdkConfiguration",
    "XAPIError",
    "ClientError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "TransportError",
    "NO_ID",
    "RequestBuilder",
    "build_resource_path",
    "build_query",
    "build_uri",
    "interpret_get",
    "interpret_add",
    "interpret_list",
    "sign",
    "verify",
    "format_timestamp",
    "HEADER_APIKEY",
    "HEADER_TIMESTAMP",
    "HEADER_SIGNATURE",
    "DEFAULT_CONFIG"
]
