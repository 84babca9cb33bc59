"""
Business objects exposed by the XAPI server.

Business objects are pydantic models whose field aliases are the JSON keys
of their resource. Deserialization only sets the fields whose key is
present in the payload; every other field keeps its default (None).
"""

import weakref
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .exceptions import XAPIError


@dataclass(frozen=True)
class ResourceDescriptor:
    """
    Static binding of a resource name to its business-object deserializer.

    Attributes:
        resource_name: URI path segment and filter namespace of the resource
        deserializer: Callable(json_obj, client) returning a business object
    """

    resource_name: str
    deserializer: Callable[[Any, Any], "BusinessObject"]


class BusinessObject(BaseModel):
    """Base class for XAPI business objects."""

    model_config = ConfigDict(populate_by_name=True)

    RESOURCE_NAME: ClassVar[str] = ""

    # weakref.ref to the producing client
    _client_ref: Optional[Any] = PrivateAttr(default=None)

    @classmethod
    def descriptor(cls) -> ResourceDescriptor:
        return ResourceDescriptor(cls.RESOURCE_NAME, cls.from_json)

    @classmethod
    def from_json(cls, json_obj: Dict[str, Any], client=None) -> "BusinessObject":
        """
        Build an object from a decoded JSON payload.

        Args:
            json_obj: Decoded JSON object
            client: Client that produced the payload, kept as a weak reference

        Returns:
            New business object

        Raises:
            pydantic.ValidationError: If the payload does not fit the fields
        """
        obj = cls.model_validate(json_obj)
        obj.bind(client)
        return obj

    def update_from_json(self, json_obj: Dict[str, Any]):
        """Set the fields whose JSON key is present in json_obj."""
        update = type(self).model_validate(json_obj)
        for name in update.model_fields_set:
            setattr(self, name, getattr(update, name))

    def bind(self, client):
        """Attach a non-owning reference to the client that produced this object."""
        self._client_ref = weakref.ref(client) if client is not None else None

    @property
    def client(self):
        """The producing client, or None if unbound or already collected."""
        if self._client_ref is None:
            return None
        return self._client_ref()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def __eq__(self, other):
        # the back-reference is not part of the value
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()


class NaturaGiuridica(BusinessObject):
    """Legal-entity type (e.g. S.r.l., S.p.A.)."""

    RESOURCE_NAME: ClassVar[str] = "natureGiuridiche"

    nome: Optional[str] = None
    descrizione: Optional[str] = None


class CausaleContabile(BusinessObject):
    """Accounting category."""

    RESOURCE_NAME: ClassVar[str] = "causaliContabili"

    codice: Optional[str] = None
    descrizione: Optional[str] = None


class Contatto(BusinessObject):
    """
    Contact (customer or supplier).

    natura_giuridica_id holds the id of the related NaturaGiuridica, which
    get_natura_giuridica() resolves through the producing client.
    """

    RESOURCE_NAME: ClassVar[str] = "contatti"

    id: Optional[Union[int, str]] = None
    codice: Optional[str] = None
    ragione_sociale: Optional[str] = Field(None, alias="ragioneSociale")
    partita_iva: Optional[str] = Field(None, alias="partitaIva")
    codice_fiscale: Optional[str] = Field(None, alias="codiceFiscale")
    email: Optional[str] = None
    telefono: Optional[str] = None
    natura_giuridica_id: Optional[Union[int, str]] = Field(None, alias="naturaGiuridica")

    def get_natura_giuridica(self) -> Optional[NaturaGiuridica]:
        """
        Fetch the related NaturaGiuridica.

        Returns:
            The related object, or None if the contact has none

        Raises:
            XAPIError: If the contact is no longer bound to a client
        """
        if self.natura_giuridica_id is None:
            return None

        client = self.client
        if client is None:
            # no client means no configuration, hence no logger to report to
            raise XAPIError("Contatto is not bound to a client, cannot resolve naturaGiuridica")

        return client.client_for(NaturaGiuridica).get(self.natura_giuridica_id)
