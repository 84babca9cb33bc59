"""
Resource clients for the XAPI server.

An XAPIClient binds a ResourceDescriptor to the generic get/add/list
operations: it builds the signed request, sends it through a
requests.Session, interprets the response and maps the JSON payload onto
business objects carrying a back-reference to the client.

Business objects only hold a weak reference to their client, so keep the
client alive while you use them for follow-up calls:

    contatti = ClientFactory(conf).client_for(Contatto)
    contatto = contatti.get("42")
    natura = contatto.get_natura_giuridica()
"""

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Type

import requests
from pydantic import ValidationError

from .business_objects import (
    BusinessObject,
    CausaleContabile,
    Contatto,
    NaturaGiuridica,
    ResourceDescriptor,
)
from .configuration import XAPISdkConfiguration
from .exceptions import ClientError, ConfigurationError
from .request import RequestBuilder
from .response import interpret_add, interpret_get, interpret_list


def _log_error(logger: Optional[logging.Logger], message: str, error: Exception):
    if logger is not None:
        logger.error(message, exc_info=error)


class XAPIClient:
    """
    Client for one XAPI resource.

    Subclasses bind their resource through the DESCRIPTOR class attribute;
    the generic client takes the descriptor as an argument.
    """

    DESCRIPTOR: Optional[ResourceDescriptor] = None

    def __init__(self, configuration: XAPISdkConfiguration,
                 descriptor: Optional[ResourceDescriptor] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize resource client.

        Args:
            configuration: Shared, read-only SDK configuration
            descriptor: Resource descriptor, defaults to the class DESCRIPTOR
            session: HTTP session to send requests with; when omitted the
                client creates one and closes it on close()
        """
        self.configuration = configuration
        self.descriptor = descriptor or self.DESCRIPTOR

        if self.descriptor is None:
            e = ConfigurationError(f"{type(self).__name__} has no resource descriptor")
            _log_error(configuration.logger, 'Cannot create client', e)
            raise e

        self.request_builder = RequestBuilder(configuration)

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

        self._siblings: Dict[type, "XAPIClient"] = {}
        self._siblings_lock = threading.Lock()

    @property
    def resource_name(self) -> str:
        return self.descriptor.resource_name

    def _log_debug(self, message: str):
        logger = self.configuration.logger
        if logger is not None:
            logger.debug(message)

    def _log_error(self, message: str, error: Exception):
        _log_error(self.configuration.logger, message, error)

    def _send(self, request: requests.PreparedRequest) -> requests.Response:
        try:
            response = self.session.send(request, timeout=self.configuration.timeout)
        except requests.RequestException as e:
            self._log_error(f"Cannot send request to [{request.url}]", e)
            raise

        self._log_debug(f"Request sent, response [{response.text}]")
        return response

    def _map(self, json_obj: Any, response: requests.Response, operation: str) -> BusinessObject:
        """Deserialize one JSON object, reporting payloads that do not fit as ClientError."""
        error = None

        if not isinstance(json_obj, dict):
            error = f"expected a JSON object, got [{json_obj!r}]"
        else:
            try:
                return self.descriptor.deserializer(json_obj, self)
            except ValidationError as ve:
                error = str(ve)

        e = ClientError(
            f"Cannot map resource [{self.resource_name}]: {error}, xapi response [{response.text}]",
            resource_name=self.resource_name,
            operation=operation,
            status_code=response.status_code,
            raw_body=response.text,
        )
        self._log_error('Cannot map resource', e)
        raise e

    def _fetch(self, resource_id):
        self._log_debug(f"Called get on resource [{self.resource_name}]")

        request = self.request_builder.build_get(self.resource_name, resource_id)

        self._log_debug('Request created')

        response = self._send(request)

        return interpret_get(response, self.resource_name, resource_id, self.configuration.logger), response

    def _fetch_list(self, filter_set: Optional[Mapping]):
        self._log_debug(f"Called listAll on resource [{self.resource_name}]")

        request = self.request_builder.build_get(self.resource_name, filter_set=filter_set)

        self._log_debug('Request created')

        response = self._send(request)

        return interpret_list(response, self.resource_name, self.configuration.logger), response

    def get(self, resource_id) -> BusinessObject:
        """Fetch one business object by id."""
        json_obj, response = self._fetch(resource_id)
        return self._map(json_obj, response, 'get')

    def get_as_raw(self, resource_id) -> Any:
        """Fetch one resource by id as decoded JSON, without business-object mapping."""
        json_obj, _ = self._fetch(resource_id)
        return json_obj

    def add(self, obj: BusinessObject) -> BusinessObject:
        """Create obj on the server and return the created business object."""
        self._log_debug(f"Called add on resource [{self.resource_name}]")

        request = self.request_builder.build_post(self.resource_name, obj.to_json())

        self._log_debug('Request created')

        response = self._send(request)

        json_obj = interpret_add(response, self.resource_name, self.configuration.logger)
        return self._map(json_obj, response, 'add')

    def list_all(self, filter_set: Optional[Mapping] = None) -> List[BusinessObject]:
        """
        List the resource's business objects, in server order.

        Args:
            filter_set: Optional field -> value filters, sent as q=field|value,...
        """
        json_objs, response = self._fetch_list(filter_set)
        return [self._map(json_obj, response, 'list') for json_obj in json_objs]

    def list_all_as_raw(self, filter_set: Optional[Mapping] = None) -> List[Any]:
        """List the resource as decoded JSON objects."""
        json_objs, _ = self._fetch_list(filter_set)
        return json_objs

    def count(self, filter_set: Optional[Mapping] = None) -> int:
        """Number of objects list_all returns for filter_set."""
        return len(self.list_all_as_raw(filter_set))

    def update(self, obj: BusinessObject):
        e = NotImplementedError(f"update is not supported on resource [{self.resource_name}]")
        self._log_error('Update is not supported', e)
        raise e

    def delete(self, resource_id):
        e = NotImplementedError(f"delete is not supported on resource [{self.resource_name}]")
        self._log_error('Delete is not supported', e)
        raise e

    def client_for(self, business_object_type: Type[BusinessObject]) -> "XAPIClient":
        """
        Client for a related resource, sharing configuration and session.

        The sibling lives as long as this client, so objects it returns keep
        a valid back-reference.
        """
        with self._siblings_lock:
            if business_object_type not in self._siblings:
                client_class = ClientFactory.client_class_for(
                    business_object_type, self.configuration.logger
                )
                self._siblings[business_object_type] = client_class(
                    self.configuration, session=self.session
                )
            return self._siblings[business_object_type]

    def close(self):
        """Close HTTP session if this client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class ContattiClient(XAPIClient):
    DESCRIPTOR = Contatto.descriptor()


class NatureGiuridicheClient(XAPIClient):
    DESCRIPTOR = NaturaGiuridica.descriptor()


class CausaliContabiliClient(XAPIClient):
    DESCRIPTOR = CausaleContabile.descriptor()


CLIENT_REGISTRY: Dict[Type[BusinessObject], Type[XAPIClient]] = {
    Contatto: ContattiClient,
    NaturaGiuridica: NatureGiuridicheClient,
    CausaleContabile: CausaliContabiliClient,
}


class ClientFactory:
    """
    Creates resource clients for business-object types from one configuration.

    Each call to client_for() returns a new client. Business objects keep
    only a weak reference to it, so hold on to the returned client (or use
    it as a context manager) for as long as its objects make follow-up
    calls; a chained ``factory.client_for(Contatto).get("42")`` returns an
    object whose client is already gone. Clients created without a shared
    session own one and close it on close().
    """

    def __init__(self, configuration: XAPISdkConfiguration,
                 session: Optional[requests.Session] = None):
        self.configuration = configuration
        self.session = session

    @staticmethod
    def client_class_for(business_object_type: Type[BusinessObject],
                         logger: Optional[logging.Logger] = None) -> Type[XAPIClient]:
        try:
            return CLIENT_REGISTRY[business_object_type]
        except KeyError:
            name = getattr(business_object_type, '__name__', business_object_type)
            e = ConfigurationError(f"No client registered for business object [{name}]")
            _log_error(logger, 'Cannot resolve client', e)
            raise e

    def client_for(self, business_object_type: Type[BusinessObject]) -> XAPIClient:
        """Create the client bound to business_object_type."""
        client_class = self.client_class_for(business_object_type, self.configuration.logger)
        return client_class(self.configuration, session=self.session)
