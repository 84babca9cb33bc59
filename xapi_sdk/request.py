"""
URI and signed request construction for XAPI resources.

Building a request never touches the network: RequestBuilder returns a
requests.PreparedRequest that the caller sends through its own session.
"""

import datetime
from typing import Callable, Dict, Mapping, Optional, Union

import requests

from .configuration import XAPISdkConfiguration
from .constants import (
    HEADER_APIKEY,
    HEADER_TIMESTAMP,
    HEADER_SIGNATURE,
    PARAM_QUERY_NAME,
    PARAM_QUERY_FIELD_SEP,
    PARAM_QUERY_FILTER_SEP,
    PATH_SEP,
    JSON_CONTENT_TYPE,
)
from .security import format_timestamp


class _NoId:
    """Marker for "no resource id supplied"."""

    def __repr__(self):
        return "NO_ID"


NO_ID = _NoId()


def build_resource_path(resource_name: str, resource_id=NO_ID) -> str:
    """
    Build the resource path used both in the URI and for signing.

    Any supplied id is appended as-is, so an empty or None id yields
    "resource_name/".
    """
    if resource_id is NO_ID:
        return resource_name

    if resource_id is None:
        resource_id = ""

    return f"{resource_name}{PATH_SEP}{resource_id}"


def build_query(filter_set: Mapping) -> str:
    """
    Serialize a filter set as the q query parameter.

    Pairs are emitted in iteration order; keys and values are not escaped.
    When the request is prepared, requests percent-encodes characters that
    are not legal in a URL, so "|" goes on the wire as "%7C"
    (q=status%7Copen,year%7C2024).
    """
    pairs = PARAM_QUERY_FILTER_SEP.join(
        f"{key}{PARAM_QUERY_FIELD_SEP}{value}" for key, value in filter_set.items()
    )
    return f"{PARAM_QUERY_NAME}={pairs}"


def build_uri(base_uri: str, resource_path: str, filter_set: Optional[Mapping] = None) -> str:
    """Join base URI and resource path with one separator, adding the filter query if any."""
    glue = "" if base_uri.endswith(PATH_SEP) else PATH_SEP

    uri = f"{base_uri}{glue}{resource_path}"

    if filter_set:
        uri = f"{uri}?{build_query(filter_set)}"

    return uri


class RequestBuilder:
    """
    Builds signed GET/POST requests for a configuration.

    Args:
        configuration: SDK configuration providing URI, keys and signer
        clock: Optional callable returning the current datetime, used for
            the X_TIMESTAMP header
    """

    def __init__(self, configuration: XAPISdkConfiguration,
                 clock: Optional[Callable[[], datetime.datetime]] = None):
        self.configuration = configuration
        self.clock = clock

    def _timestamp(self) -> str:
        moment = self.clock() if self.clock is not None else None
        return format_timestamp(moment, utc=self.configuration.utc_timestamps)

    def authentication_headers(self, resource_path: str) -> Dict[str, str]:
        """
        Build the three authentication headers for a resource path.

        The timestamp is taken once so the signed value and the sent value
        are identical.
        """
        conf = self.configuration
        timestamp = self._timestamp()

        signature = conf.signer(resource_path, conf.public_key, conf.private_key, timestamp)

        return {
            HEADER_APIKEY: conf.public_key,
            HEADER_TIMESTAMP: timestamp,
            HEADER_SIGNATURE: signature,
        }

    def build_get(self, resource_name: str, resource_id=NO_ID,
                  filter_set: Optional[Mapping] = None) -> requests.PreparedRequest:
        """
        Build a signed GET request expecting a JSON response.

        Headers are signed over the resource path only, never the query.
        """
        resource_path = build_resource_path(resource_name, resource_id)
        uri = build_uri(self.configuration.xapi_uri, resource_path, filter_set)

        headers = self.authentication_headers(resource_path)
        headers['Accept'] = JSON_CONTENT_TYPE

        return requests.Request('GET', uri, headers=headers).prepare()

    def build_post(self, resource_name: str,
                   json_body: Union[str, bytes]) -> requests.PreparedRequest:
        """Build a signed POST request sending json_body as JSON."""
        resource_path = build_resource_path(resource_name)
        uri = build_uri(self.configuration.xapi_uri, resource_path)

        headers = self.authentication_headers(resource_path)
        headers['Content-Type'] = JSON_CONTENT_TYPE
        headers['Accept'] = JSON_CONTENT_TYPE

        if isinstance(json_body, str):
            json_body = json_body.encode('utf-8')

        return requests.Request('POST', uri, headers=headers, data=json_body).prepare()
