"""
Custom exceptions for the XAPI SDK.
"""

from typing import Optional

import requests


class XAPIError(Exception):
    """Base exception for XAPI SDK errors."""
    pass


class ConfigurationError(XAPIError):
    """Raised when the SDK configuration is invalid."""
    pass


class ClientError(XAPIError):
    """
    Raised when the XAPI server answers with an unexpected status or payload.

    Attributes:
        resource_name: Resource the call was made against
        operation: Attempted operation (get, add, list)
        status_code: HTTP status code of the response, if any
        raw_body: Raw response body, kept for diagnostics
    """

    def __init__(
        self,
        message: str,
        resource_name: Optional[str] = None,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        raw_body: Optional[str] = None,
    ):
        super().__init__(message)
        self.resource_name = resource_name
        self.operation = operation
        self.status_code = status_code
        self.raw_body = raw_body


class ResourceNotFoundError(ClientError):
    """Raised when a successful GET returns an empty collection."""

    def __init__(
        self,
        message: str,
        resource_name: Optional[str] = None,
        resource_id=None,
        status_code: Optional[int] = None,
        raw_body: Optional[str] = None,
    ):
        super().__init__(message, resource_name, "get", status_code, raw_body)
        self.resource_id = resource_id


# Network, TLS and timeout failures are raised by requests and never wrapped.
TransportError = requests.RequestException
