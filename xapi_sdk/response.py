"""
Interpretation of XAPI responses.

Each function checks the status against the success code of its operation,
decodes the JSON body and applies the operation's unwrapping policy. All
failures are logged (when a logger is given) before being raised.
"""

import logging
from typing import Any, List, Optional

import requests

from .constants import HTTP_OK, HTTP_CREATED
from .exceptions import ClientError, ResourceNotFoundError


def _log_error(logger: Optional[logging.Logger], message: str, error: Exception):
    if logger is not None:
        logger.error(message, exc_info=error)


def _decode(response: requests.Response, resource_name: str, operation: str,
            logger: Optional[logging.Logger]) -> Any:
    """Decode the JSON body; an empty body decodes to None."""
    if not response.content:
        return None

    try:
        return response.json()
    except ValueError:
        e = ClientError(
            f"Invalid JSON in response for resource [{resource_name}], xapi response [{response.text}]",
            resource_name=resource_name,
            operation=operation,
            status_code=response.status_code,
            raw_body=response.text,
        )
        _log_error(logger, 'Cannot decode response', e)
        raise e


def _check_status(response: requests.Response, expected: int, message: str,
                  resource_name: str, operation: str,
                  logger: Optional[logging.Logger], log_message: str):
    if response.status_code == expected:
        return

    e = ClientError(
        f"{message}, xapi response [{response.text}]",
        resource_name=resource_name,
        operation=operation,
        status_code=response.status_code,
        raw_body=response.text,
    )
    _log_error(logger, log_message, e)
    raise e


def interpret_get(response: requests.Response, resource_name: str, resource_id,
                  logger: Optional[logging.Logger] = None) -> Any:
    """
    Interpret the response of a GET by id.

    Returns:
        The first element when the body is a collection, the body itself
        otherwise

    Raises:
        ClientError: If status is not 200 or the body is not JSON
        ResourceNotFoundError: If the body is an empty collection
    """
    _check_status(
        response, HTTP_OK,
        f"Cannot get resource [{resource_name}] with id [{resource_id}]",
        resource_name, 'get', logger, 'Error trying to get resource',
    )

    body = _decode(response, resource_name, 'get', logger)

    if body is None or body == []:
        e = ResourceNotFoundError(
            f"Resource [{resource_name}] with id [{resource_id}] not found!",
            resource_name=resource_name,
            resource_id=resource_id,
            status_code=response.status_code,
            raw_body=response.text,
        )
        _log_error(logger, 'Cannot find resource', e)
        raise e

    if isinstance(body, list):
        return body[0]

    return body


def interpret_add(response: requests.Response, resource_name: str,
                  logger: Optional[logging.Logger] = None) -> Any:
    """
    Interpret the response of a POST.

    Returns:
        The decoded body, as-is

    Raises:
        ClientError: If status is not 201 or the body is empty or not JSON
    """
    _check_status(
        response, HTTP_CREATED,
        f"Cannot add resource [{resource_name}]",
        resource_name, 'add', logger, 'Error trying to add resource',
    )

    body = _decode(response, resource_name, 'add', logger)

    if body is None:
        e = ClientError(
            f"Empty response adding resource [{resource_name}]",
            resource_name=resource_name,
            operation='add',
            status_code=response.status_code,
            raw_body=response.text,
        )
        _log_error(logger, 'Error trying to add resource', e)
        raise e

    return body


def interpret_list(response: requests.Response, resource_name: str,
                   logger: Optional[logging.Logger] = None) -> List[Any]:
    """
    Interpret the response of a GET list.

    Returns:
        The elements of the body in server order; an empty list is valid

    Raises:
        ClientError: If status is not 200 or the body is not JSON
    """
    _check_status(
        response, HTTP_OK,
        f"Cannot list resource [{resource_name}]",
        resource_name, 'list', logger, 'Error trying to list resource',
    )

    body = _decode(response, resource_name, 'list', logger)

    if body is None:
        return []

    if isinstance(body, list):
        return body

    # a single object is a one-element collection
    return [body]
