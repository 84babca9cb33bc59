"""
Shared fixtures for XAPI SDK tests.
"""

import datetime
import json

import pytest
import requests

from xapi_sdk import XAPISdkConfiguration


BASE_URI = "http://api.test"
PUBLIC_KEY = "test"
PRIVATE_KEY = "unitTests"
FIXED_MOMENT = datetime.datetime(2024, 1, 2, 3, 4, 5)
FIXED_TIMESTAMP = "20240102030405"


def make_response(status_code, body=None, raw=None):
    """Build a requests.Response with a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = 'utf-8'

    if raw is not None:
        response._content = raw.encode('utf-8')
    elif body is not None:
        response._content = json.dumps(body).encode('utf-8')
    else:
        response._content = b""

    return response


@pytest.fixture
def configuration():
    """Create test configuration."""
    return XAPISdkConfiguration(BASE_URI, PUBLIC_KEY, PRIVATE_KEY)
