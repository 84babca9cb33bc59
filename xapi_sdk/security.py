"""
Request signature derivation for the XAPI signed-header scheme.

Every request carries the public key, a YYYYMMDDHHMMSS timestamp and a
signature computed over the resource path, the public key and that same
timestamp. The default strategy is HMAC-SHA256 keyed with the private key;
any callable with the signature of sign() can replace it through
XAPISdkConfiguration.signer.
"""

import datetime
import hashlib
import hmac
from typing import Optional

from .constants import TIMESTAMP_FORMAT


def sign(resource_path: str, public_key: str, private_key: str, timestamp: str) -> str:
    """
    Calculate the signature for a request.

    Format: HMAC-SHA256(private_key, resource_path + public_key + timestamp)

    Args:
        resource_path: Resource path without base URI and query string
        public_key: XAPI public key, also sent as X_APIKEY
        private_key: XAPI private key, never sent
        timestamp: Timestamp string exactly as sent in X_TIMESTAMP

    Returns:
        Hex-encoded signature
    """
    message = f"{resource_path}{public_key}{timestamp}"

    mac = hmac.new(
        private_key.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


def verify(signature: str, resource_path: str, public_key: str,
           private_key: str, timestamp: str) -> bool:
    """
    Verify a signature produced by sign().

    Returns:
        True if signature matches the given inputs
    """
    expected_signature = sign(resource_path, public_key, private_key, timestamp)

    # Use constant-time comparison to prevent timing attacks
    return hmac.compare_digest(expected_signature, signature)


def format_timestamp(moment: Optional[datetime.datetime] = None, utc: bool = False) -> str:
    """
    Format a moment as an X_TIMESTAMP value.

    Args:
        moment: Moment to format, defaults to now
        utc: Use UTC instead of local time when moment is not given

    Returns:
        Timestamp formatted as YYYYMMDDHHMMSS
    """
    if moment is None:
        if utc:
            moment = datetime.datetime.now(datetime.timezone.utc)
        else:
            moment = datetime.datetime.now()

    return moment.strftime(TIMESTAMP_FORMAT)
