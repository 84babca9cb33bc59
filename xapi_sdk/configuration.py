"""
SDK configuration shared read-only by every XAPI client.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from .constants import DEFAULT_CONFIG, ENV_PREFIX
from .exceptions import ConfigurationError
from .security import sign


@dataclass(frozen=True)
class XAPISdkConfiguration:
    """
    Immutable XAPI connection settings.

    Attributes:
        xapi_uri: Base URI of the XAPI server
        public_key: XAPI public key (sent as X_APIKEY)
        private_key: XAPI private key (used for signing only)
        logger: Optional logger, no logging happens without one
        timeout: HTTP timeout in seconds
        utc_timestamps: Send X_TIMESTAMP in UTC instead of local time
        signer: Signature strategy, see security.sign
    """

    xapi_uri: str
    public_key: str
    private_key: str = field(repr=False)
    logger: Optional[logging.Logger] = None
    timeout: float = DEFAULT_CONFIG['timeout']
    utc_timestamps: bool = DEFAULT_CONFIG['utc_timestamps']
    signer: Callable[[str, str, str, str], str] = sign

    def __post_init__(self):
        self._validate()

    def _validate(self):
        """Validate configuration."""
        if not self.xapi_uri:
            raise ConfigurationError("xapi_uri cannot be empty")

        if not self.public_key:
            raise ConfigurationError("public_key cannot be empty")

        if not self.private_key:
            raise ConfigurationError("private_key cannot be empty")

        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        if not callable(self.signer):
            raise ConfigurationError("signer must be callable")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **overrides) -> "XAPISdkConfiguration":
        """
        Build a configuration from environment variables.

        Reads <prefix>URI, <prefix>PUBLIC_KEY, <prefix>PRIVATE_KEY and the
        optional <prefix>TIMEOUT. Keyword arguments override the environment.
        """
        values = {
            'xapi_uri': os.getenv(f"{prefix}URI", ""),
            'public_key': os.getenv(f"{prefix}PUBLIC_KEY", ""),
            'private_key': os.getenv(f"{prefix}PRIVATE_KEY", ""),
        }

        timeout = os.getenv(f"{prefix}TIMEOUT")
        if timeout:
            try:
                values['timeout'] = float(timeout)
            except ValueError:
                raise ConfigurationError(f"{prefix}TIMEOUT must be a number, got {timeout!r}")

        values.update(overrides)
        return cls(**values)
