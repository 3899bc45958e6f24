"""Exceptions raised while talking to the Hunter.io API."""

from typing import Optional


class HunterExportError(Exception):
    """Base class for every fatal error of an export run."""


class CredentialMissingError(HunterExportError):
    pass


class TransportError(HunterExportError):
    """The HTTP request itself failed (DNS, connection, timeout)."""

    def __init__(self, message: str, domain: Optional[str] = None):
        super().__init__(message)
        self.domain = domain


class SchemaError(HunterExportError):
    """The response body is not JSON or does not decode into the expected shape."""

    def __init__(
        self,
        message: str,
        domain: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.domain = domain
        self.status_code = status_code
