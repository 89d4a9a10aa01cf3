from __future__ import annotations


class SeatsIoClientError(Exception):
    """Base client error."""


class ConfigurationError(SeatsIoClientError):
    """Client is not set up for network calls (e.g. no secret key)."""


class NetworkError(SeatsIoClientError):
    """Transport/network layer error."""


class UnsuccessfulResponseError(SeatsIoClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(UnsuccessfulResponseError):
    """Secret key rejected by the API."""
