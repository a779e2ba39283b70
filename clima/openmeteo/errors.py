"""
Error taxonomy shared by the Open-Meteo client and the recent-location store.
"""

from __future__ import annotations


class ClimaError(Exception):
    """Base class for every error the application knows how to display."""


class NetworkError(ClimaError):
    """The request never produced a response (DNS, refused connection, reset...)."""


class UnexpectedStatus(ClimaError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"unexpected status code: {status_code}")


class DecodeError(ClimaError):
    """The response body did not have the expected shape."""


class StorageError(ClimaError):
    """Reading or writing a local file failed."""


__all__ = ["ClimaError", "NetworkError", "UnexpectedStatus", "DecodeError", "StorageError"]
