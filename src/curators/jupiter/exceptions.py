"""Errors raised by the Jupiter client."""

from typing import Any


class JupiterError(RuntimeError):
    """Base class for Jupiter API failures."""


class JupiterAPIError(JupiterError):
    """Raised when the Jupiter API answers with a non-2xx status."""

    def __init__(self, endpoint: str, status_code: int, body: Any = None):
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        super().__init__(f"Jupiter {endpoint} failed with HTTP {status_code}: {body}")


class JupiterResponseError(JupiterError):
    """Raised when a successful response is missing a required field."""

    def __init__(self, endpoint: str, field: str):
        self.endpoint = endpoint
        self.field = field
        super().__init__(f"Jupiter {endpoint} response is missing '{field}'")
