"""Custom exceptions for connpane."""


class ConnpaneError(Exception):
    """Base class for connpane errors."""


class ConnectionPayloadError(ConnpaneError, ValueError):
    """Exception raised when a serialized connection cannot be decoded."""

    def __init__(self, reason: str, payload: object = None):
        self.reason = reason
        self.payload = payload
        super().__init__(f"Invalid connection payload: {reason}")

