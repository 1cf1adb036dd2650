from typing import Optional


class GeolocateError(Exception):
    pass


class TransportError(GeolocateError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[bytes] = None):
        super().__init__(message)
        self.status_code: Optional[int] = status_code
        self.body: Optional[bytes] = body


class DecodeError(GeolocateError):
    pass


class ZeroResultsError(GeolocateError):
    """The provider answered but matched nothing."""

    def __init__(self, status: Optional[str] = None, error_message: Optional[str] = None):
        self.status: Optional[str] = status
        self.error_message: Optional[str] = error_message
        message = "ZERO_RESULTS"
        if status and status != "ZERO_RESULTS":
            message = f"{message} (status {status})"
        if error_message:
            message = f"{message}: {error_message}"
        super().__init__(message)


class ProviderDomainError(GeolocateError):
    def __init__(self, domain: str, reason: str, message: str, code: int = 0):
        super().__init__(f"{domain}.{reason}.{message}")
        self.domain: str = domain
        self.reason: str = reason
        self.message: str = message
        self.code: int = code


class MissingAPIKeyError(GeolocateError):
    def __init__(self, message: str = "Google API key not provided"):
        super().__init__(message)
