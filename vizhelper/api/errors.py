# vizhelper/api/errors.py

class APIError(Exception):
    """Base for every failure the API client reports."""

class MalformedRequest(APIError):
    """URL could not be built; raised before any network I/O."""

class TransportFailure(APIError):
    """No usable HTTP response was obtained."""

class HTTPStatusFailure(TransportFailure):
    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"HTTP {status_code} from {url}" if url else f"HTTP {status_code}")
        self.status_code = status_code
        self.url = url

class DecodeFailure(APIError):
    """Success status, but the body does not match the expected shape."""

__all__ = ["APIError", "MalformedRequest", "TransportFailure", "HTTPStatusFailure", "DecodeFailure"]
