class ResolverError(Exception):
    """Base error carrying the HTTP status and the message shown to clients."""

    status_code = 500
    message = "Failed to resolve URL"

    def __init__(self, detail: str = None):
        super().__init__(detail or self.message)
        self.detail = detail


class MissingUrlError(ResolverError):
    status_code = 400
    message = "Missing url parameter"


class CoordinatesNotFoundError(ResolverError):
    status_code = 404
    message = "Coordinates not found"


class UpstreamFetchError(ResolverError):
    """Content fetch failed (DNS, connection, timeout, redirects, non-2xx)."""

    status_code = 500
    message = "Failed to resolve URL"
