"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class ProviderFailure(ServiceError):
    """Raised when the search provider fails, is misconfigured or returns garbage."""
