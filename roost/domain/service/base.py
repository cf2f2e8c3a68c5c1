"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services wrap repositories with the comment thread rules. Each public
    method opens a ``logfire`` span named ``<service>.<method>``. Services
    that only decorate a response (reactions, metrics, notifications) log
    store failures and fall back to empty results instead of raising.
    """
