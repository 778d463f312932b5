"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services hold rules that span entities or need a repository.
    """

    pass
