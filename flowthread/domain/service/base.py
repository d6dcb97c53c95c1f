"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the comment engine's logic: they orchestrate
    repository round-trips and never touch storage details directly.
    """

    pass
