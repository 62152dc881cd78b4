"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services orchestrate graph writes and media writes that no
    single repository call can express.
    """

    pass
