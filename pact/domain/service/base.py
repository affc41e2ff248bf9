"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the invariants that span an entity and its
    repository, such as atomic status changes and guarded creation.
    """

    pass
