"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span repositories, such as
    vote toggling and answer acceptance.
    """

    pass
