"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold repositories, consult ``linkboard.domain.policy`` before
    any write and raise ``DomainError`` subclasses on refusal.
    """
