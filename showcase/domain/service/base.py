"""Base class for Showcase domain services."""


class Service:
    """Marker base for domain services.

    Services hold the gallery, voting, comment and upload rules that span
    several entities, and are stateless apart from the repositories and
    clients injected into them.
    """
