"""Entity types."""


class EntityCategory:
    """
    High-level logical grouping for entities.
    Used for collection bookkeeping, logging and render layering.
    """
    TENANT = "tenant"
    ENVELOPE = "envelope"
    LETTER = "letter"
