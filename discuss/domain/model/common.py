"""Base for discussion entities and read models."""

from discuss.domain.value.common import ValueObject


class DomainModel(ValueObject):
    """Entities are frozen like values; their identity is the ``id`` field
    (the voter and comment pair for votes)."""
