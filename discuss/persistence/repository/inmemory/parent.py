"""In-memory parent entity port for testing."""

from typing import Optional

from discuss.domain.repository.parent import ParentEntityPort
from discuss.domain.value import ParentId, ParentKind


class InMemoryParentEntityPort(ParentEntityPort):
    """In-memory store of one kind of parent entity and its comment counters."""

    def __init__(self, kind: ParentKind) -> None:
        self.kind = kind
        self._counts: dict[ParentId, int] = {}

    def add(self, parent_id: ParentId, comment_count: int = 0) -> None:
        """Register a parent entity."""
        self._counts[parent_id] = comment_count

    async def exists(self, parent_id: ParentId) -> bool:
        """Check whether a parent entity exists."""
        return parent_id in self._counts

    async def increment_comment_count(self, parent_id: ParentId) -> None:
        """Add one to the entity's comment counter."""
        if parent_id in self._counts:
            self._counts[parent_id] += 1

    async def decrement_comment_count(self, parent_id: ParentId) -> None:
        """Subtract one from the entity's comment counter (minimum 0)."""
        if self._counts.get(parent_id, 0) > 0:
            self._counts[parent_id] -= 1

    async def get_comment_count(self, parent_id: ParentId) -> Optional[int]:
        """Read the entity's stored comment counter."""
        return self._counts.get(parent_id)
