"""Parent entity port.

Posts and reviews are owned by their own modules. The discussion engine
only needs to know that one exists and to adjust its stored comment count.
"""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.value import ParentId, ParentKind


class ParentEntityPort(ABC):
    """Narrow contract onto the store of one kind of parent entity."""

    kind: ParentKind

    @abstractmethod
    async def exists(self, parent_id: ParentId) -> bool:
        """Check whether a parent entity exists.

        Args:
            parent_id: The parent entity's ID

        Returns:
            True if the entity exists
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, parent_id: ParentId) -> None:
        """Atomically add one to the entity's comment counter.

        Args:
            parent_id: The parent entity's ID
        """
        pass

    @abstractmethod
    async def decrement_comment_count(self, parent_id: ParentId) -> None:
        """Atomically subtract one from the entity's comment counter.

        Args:
            parent_id: The parent entity's ID
        """
        pass

    @abstractmethod
    async def get_comment_count(self, parent_id: ParentId) -> Optional[int]:
        """Read the entity's stored comment counter.

        Args:
            parent_id: The parent entity's ID

        Returns:
            The counter, or None if the entity does not exist
        """
        pass
