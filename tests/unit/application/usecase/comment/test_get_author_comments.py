"""Unit tests for GetAuthorCommentsUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetAuthorCommentsRequest,
    GetAuthorCommentsUseCase,
)
from discuss.domain.repository import ParentEntityPort
from discuss.domain.value import ParentId, ParentKind
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetAuthorCommentsUseCase:
    """Tests for GetAuthorCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_author_comments_across_threads(self, unit_env, parent_id):
        """Comments on posts and reviews are listed newest first."""
        # Arrange
        review_id = ParentId(uuid4())
        ports = await unit_env.get(dict[ParentKind, ParentEntityPort])
        ports[ParentKind.POST].add(parent_id)
        ports[ParentKind.REVIEW].add(review_id)
        create = await unit_env.get(CreateCommentUseCase)
        author = str(uuid4())
        targets = [
            (ParentKind.POST, parent_id),
            (ParentKind.REVIEW, review_id),
            (ParentKind.POST, parent_id),
        ]
        created = [
            await create.execute(
                CreateCommentRequest(
                    parent_kind=kind,
                    parent_id=str(pid),
                    author_id=author,
                    content=f"Comment {i}",
                )
            )
            for i, (kind, pid) in enumerate(targets)
        ]
        await create.execute(
            CreateCommentRequest(
                parent_kind=ParentKind.POST,
                parent_id=str(parent_id),
                author_id=str(uuid4()),
                content="Someone else",
            )
        )
        use_case = await unit_env.get(GetAuthorCommentsUseCase)

        # Act
        everything = await use_case.execute(GetAuthorCommentsRequest(author_id=author))
        reviews_only = await use_case.execute(
            GetAuthorCommentsRequest(author_id=author, parent_kind=ParentKind.REVIEW)
        )

        # Assert
        assert everything.total == 3
        assert {item.comment_id for item in everything.items} == {
            c.comment_id for c in created
        }
        assert reviews_only.total == 1
        assert reviews_only.items[0].comment_id == created[1].comment_id

    @pytest.mark.asyncio
    async def test_pages_author_comments(self, unit_env, parent_id):
        ports = await unit_env.get(dict[ParentKind, ParentEntityPort])
        ports[ParentKind.POST].add(parent_id)
        create = await unit_env.get(CreateCommentUseCase)
        author = str(uuid4())
        for i in range(5):
            await create.execute(
                CreateCommentRequest(
                    parent_kind=ParentKind.POST,
                    parent_id=str(parent_id),
                    author_id=author,
                    content=f"Comment {i}",
                )
            )
        use_case = await unit_env.get(GetAuthorCommentsUseCase)

        response = await use_case.execute(
            GetAuthorCommentsRequest(author_id=author, page=3, limit=2)
        )

        assert response.total == 5
        assert len(response.items) == 1
        assert response.pagination.pages == 3
