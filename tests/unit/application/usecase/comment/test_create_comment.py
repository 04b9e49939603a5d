"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import NotFoundError, ValidationError
from discuss.domain.repository import ParentEntityPort
from discuss.domain.value import ParentKind
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env, parent_id):
        """A root comment is returned with empty tallies."""
        # Arrange
        ports = await unit_env.get(dict[ParentKind, ParentEntityPort])
        ports[ParentKind.POST].add(parent_id)
        use_case = await unit_env.get(CreateCommentUseCase)
        author = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                parent_kind=ParentKind.POST,
                parent_id=str(parent_id),
                author_id=author,
                content="Interesting result",
            )
        )

        # Assert
        assert response.author_id == author
        assert response.parent_id == str(parent_id)
        assert response.parent_comment_id is None
        assert response.deleted is False
        assert (response.upvotes, response.downvotes) == (0, 0)
        assert response.viewer_vote is None

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env, parent_id):
        ports = await unit_env.get(dict[ParentKind, ParentEntityPort])
        ports[ParentKind.REVIEW].add(parent_id)
        use_case = await unit_env.get(CreateCommentUseCase)
        root = await use_case.execute(
            CreateCommentRequest(
                parent_kind=ParentKind.REVIEW,
                parent_id=str(parent_id),
                author_id=str(uuid4()),
                content="Root",
            )
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                parent_kind=ParentKind.REVIEW,
                parent_id=str(parent_id),
                author_id=str(uuid4()),
                content="Reply",
                parent_comment_id=root.comment_id,
            )
        )

        assert reply.parent_comment_id == root.comment_id
        assert reply.parent_kind == ParentKind.REVIEW

    @pytest.mark.asyncio
    async def test_unknown_parent_raises(self, unit_env, parent_id):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    parent_kind=ParentKind.POST,
                    parent_id=str(parent_id),
                    author_id=str(uuid4()),
                    content="Hello",
                )
            )

    @pytest.mark.asyncio
    async def test_blank_content_raises(self, unit_env, parent_id):
        ports = await unit_env.get(dict[ParentKind, ParentEntityPort])
        ports[ParentKind.POST].add(parent_id)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    parent_kind=ParentKind.POST,
                    parent_id=str(parent_id),
                    author_id=str(uuid4()),
                    content="  \n ",
                )
            )
