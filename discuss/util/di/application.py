"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetAuthorCommentsUseCase,
    GetThreadUseCase,
    UpdateCommentUseCase,
)
from discuss.application.usecase.vote import RemoveVoteUseCase, VoteCommentUseCase
from discuss.domain.service import (
    CommentLifecycleService,
    CommentService,
    PaginationPolicy,
    ThreadTreeBuilder,
    VoteAggregator,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        tree_builder: ThreadTreeBuilder,
        pagination_policy: PaginationPolicy,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service,
            vote_aggregator=vote_aggregator,
            tree_builder=tree_builder,
            pagination_policy=pagination_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, lifecycle_service: CommentLifecycleService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(lifecycle_service=lifecycle_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        lifecycle_service: CommentLifecycleService,
        vote_aggregator: VoteAggregator,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            lifecycle_service=lifecycle_service,
            vote_aggregator=vote_aggregator,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, lifecycle_service: CommentLifecycleService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(lifecycle_service=lifecycle_service)

    @provide(scope=Scope.REQUEST)
    def get_author_comments_use_case(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        pagination_policy: PaginationPolicy,
    ) -> GetAuthorCommentsUseCase:
        """Provide author comment history use case."""
        return GetAuthorCommentsUseCase(
            comment_service=comment_service,
            vote_aggregator=vote_aggregator,
            pagination_policy=pagination_policy,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self,
        lifecycle_service: CommentLifecycleService,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
    ) -> VoteCommentUseCase:
        """Provide vote on comment use case."""
        return VoteCommentUseCase(
            lifecycle_service=lifecycle_service,
            comment_service=comment_service,
            vote_aggregator=vote_aggregator,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self, lifecycle_service: CommentLifecycleService
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(lifecycle_service=lifecycle_service)
