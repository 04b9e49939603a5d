"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, ThreadSettings
from discuss.domain.repository import (
    CommentRepository,
    CommentVoteRepository,
    ParentEntityPort,
)
from discuss.domain.service import (
    CommentLifecycleService,
    CommentService,
    JWTService,
    PaginationPolicy,
    ThreadTreeBuilder,
    VoteAggregator,
)
from discuss.domain.value import ParentKind
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        vote_repository: CommentVoteRepository,
        thread_settings: ThreadSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            thread_settings=thread_settings,
        )

    @provide
    def get_vote_aggregator(
        self, vote_repository: CommentVoteRepository
    ) -> VoteAggregator:
        """Provide vote tally service."""
        return VoteAggregator(vote_repository=vote_repository)

    @provide
    def get_tree_builder(self) -> ThreadTreeBuilder:
        """Provide thread tree builder."""
        return ThreadTreeBuilder()

    @provide
    def get_pagination_policy(self, thread_settings: ThreadSettings) -> PaginationPolicy:
        """Provide root-level pagination policy."""
        return PaginationPolicy(thread_settings=thread_settings)

    @provide
    def get_lifecycle_service(
        self,
        comment_service: CommentService,
        parent_ports: dict[ParentKind, ParentEntityPort],
        thread_settings: ThreadSettings,
    ) -> CommentLifecycleService:
        """Provide comment lifecycle service.

        Args:
            comment_service: Comment domain service
            parent_ports: Dictionary mapping parent kinds to their ports

        Returns:
            Lifecycle service serving every supported parent kind
        """
        return CommentLifecycleService(
            comment_service=comment_service,
            parent_ports=parent_ports,
            thread_settings=thread_settings,
        )
