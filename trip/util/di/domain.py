"""Domain layer DI providers."""

from dishka import Scope, provide

from trip.config import AuthSettings, PresenceSettings
from trip.domain.repository import (
    CommentRepository,
    ItemRepository,
    PresenceRepository,
    UserRepository,
    VoteRepository,
)
from trip.domain.service import (
    AuthService,
    CommentService,
    ItemService,
    PresenceService,
    SessionService,
    VoteService,
)
from trip.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide name + PIN authentication domain service."""
        return AuthService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_item_service(
        self,
        item_repository: ItemRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> ItemService:
        """Provide item domain service."""
        return ItemService(
            item_repository=item_repository,
            vote_repository=vote_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, item_service: ItemService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, item_service=item_service)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_presence_service(
        self,
        presence_repository: PresenceRepository,
        presence_settings: PresenceSettings,
    ) -> PresenceService:
        """Provide presence domain service."""
        return PresenceService(
            presence_repository=presence_repository,
            presence_settings=presence_settings,
        )
