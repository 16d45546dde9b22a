"""Application layer DI providers."""

from dishka import Scope, provide

from trip.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from trip.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from trip.application.usecase.item import (
    CreateItemUseCase,
    DeleteItemUseCase,
    ListItemsUseCase,
    UpdateItemUseCase,
)
from trip.application.usecase.presence import HeartbeatUseCase, ListOnlineUsersUseCase
from trip.application.usecase.vote import ToggleVoteUseCase
from trip.domain.service import (
    AuthService,
    CommentService,
    ItemService,
    PresenceService,
    SessionService,
    VoteService,
)
from trip.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, auth_service: AuthService, session_service: SessionService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, session_service=session_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, session_service: SessionService, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            session_service=session_service, auth_service=auth_service
        )

    # Item use cases
    @provide(scope=Scope.REQUEST)
    def get_list_items_use_case(
        self,
        item_service: ItemService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> ListItemsUseCase:
        """Provide list items use case."""
        return ListItemsUseCase(
            item_service=item_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_item_use_case(self, item_service: ItemService) -> CreateItemUseCase:
        """Provide create item use case."""
        return CreateItemUseCase(item_service=item_service)

    @provide(scope=Scope.REQUEST)
    def get_update_item_use_case(
        self,
        item_service: ItemService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> UpdateItemUseCase:
        """Provide update item use case."""
        return UpdateItemUseCase(
            item_service=item_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_item_use_case(self, item_service: ItemService) -> DeleteItemUseCase:
        """Provide delete item use case."""
        return DeleteItemUseCase(item_service=item_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, item_service: ItemService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, item_service=item_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Presence use cases
    @provide(scope=Scope.REQUEST)
    def get_heartbeat_use_case(
        self, presence_service: PresenceService
    ) -> HeartbeatUseCase:
        """Provide presence heartbeat use case."""
        return HeartbeatUseCase(presence_service=presence_service)

    @provide(scope=Scope.REQUEST)
    def get_list_online_users_use_case(
        self, presence_service: PresenceService
    ) -> ListOnlineUsersUseCase:
        """Provide list online users use case."""
        return ListOnlineUsersUseCase(presence_service=presence_service)
