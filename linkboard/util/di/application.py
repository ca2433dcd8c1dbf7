"""Application layer DI providers."""

from dishka import Scope, provide

from linkboard.application.usecase.auth import (
    GetCurrentIdentityUseCase,
    RegisterProfileUseCase,
)
from linkboard.application.usecase.post import (
    ListPendingPostsUseCase,
    ListPostsUseCase,
    ModeratePostUseCase,
    SubmitPostUseCase,
)
from linkboard.application.usecase.vote import CastVoteUseCase
from linkboard.domain.service import (
    JWTService,
    PostService,
    ProfileService,
    VoteService,
)
from linkboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_current_identity_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentIdentityUseCase:
        """Provide get current identity use case."""
        return GetCurrentIdentityUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_register_profile_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> RegisterProfileUseCase:
        """Provide register profile use case."""
        return RegisterProfileUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_post_use_case(
        self, post_service: PostService, profile_service: ProfileService
    ) -> SubmitPostUseCase:
        """Provide submit post use case."""
        return SubmitPostUseCase(
            post_service=post_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            vote_service=vote_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_pending_posts_use_case(
        self, post_service: PostService, profile_service: ProfileService
    ) -> ListPendingPostsUseCase:
        """Provide moderation queue use case."""
        return ListPendingPostsUseCase(
            post_service=post_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_post_use_case(
        self, post_service: PostService, profile_service: ProfileService
    ) -> ModeratePostUseCase:
        """Provide moderate post use case."""
        return ModeratePostUseCase(
            post_service=post_service, profile_service=profile_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, profile_service: ProfileService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service, profile_service=profile_service
        )
