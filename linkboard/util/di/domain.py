"""Domain layer DI providers."""

from dishka import Scope, provide

from linkboard.config import AuthSettings
from linkboard.domain.repository import (
    PostRepository,
    ProfileRepository,
    VoteRepository,
)
from linkboard.domain.service import (
    JWTService,
    PostService,
    ProfileService,
    VoteService,
)
from linkboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repositories and
    therefore its transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, post_service: PostService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, post_service=post_service)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)
