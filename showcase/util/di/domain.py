"""Domain layer DI providers."""

from dishka import Scope, provide

from showcase.config import AuthSettings, StorageSettings
from showcase.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
    WorkRepository,
)
from showcase.domain.service import (
    CommentService,
    JWTService,
    ProfileService,
    StorageClient,
    StorageService,
    VoteService,
    WorkService,
)
from showcase.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide session token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        storage_settings: StorageSettings,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            storage_settings=storage_settings,
        )

    @provide
    def get_work_service(self, work_repository: WorkRepository) -> WorkService:
        """Provide work domain service."""
        return WorkService(work_repository=work_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        work_repository: WorkRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            work_repository=work_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        work_repository: WorkRepository,
        profile_service: ProfileService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            work_repository=work_repository,
            profile_service=profile_service,
        )

    @provide
    def get_storage_service(
        self, client: StorageClient, storage_settings: StorageSettings
    ) -> StorageService:
        """Provide media storage domain service."""
        return StorageService(client=client, settings=storage_settings)
