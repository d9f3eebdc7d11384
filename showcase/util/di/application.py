"""Application layer DI providers."""

from dishka import Scope, provide

from showcase.application.inflight import VoteInFlightRegistry
from showcase.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from showcase.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from showcase.application.usecase.profile import (
    GetProfileUseCase,
    ListProfileWorksUseCase,
    UpdateAvatarUseCase,
)
from showcase.application.usecase.upload import DeleteFileUseCase, UploadFileUseCase
from showcase.application.usecase.vote import (
    CastVoteUseCase,
    GetMyVotesUseCase,
    ReconcileVotesUseCase,
)
from showcase.application.usecase.work import (
    CreateWorkUseCase,
    DeleteWorkUseCase,
    GetMediaUseCase,
    GetWorkUseCase,
    ListGalleryUseCase,
    UpdateWorkUseCase,
)
from showcase.config import GallerySettings
from showcase.domain.service import (
    CommentService,
    JWTService,
    ProfileService,
    StorageService,
    VoteService,
    WorkService,
)
from showcase.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_vote_in_flight_registry(self) -> VoteInFlightRegistry:
        """Provide the process-wide vote in-flight registry."""
        return VoteInFlightRegistry()

    # Auth use cases
    @provide
    def get_login_use_case(
        self, profile_service: ProfileService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(profile_service=profile_service, jwt_service=jwt_service)

    @provide
    def get_register_use_case(self, login_use_case: LoginUseCase) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(login_use_case=login_use_case)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    # Profile use cases
    @provide
    def get_profile_use_case(self, profile_service: ProfileService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide
    def get_list_profile_works_use_case(
        self,
        profile_service: ProfileService,
        work_service: WorkService,
        vote_service: VoteService,
    ) -> ListProfileWorksUseCase:
        """Provide list profile works use case."""
        return ListProfileWorksUseCase(
            profile_service=profile_service,
            work_service=work_service,
            vote_service=vote_service,
        )

    @provide
    def get_update_avatar_use_case(
        self, profile_service: ProfileService
    ) -> UpdateAvatarUseCase:
        """Provide update avatar use case."""
        return UpdateAvatarUseCase(profile_service=profile_service)

    # Work use cases
    @provide
    def get_create_work_use_case(self, work_service: WorkService) -> CreateWorkUseCase:
        """Provide create work use case."""
        return CreateWorkUseCase(work_service=work_service)

    @provide
    def get_work_use_case(
        self, work_service: WorkService, vote_service: VoteService
    ) -> GetWorkUseCase:
        """Provide get work use case."""
        return GetWorkUseCase(work_service=work_service, vote_service=vote_service)

    @provide
    def get_list_gallery_use_case(
        self,
        work_service: WorkService,
        vote_service: VoteService,
        gallery_settings: GallerySettings,
    ) -> ListGalleryUseCase:
        """Provide list gallery use case."""
        return ListGalleryUseCase(
            work_service=work_service,
            vote_service=vote_service,
            gallery_settings=gallery_settings,
        )

    @provide
    def get_update_work_use_case(self, work_service: WorkService) -> UpdateWorkUseCase:
        """Provide update work use case."""
        return UpdateWorkUseCase(work_service=work_service)

    @provide
    def get_delete_work_use_case(self, work_service: WorkService) -> DeleteWorkUseCase:
        """Provide delete work use case."""
        return DeleteWorkUseCase(work_service=work_service)

    @provide
    def get_media_use_case(self, work_service: WorkService) -> GetMediaUseCase:
        """Provide get media use case."""
        return GetMediaUseCase(work_service=work_service)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self, vote_service: VoteService, in_flight: VoteInFlightRegistry
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, in_flight=in_flight)

    @provide
    def get_my_votes_use_case(self, vote_service: VoteService) -> GetMyVotesUseCase:
        """Provide get my votes use case."""
        return GetMyVotesUseCase(vote_service=vote_service)

    @provide
    def get_reconcile_votes_use_case(
        self, vote_service: VoteService
    ) -> ReconcileVotesUseCase:
        """Provide reconcile votes use case."""
        return ReconcileVotesUseCase(vote_service=vote_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide
    def get_comments_use_case(
        self, comment_service: CommentService, work_service: WorkService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, work_service=work_service
        )

    # Upload use cases
    @provide
    def get_upload_file_use_case(
        self, storage_service: StorageService
    ) -> UploadFileUseCase:
        """Provide upload file use case."""
        return UploadFileUseCase(storage_service=storage_service)

    @provide
    def get_delete_file_use_case(
        self, storage_service: StorageService
    ) -> DeleteFileUseCase:
        """Provide delete file use case."""
        return DeleteFileUseCase(storage_service=storage_service)
