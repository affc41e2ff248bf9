"""Domain layer DI providers."""

from dishka import Scope, provide

from pact.config import AuthSettings, InvitationSettings, MatchingSettings
from pact.domain.repository import (
    ExclusionRepository,
    InviteCodeRepository,
    PartnershipRepository,
    ReportRepository,
    RunLock,
    UserRepository,
)
from pact.domain.service import (
    AuthService,
    ExclusionService,
    InviteService,
    JWTService,
    MatchingService,
    PartnershipService,
    ReportService,
    UserService,
)
from pact.util.di.base import ProviderBase


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
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide password login and bootstrap domain service."""
        return AuthService(user_service=user_service, auth_settings=auth_settings)

    @provide
    def get_exclusion_service(
        self, exclusion_repository: ExclusionRepository
    ) -> ExclusionService:
        """Provide exclusion domain service."""
        return ExclusionService(exclusion_repository=exclusion_repository)

    @provide
    def get_invite_service(
        self,
        invite_code_repository: InviteCodeRepository,
        settings: InvitationSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_code_repository=invite_code_repository, settings=settings
        )

    @provide
    def get_partnership_service(
        self, partnership_repository: PartnershipRepository
    ) -> PartnershipService:
        """Provide partnership domain service."""
        return PartnershipService(partnership_repository=partnership_repository)

    @provide
    def get_matching_service(
        self,
        user_service: UserService,
        exclusion_service: ExclusionService,
        partnership_service: PartnershipService,
        run_lock: RunLock,
        settings: MatchingSettings,
    ) -> MatchingService:
        """Provide matching domain service."""
        return MatchingService(
            user_service=user_service,
            exclusion_service=exclusion_service,
            partnership_service=partnership_service,
            run_lock=run_lock,
            settings=settings,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        partnership_service: PartnershipService,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            partnership_service=partnership_service,
        )
