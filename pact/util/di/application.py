"""Application layer DI providers."""

from dishka import Scope, provide

from pact.application.usecase.account import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    UpdateProfileUseCase,
)
from pact.application.usecase.admin import BootstrapAdminUseCase, GetStatsUseCase
from pact.application.usecase.exclusion import (
    AddExclusionUseCase,
    ListExclusionsUseCase,
    RemoveExclusionUseCase,
)
from pact.application.usecase.invite import (
    DeactivateInviteCodeUseCase,
    IssueInviteCodeUseCase,
    ListInviteCodesUseCase,
    VerifyInviteCodeUseCase,
)
from pact.application.usecase.matching import RunMatchingCycleUseCase
from pact.application.usecase.partnership import (
    ChangePartnershipStatusUseCase,
    CompleteExpiredPartnershipsUseCase,
    EndPartnershipUseCase,
    GetCurrentPartnershipUseCase,
    GetPartnershipHistoryUseCase,
    ListPartnershipsUseCase,
)
from pact.application.usecase.report import (
    FileReportUseCase,
    ListReportsUseCase,
    TransitionReportUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Account use cases
    @provide
    def get_register_user_use_case(
        self,
        user_service: UserService,
        invite_service: InviteService,
        jwt_service: JWTService,
        auth_service: AuthService,
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service,
            invite_service=invite_service,
            jwt_service=jwt_service,
            auth_service=auth_service,
        )

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide
    def get_login_user_use_case(
        self,
        auth_service: AuthService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> LoginUserUseCase:
        """Provide login user use case."""
        return LoginUserUseCase(
            auth_service=auth_service,
            user_service=user_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    # Invite code use cases
    @provide
    def get_issue_invite_code_use_case(
        self, invite_service: InviteService, user_service: UserService
    ) -> IssueInviteCodeUseCase:
        """Provide issue invite code use case."""
        return IssueInviteCodeUseCase(
            invite_service=invite_service, user_service=user_service
        )

    @provide
    def get_verify_invite_code_use_case(
        self, invite_service: InviteService
    ) -> VerifyInviteCodeUseCase:
        """Provide verify invite code use case."""
        return VerifyInviteCodeUseCase(invite_service=invite_service)

    @provide
    def get_deactivate_invite_code_use_case(
        self, invite_service: InviteService, user_service: UserService
    ) -> DeactivateInviteCodeUseCase:
        """Provide deactivate invite code use case."""
        return DeactivateInviteCodeUseCase(
            invite_service=invite_service, user_service=user_service
        )

    @provide
    def get_list_invite_codes_use_case(
        self, invite_service: InviteService, user_service: UserService
    ) -> ListInviteCodesUseCase:
        """Provide list invite codes use case."""
        return ListInviteCodesUseCase(
            invite_service=invite_service, user_service=user_service
        )

    # Matching use cases
    @provide
    def get_run_matching_cycle_use_case(
        self, matching_service: MatchingService, user_service: UserService
    ) -> RunMatchingCycleUseCase:
        """Provide run matching cycle use case."""
        return RunMatchingCycleUseCase(
            matching_service=matching_service, user_service=user_service
        )

    # Partnership use cases
    @provide
    def get_current_partnership_use_case(
        self, partnership_service: PartnershipService
    ) -> GetCurrentPartnershipUseCase:
        """Provide get current partnership use case."""
        return GetCurrentPartnershipUseCase(partnership_service=partnership_service)

    @provide
    def get_partnership_history_use_case(
        self, partnership_service: PartnershipService
    ) -> GetPartnershipHistoryUseCase:
        """Provide get partnership history use case."""
        return GetPartnershipHistoryUseCase(partnership_service=partnership_service)

    @provide
    def get_end_partnership_use_case(
        self, partnership_service: PartnershipService
    ) -> EndPartnershipUseCase:
        """Provide end partnership use case."""
        return EndPartnershipUseCase(partnership_service=partnership_service)

    @provide
    def get_change_partnership_status_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> ChangePartnershipStatusUseCase:
        """Provide change partnership status use case."""
        return ChangePartnershipStatusUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    @provide
    def get_complete_expired_partnerships_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> CompleteExpiredPartnershipsUseCase:
        """Provide complete expired partnerships use case."""
        return CompleteExpiredPartnershipsUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    @provide
    def get_list_partnerships_use_case(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> ListPartnershipsUseCase:
        """Provide list partnerships use case."""
        return ListPartnershipsUseCase(
            partnership_service=partnership_service, user_service=user_service
        )

    # Exclusion use cases
    @provide
    def get_add_exclusion_use_case(
        self, exclusion_service: ExclusionService, user_service: UserService
    ) -> AddExclusionUseCase:
        """Provide add exclusion use case."""
        return AddExclusionUseCase(
            exclusion_service=exclusion_service, user_service=user_service
        )

    @provide
    def get_remove_exclusion_use_case(
        self, exclusion_service: ExclusionService
    ) -> RemoveExclusionUseCase:
        """Provide remove exclusion use case."""
        return RemoveExclusionUseCase(exclusion_service=exclusion_service)

    @provide
    def get_list_exclusions_use_case(
        self, exclusion_service: ExclusionService
    ) -> ListExclusionsUseCase:
        """Provide list exclusions use case."""
        return ListExclusionsUseCase(exclusion_service=exclusion_service)

    # Report use cases
    @provide
    def get_file_report_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> FileReportUseCase:
        """Provide file report use case."""
        return FileReportUseCase(report_service=report_service, user_service=user_service)

    @provide
    def get_list_reports_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(
            report_service=report_service, user_service=user_service
        )

    @provide
    def get_transition_report_use_case(
        self, report_service: ReportService, user_service: UserService
    ) -> TransitionReportUseCase:
        """Provide transition report use case."""
        return TransitionReportUseCase(
            report_service=report_service, user_service=user_service
        )

    # Admin use cases
    @provide
    def get_stats_use_case(
        self,
        user_service: UserService,
        partnership_service: PartnershipService,
        report_service: ReportService,
    ) -> GetStatsUseCase:
        """Provide get stats use case."""
        return GetStatsUseCase(
            user_service=user_service,
            partnership_service=partnership_service,
            report_service=report_service,
        )

    @provide
    def get_bootstrap_admin_use_case(
        self, auth_service: AuthService, user_service: UserService
    ) -> BootstrapAdminUseCase:
        """Provide bootstrap admin use case."""
        return BootstrapAdminUseCase(
            auth_service=auth_service, user_service=user_service
        )
