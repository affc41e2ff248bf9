"""Invite code use cases."""

from pact.application.usecase.invite.deactivate_invite_code import (
    DeactivateInviteCodeRequest,
    DeactivateInviteCodeResponse,
    DeactivateInviteCodeUseCase,
)
from pact.application.usecase.invite.issue_invite_code import (
    IssueInviteCodeRequest,
    IssueInviteCodeResponse,
    IssueInviteCodeUseCase,
)
from pact.application.usecase.invite.items import InviteCodeItem
from pact.application.usecase.invite.list_invite_codes import (
    ListInviteCodesRequest,
    ListInviteCodesResponse,
    ListInviteCodesUseCase,
)
from pact.application.usecase.invite.verify_invite_code import (
    VerifyInviteCodeRequest,
    VerifyInviteCodeResponse,
    VerifyInviteCodeUseCase,
)

__all__ = [
    "DeactivateInviteCodeRequest",
    "DeactivateInviteCodeResponse",
    "DeactivateInviteCodeUseCase",
    "InviteCodeItem",
    "IssueInviteCodeRequest",
    "IssueInviteCodeResponse",
    "IssueInviteCodeUseCase",
    "ListInviteCodesRequest",
    "ListInviteCodesResponse",
    "ListInviteCodesUseCase",
    "VerifyInviteCodeRequest",
    "VerifyInviteCodeResponse",
    "VerifyInviteCodeUseCase",
]
