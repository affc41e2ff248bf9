"""Account use cases."""

from pact.application.usecase.account.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from pact.application.usecase.account.login_user import (
    LoginUserRequest,
    LoginUserResponse,
    LoginUserUseCase,
)
from pact.application.usecase.account.register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from pact.application.usecase.account.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginUserRequest",
    "LoginUserResponse",
    "LoginUserUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
