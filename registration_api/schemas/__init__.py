"""Request and response DTOs exchanged over HTTP."""

from .account import (
    AccountDetailResponse,
    AccountRequest,
    AccountResponse,
    CreateAccountRequest,
    UpdateAccountRequest,
)
from .pagination import PaginatedResponse
from .registration import CreateRegistrationRequest, RegistrationResponse

__all__ = [
    "AccountDetailResponse",
    "AccountRequest",
    "AccountResponse",
    "CreateAccountRequest",
    "UpdateAccountRequest",
    "PaginatedResponse",
    "CreateRegistrationRequest",
    "RegistrationResponse",
]
