"""HTTP route definitions for the account registration API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from ..domain.service import AccountService, RegistrationService
from ..errors import RequestValidationFailed
from ..schemas import (
    AccountDetailResponse,
    AccountResponse,
    CreateAccountRequest,
    CreateRegistrationRequest,
    PaginatedResponse,
    RegistrationResponse,
    UpdateAccountRequest,
)
from ..validators import validate_account_request, validate_registration_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_account_service(request: Request) -> AccountService:
    """Resolve the `AccountService` stored on the FastAPI application state."""
    service: AccountService = request.app.state.account_service
    return service


def get_registration_service(request: Request) -> RegistrationService:
    """Resolve the `RegistrationService` stored on the FastAPI application state."""
    service: RegistrationService = request.app.state.registration_service
    return service


def _account_not_found(account_id: str) -> HTTPException:
    logger.info("account %s not found", account_id)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Account with Id '{account_id}' was not found.",
    )


@router.get("/accounts", response_model=PaginatedResponse[AccountResponse], tags=["accounts"])
def list_accounts(
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    search: str | None = Query(default=None),
    service: AccountService = Depends(get_account_service),
) -> PaginatedResponse[AccountResponse]:
    """Return a page of accounts, optionally filtered by name or email."""
    result = service.list_accounts(page=page, page_size=page_size, search=search)
    return PaginatedResponse[AccountResponse].from_page(result, AccountResponse.from_domain)


@router.get("/accounts/{account_id}", response_model=AccountDetailResponse, tags=["accounts"])
def get_account(
    account_id: str,
    service: AccountService = Depends(get_account_service),
) -> AccountDetailResponse:
    """Retrieve a single account together with its registrations."""
    detail = service.get_account(account_id)
    if detail is None:
        raise _account_not_found(account_id)
    return AccountDetailResponse.from_detail(detail)


@router.post(
    "/accounts",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["accounts"],
)
def create_account(
    request: Request,
    response: Response,
    payload: CreateAccountRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Create an account and point the ``Location`` header at it."""
    errors = validate_account_request(payload)
    if errors:
        raise RequestValidationFailed(errors)
    account = service.create_account(payload.to_input())
    response.headers["Location"] = str(request.url_for("get_account", account_id=account.id))
    return AccountResponse.from_domain(account)


@router.put("/accounts/{account_id}", response_model=AccountResponse, tags=["accounts"])
def update_account(
    account_id: str,
    payload: UpdateAccountRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Replace every mutable field of an existing account."""
    errors = validate_account_request(payload)
    if errors:
        raise RequestValidationFailed(errors)
    account = service.update_account(account_id, payload.to_input())
    if account is None:
        raise _account_not_found(account_id)
    return AccountResponse.from_domain(account)


@router.delete(
    "/accounts/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["accounts"],
)
def delete_account(
    account_id: str,
    service: AccountService = Depends(get_account_service),
) -> Response:
    """Delete an account and every registration that belongs to it."""
    if not service.delete_account(account_id):
        raise _account_not_found(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/accounts/{account_id}/registrations",
    response_model=list[RegistrationResponse],
    tags=["accounts"],
)
def list_account_registrations(
    account_id: str,
    accounts: AccountService = Depends(get_account_service),
    registrations: RegistrationService = Depends(get_registration_service),
) -> list[RegistrationResponse]:
    """Return all registrations of one account, newest first."""
    if not accounts.exists(account_id):
        raise _account_not_found(account_id)
    return [RegistrationResponse.from_domain(r) for r in registrations.list_for_account(account_id)]


@router.get(
    "/registrations",
    response_model=PaginatedResponse[RegistrationResponse],
    tags=["registrations"],
)
def list_registrations(
    page: int = Query(default=1),
    page_size: int = Query(default=10, alias="pageSize"),
    account_id: str | None = Query(default=None, alias="accountId"),
    status_filter: str | None = Query(default=None, alias="status"),
    service: RegistrationService = Depends(get_registration_service),
) -> PaginatedResponse[RegistrationResponse]:
    """Return a page of registrations filtered by account and status.

    An unknown ``status`` value is ignored instead of rejected.
    """
    result = service.list_registrations(
        page=page,
        page_size=page_size,
        account_id=account_id,
        status=status_filter,
    )
    return PaginatedResponse[RegistrationResponse].from_page(result, RegistrationResponse.from_domain)


@router.post(
    "/registrations",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["registrations"],
)
def create_registration(
    payload: CreateRegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Register an existing account for an event or course."""
    errors = validate_registration_request(payload)
    if errors:
        raise RequestValidationFailed(errors)
    registration = service.create_registration(payload.to_input())
    if registration is None:
        logger.info("registration rejected, account %s does not exist", payload.account_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Account with Id '{payload.account_id}' does not exist.",
        )
    return RegistrationResponse.from_domain(registration)
