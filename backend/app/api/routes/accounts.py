"""Endpoints del registro de cuentas de juguete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.api.deps import get_account_service
from app.models.account import Credentials
from app.services.account_service import AccountService

router = APIRouter(tags=["accounts"])


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
)
async def register(
    credentials: Credentials | None = None,
    account_service: AccountService = Depends(get_account_service),
) -> dict:
    credentials = credentials or Credentials()
    account = account_service.register(credentials.username, credentials.password)
    return {"success": True, "data": account.model_dump()}


@router.post("/login", summary="Log in with username and password")
async def login(
    credentials: Credentials | None = None,
    account_service: AccountService = Depends(get_account_service),
) -> dict:
    credentials = credentials or Credentials()
    result = account_service.login(credentials.username, credentials.password)
    return {"success": True, "data": result.model_dump()}


@router.get("/users", summary="List registered accounts")
async def list_users(
    account_service: AccountService = Depends(get_account_service),
) -> dict:
    accounts = account_service.list_accounts()
    return {
        "success": True,
        "data": [a.model_dump() for a in accounts],
        "count": len(accounts),
    }
