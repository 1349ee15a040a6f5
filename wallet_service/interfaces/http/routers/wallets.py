"""Wallet endpoints. Ownership decisions are made by the wallet service."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from wallet_service.core.security import get_current_phone_number
from wallet_service.interfaces.http.deps import get_wallet_service
from wallet_service.interfaces.http.responses import render
from wallet_service.modules.common import PaginatedResult
from wallet_service.modules.wallets import Wallet, WalletCreateInput, WalletService
from wallet_service.schemas import ApiResponse, PaginatedWalletResponse, WalletCreate, WalletResponse

router = APIRouter()


def _to_wallet_response(wallet: Wallet) -> WalletResponse:
    return WalletResponse(
        id=wallet.id,
        name=wallet.name,
        type=wallet.type.value,
        account_number=wallet.account_number,
        account_scheme=wallet.account_scheme.value,
        owner=wallet.owner,
        created_at=wallet.created_at,
    )


def _to_page_response(page: PaginatedResult[Wallet]) -> PaginatedWalletResponse:
    return PaginatedWalletResponse(
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
        data=[_to_wallet_response(wallet) for wallet in page.data],
    )


@router.post("", response_model=ApiResponse[WalletResponse], status_code=201, summary="Add a wallet")
async def add_wallet(
    payload: WalletCreate,
    phone_number: str = Depends(get_current_phone_number),
    wallet_service: WalletService = Depends(get_wallet_service),
) -> JSONResponse:
    result = await wallet_service.create_wallet(
        WalletCreateInput(
            name=payload.name,
            type=payload.type,
            account_number=payload.account_number,
            account_scheme=payload.account_scheme,
            owner=payload.owner,
        ),
        phone_number,
    )
    return render(result, _to_wallet_response)


@router.get("", response_model=ApiResponse[PaginatedWalletResponse], summary="List all wallets")
async def list_wallets(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    wallet_service: WalletService = Depends(get_wallet_service),
) -> JSONResponse:
    result = await wallet_service.list_wallets(page_number, page_size)
    return render(result, _to_page_response)


@router.get("/user", response_model=ApiResponse[PaginatedWalletResponse], summary="List the caller's wallets")
async def list_user_wallets(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    phone_number: str = Depends(get_current_phone_number),
    wallet_service: WalletService = Depends(get_wallet_service),
) -> JSONResponse:
    result = await wallet_service.list_user_wallets(phone_number, page_number, page_size)
    return render(result, _to_page_response)


@router.get("/{wallet_id}", response_model=ApiResponse[WalletResponse], summary="Get one of the caller's wallets")
async def get_wallet(
    wallet_id: str,
    phone_number: str = Depends(get_current_phone_number),
    wallet_service: WalletService = Depends(get_wallet_service),
) -> JSONResponse:
    result = await wallet_service.get_wallet(wallet_id, phone_number)
    return render(result, _to_wallet_response)


@router.delete("/{wallet_id}", response_model=ApiResponse[bool], summary="Remove one of the caller's wallets")
async def remove_wallet(
    wallet_id: str,
    phone_number: str = Depends(get_current_phone_number),
    wallet_service: WalletService = Depends(get_wallet_service),
) -> JSONResponse:
    result = await wallet_service.remove_wallet(wallet_id, phone_number)
    return render(result)
