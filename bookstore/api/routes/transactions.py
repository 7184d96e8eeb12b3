from fastapi import APIRouter, Path
from typing import Annotated
from starlette.status import HTTP_201_CREATED

from bookstore.api.deps import CurrentUser, DbSession
from bookstore.schemas.common import ApiResponse
from bookstore.schemas.transaction import (
    TransactionCreate,
    TransactionRead,
    TransactionStatistics,
)
from bookstore.services.transaction_service import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=ApiResponse[TransactionRead], status_code=HTTP_201_CREATED)
def create_transaction(data: TransactionCreate, db: DbSession, user: CurrentUser):
    transaction = TransactionService.create_transaction(db, user, data)
    return ApiResponse[TransactionRead](
        message="Transaction created successfully",
        data=TransactionRead.model_validate(transaction),
    )


@router.get("", response_model=ApiResponse[list[TransactionRead]])
def list_transactions(db: DbSession):
    transactions = TransactionService.list_transactions(db)
    return ApiResponse[list[TransactionRead]](
        message="Transactions retrieved successfully",
        data=[TransactionRead.model_validate(t) for t in transactions],
    )


# Registered before /{transaction_id} so "statistics" is not parsed as an id
@router.get("/statistics", response_model=ApiResponse[TransactionStatistics])
def get_statistics(db: DbSession):
    return ApiResponse[TransactionStatistics](
        message="Transaction statistics retrieved successfully",
        data=TransactionService.get_statistics(db),
    )


@router.get("/{transaction_id}", response_model=ApiResponse[TransactionRead])
def get_transaction(
    transaction_id: Annotated[str, Path(description="Transaction ID")],
    db: DbSession,
):
    transaction = TransactionService.get_transaction(db, transaction_id)
    return ApiResponse[TransactionRead](
        message="Transaction detail retrieved successfully",
        data=TransactionRead.model_validate(transaction),
    )
