from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel

from ..core.dependencies import (
    get_account_service,
    get_bucket_service,
    get_fill_service,
    get_transaction_service,
)
from ..models import (
    AccountForm,
    AccountResponse,
    BucketForm,
    BucketResponse,
    FillForm,
    FillResponse,
    TransactionForm,
    TransactionResponse,
)
from ..models.schemas import MAX_ID
from ..services import FillService, ResourceService, TransactionService


Id = Annotated[int, Path(ge=0, le=MAX_ID, description="Server-assigned identifier")]
Year = Annotated[int, Path(ge=1, le=9999, description="Calendar year")]
Month = Annotated[int, Path(ge=1, le=12, description="Calendar month, 1-12")]


def build_crud_router(
    prefix: str,
    form_model: type[BaseModel],
    response_model: type[BaseModel],
    get_service: Callable[..., ResourceService],
) -> APIRouter:
    """Mount list/read/create/update/delete/delete-all for one resource."""
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.get("", response_model=list[response_model])
    def list_records(service: ResourceService = Depends(get_service)) -> Any:
        return service.list()

    @router.get("/{record_id}", response_model=response_model)
    def read_record(
        record_id: Id,
        service: ResourceService = Depends(get_service),
    ) -> Any:
        return service.read(record_id)

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    def create_record(
        payload: form_model,
        service: ResourceService = Depends(get_service),
    ) -> Any:
        return service.create(payload)

    @router.put("/{record_id}", response_model=response_model)
    def update_record(
        record_id: Id,
        payload: form_model,
        service: ResourceService = Depends(get_service),
    ) -> Any:
        return service.update(record_id, payload)

    @router.delete("/{record_id}", response_class=Response)
    def delete_record(
        record_id: Id,
        service: ResourceService = Depends(get_service),
    ) -> Response:
        service.delete(record_id)
        return Response(status_code=status.HTTP_200_OK)

    @router.delete("", response_class=Response)
    def delete_all_records(service: ResourceService = Depends(get_service)) -> Response:
        service.delete_all()
        return Response(status_code=status.HTTP_200_OK)

    return router


account_router = build_crud_router("/account", AccountForm, AccountResponse, get_account_service)
bucket_router = build_crud_router("/bucket", BucketForm, BucketResponse, get_bucket_service)
transaction_router = build_crud_router(
    "/transaction", TransactionForm, TransactionResponse, get_transaction_service
)
fill_router = build_crud_router("/fill", FillForm, FillResponse, get_fill_service)

scoped_router = APIRouter(tags=["scoped"])

@scoped_router.get(
    "/account/{account_id}/transactions",
    response_model=list[TransactionResponse],
)
def list_account_transactions(
    account_id: Id,
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    return service.list_for_account(account_id)

@scoped_router.get(
    "/account/{account_id}/transactions/{year}/{month}",
    response_model=list[TransactionResponse],
)
def list_account_transactions_in_month(
    account_id: Id,
    year: Year,
    month: Month,
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    return service.list_for_account_in_month(account_id, year, month)

@scoped_router.get(
    "/bucket/{bucket_id}/transactions",
    response_model=list[TransactionResponse],
)
def list_bucket_transactions(
    bucket_id: Id,
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    return service.list_for_bucket(bucket_id)

@scoped_router.get(
    "/bucket/{bucket_id}/transactions/{year}/{month}",
    response_model=list[TransactionResponse],
)
def list_bucket_transactions_in_month(
    bucket_id: Id,
    year: Year,
    month: Month,
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    return service.list_for_bucket_in_month(bucket_id, year, month)

@scoped_router.get("/bucket/{bucket_id}/fills", response_model=list[FillResponse])
def list_bucket_fills(
    bucket_id: Id,
    service: FillService = Depends(get_fill_service),
) -> list[FillResponse]:
    return service.list_for_bucket(bucket_id)

@scoped_router.get(
    "/bucket/{bucket_id}/fills/{year}/{month}",
    response_model=list[FillResponse],
)
def list_bucket_fills_in_month(
    bucket_id: Id,
    year: Year,
    month: Month,
    service: FillService = Depends(get_fill_service),
) -> list[FillResponse]:
    return service.list_for_bucket_in_month(bucket_id, year, month)

__all__ = [
    "account_router",
    "bucket_router",
    "build_crud_router",
    "fill_router",
    "scoped_router",
    "transaction_router",
]
