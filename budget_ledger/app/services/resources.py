from __future__ import annotations

import logging
from typing import ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlmodel import Session, SQLModel

from ..core.errors import NotFoundError
from ..models import (
    AccountForm,
    AccountModel,
    AccountResponse,
    BucketForm,
    BucketModel,
    BucketResponse,
    FillForm,
    FillModel,
    FillResponse,
    TransactionForm,
    TransactionModel,
    TransactionResponse,
)
from .periods import month_bounds
from .repository import SQLRepository


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)
FormT = TypeVar("FormT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ResourceService(Generic[ModelT, FormT, ResponseT]):
    """CRUD over one table, shared by every resource of the API.

    Subclasses bind the table model, the response schema and a label used
    in error messages and log event names.
    """

    model: ClassVar[type[SQLModel]]
    response_model: ClassVar[type[BaseModel]]
    label: ClassVar[str]

    def __init__(
        self,
        session: Session,
        repository: Optional[SQLRepository[ModelT]] = None,
    ) -> None:
        self.session = session
        self.repository = repository or SQLRepository(session, self.model)

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    @property
    def _resource(self) -> str:
        return self.label.lower()

    def _to_response(self, record: ModelT) -> ResponseT:
        return self.response_model.model_validate(record)

    def _to_responses(self, records: list[ModelT]) -> list[ResponseT]:
        return [self._to_response(record) for record in records]

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found.")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def list(self) -> list[ResponseT]:
        return self._to_responses(self.repository.list_all())

    def read(self, record_id: int) -> ResponseT:
        record = self.repository.get(record_id)
        if record is None:
            raise self._not_found()
        return self._to_response(record)

    def create(self, payload: FormT) -> ResponseT:
        record = self.repository.insert(self.model(**payload.model_dump()))
        self.repository.commit()
        logger.info(
            "record.created",
            extra={"resource": self._resource, "record_id": record.id},
        )
        return self._to_response(record)

    def update(self, record_id: int, payload: FormT) -> ResponseT:
        record = self.repository.update(record_id, payload.model_dump())
        if record is None:
            raise self._not_found()
        self.repository.commit()
        logger.info(
            "record.updated",
            extra={"resource": self._resource, "record_id": record_id},
        )
        return self._to_response(record)

    def delete(self, record_id: int) -> None:
        if not self.repository.delete(record_id):
            raise self._not_found()
        self.repository.commit()
        logger.info(
            "record.deleted",
            extra={"resource": self._resource, "record_id": record_id},
        )

    def delete_all(self) -> None:
        removed = self.repository.delete_all()
        self.repository.commit()
        logger.info(
            "record.deleted_all",
            extra={"resource": self._resource, "removed": removed},
        )


class AccountService(ResourceService[AccountModel, AccountForm, AccountResponse]):
    model = AccountModel
    response_model = AccountResponse
    label = "Account"


class BucketService(ResourceService[BucketModel, BucketForm, BucketResponse]):
    model = BucketModel
    response_model = BucketResponse
    label = "Bucket"


class TransactionService(
    ResourceService[TransactionModel, TransactionForm, TransactionResponse]
):
    model = TransactionModel
    response_model = TransactionResponse
    label = "Transaction"

    def list_for_account(self, account_id: int) -> list[TransactionResponse]:
        return self._to_responses(
            self.repository.list_where(TransactionModel.account_id == account_id)
        )

    def list_for_account_in_month(
        self, account_id: int, year: int, month: int
    ) -> list[TransactionResponse]:
        start, end = month_bounds(year, month)
        return self._to_responses(
            self.repository.list_where(
                TransactionModel.account_id == account_id,
                TransactionModel.date >= start,
                TransactionModel.date < end,
            )
        )

    def list_for_bucket(self, bucket_id: int) -> list[TransactionResponse]:
        return self._to_responses(
            self.repository.list_where(TransactionModel.bucket_id == bucket_id)
        )

    def list_for_bucket_in_month(
        self, bucket_id: int, year: int, month: int
    ) -> list[TransactionResponse]:
        start, end = month_bounds(year, month)
        return self._to_responses(
            self.repository.list_where(
                TransactionModel.bucket_id == bucket_id,
                TransactionModel.date >= start,
                TransactionModel.date < end,
            )
        )


class FillService(ResourceService[FillModel, FillForm, FillResponse]):
    model = FillModel
    response_model = FillResponse
    label = "Fill"

    def list_for_bucket(self, bucket_id: int) -> list[FillResponse]:
        return self._to_responses(
            self.repository.list_where(FillModel.bucket_id == bucket_id)
        )

    def list_for_bucket_in_month(
        self, bucket_id: int, year: int, month: int
    ) -> list[FillResponse]:
        start, end = month_bounds(year, month)
        return self._to_responses(
            self.repository.list_where(
                FillModel.bucket_id == bucket_id,
                FillModel.date >= start,
                FillModel.date < end,
            )
        )
