from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, NaiveDatetime, field_validator

MAX_ID = 2**63 - 1


def _truncate_to_seconds(value: datetime) -> datetime:
    return value.replace(microsecond=0)


class AccountForm(BaseModel):
    name: str = Field(..., min_length=1, description="Unique account name")

class AccountResponse(AccountForm):
    model_config = ConfigDict(from_attributes=True)

    id: int

class BucketForm(BaseModel):
    name: str = Field(..., min_length=1, description="Unique budget envelope name")

class BucketResponse(BucketForm):
    model_config = ConfigDict(from_attributes=True)

    id: int

class TransactionForm(BaseModel):
    name: str
    amount: float = Field(..., description="Positive for income, negative for expenses")
    date: NaiveDatetime
    account_id: int = Field(..., ge=0, le=MAX_ID)
    bucket_id: Optional[int] = Field(default=None, ge=0, le=MAX_ID, description="Bucket the movement is attributed to")

    truncate_date = field_validator("date")(_truncate_to_seconds)

class TransactionResponse(TransactionForm):
    model_config = ConfigDict(from_attributes=True)

    id: int

class FillForm(BaseModel):
    amount: float = Field(..., description="Amount allocated into the bucket")
    date: NaiveDatetime
    bucket_id: int = Field(..., ge=0, le=MAX_ID)

    truncate_date = field_validator("date")(_truncate_to_seconds)

class FillResponse(FillForm):
    model_config = ConfigDict(from_attributes=True)

    id: int
