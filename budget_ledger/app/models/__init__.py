from .db import Account as AccountModel
from .db import Bucket as BucketModel
from .db import Fill as FillModel
from .db import Transaction as TransactionModel
from .schemas import (
    AccountForm,
    AccountResponse,
    BucketForm,
    BucketResponse,
    FillForm,
    FillResponse,
    TransactionForm,
    TransactionResponse,
)

__all__ = [
    "AccountForm",
    "AccountResponse",
    "BucketForm",
    "BucketResponse",
    "FillForm",
    "FillResponse",
    "TransactionForm",
    "TransactionResponse",
    "AccountModel",
    "BucketModel",
    "FillModel",
    "TransactionModel",
]
