from .periods import month_bounds
from .repository import SQLRepository
from .resources import (
    AccountService,
    BucketService,
    FillService,
    ResourceService,
    TransactionService,
)

__all__ = [
    "AccountService",
    "BucketService",
    "FillService",
    "ResourceService",
    "SQLRepository",
    "TransactionService",
    "month_bounds",
]
