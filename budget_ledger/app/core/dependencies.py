from fastapi import Depends
from sqlmodel import Session

from ..services import AccountService, BucketService, FillService, TransactionService
from .db import get_session

def get_account_service(session: Session = Depends(get_session)) -> AccountService:
    return AccountService(session)

def get_bucket_service(session: Session = Depends(get_session)) -> BucketService:
    return BucketService(session)

def get_transaction_service(session: Session = Depends(get_session)) -> TransactionService:
    return TransactionService(session)

def get_fill_service(session: Session = Depends(get_session)) -> FillService:
    return FillService(session)
