import logging
from datetime import datetime

import pytest
from sqlmodel import Session

from ..core.errors import ConflictError, NotFoundError
from ..models import AccountForm, BucketForm, FillForm, TransactionForm
from ..services import AccountService, BucketService, FillService, TransactionService

JULY = datetime(2022, 7, 1)


def test_create_returns_generated_id(session: Session) -> None:
    service = AccountService(session)

    first = service.create(AccountForm(name="first"))
    second = service.create(AccountForm(name="second"))

    assert first.id == 1
    assert second.id == 2
    assert service.read(first.id) == first


def test_create_duplicate_raises_conflict(session: Session) -> None:
    service = BucketService(session)
    service.create(BucketForm(name="Bills"))

    with pytest.raises(ConflictError, match="UNIQUE"):
        service.create(BucketForm(name="Bills"))
    assert [bucket.name for bucket in service.list()] == ["Bills"]


def test_create_fill_with_unknown_bucket_raises_conflict(session: Session) -> None:
    with pytest.raises(ConflictError, match="FOREIGN KEY"):
        FillService(session).create(FillForm(amount=10.0, date=JULY, bucket_id=99))


def test_read_update_delete_missing_raise_not_found(session: Session) -> None:
    service = AccountService(session)

    with pytest.raises(NotFoundError, match="Account not found."):
        service.read(0)
    with pytest.raises(NotFoundError):
        service.update(0, AccountForm(name="ghost"))
    with pytest.raises(NotFoundError):
        service.delete(0)


def test_delete_all_in_dependency_order(session: Session) -> None:
    accounts = AccountService(session)
    buckets = BucketService(session)
    transactions = TransactionService(session)
    fills = FillService(session)

    account = accounts.create(AccountForm(name="banking"))
    bucket = buckets.create(BucketForm(name="Food"))
    transactions.create(
        TransactionForm(
            name="Groceries", amount=-30.0, date=JULY, account_id=account.id, bucket_id=bucket.id
        )
    )
    fills.create(FillForm(amount=150.0, date=JULY, bucket_id=bucket.id))

    with pytest.raises(ConflictError):
        buckets.delete_all()

    transactions.delete_all()
    fills.delete_all()
    buckets.delete_all()
    accounts.delete_all()

    assert accounts.list() == []
    assert buckets.list() == []


def test_list_for_bucket_in_month(session: Session) -> None:
    bucket = BucketService(session).create(BucketForm(name="Holidays"))
    fills = FillService(session)
    for day in (datetime(2022, 6, 30, 23, 59, 59), JULY, datetime(2022, 8, 1)):
        fills.create(FillForm(amount=1.0, date=day, bucket_id=bucket.id))

    july = fills.list_for_bucket_in_month(bucket.id, 2022, 7)
    assert [fill.date for fill in july] == [JULY]
    assert len(fills.list_for_bucket(bucket.id)) == 3


def test_naive_dates_round_trip_through_storage(session: Session) -> None:
    account = AccountService(session).create(AccountForm(name="banking"))
    bucket = BucketService(session).create(BucketForm(name="Bills"))
    when = datetime(2022, 7, 20, 8, 30, 15)

    transactions = TransactionService(session)
    transaction = transactions.create(
        TransactionForm(name="Rent", amount=-800.0, date=when, account_id=account.id)
    )
    fills = FillService(session)
    fill = fills.create(FillForm(amount=950.0, date=when, bucket_id=bucket.id))

    session.expire_all()
    stored_transaction = transactions.read(transaction.id)
    stored_fill = fills.read(fill.id)
    assert stored_transaction.date == when
    assert stored_transaction.date.tzinfo is None
    assert stored_fill.date == when
    assert stored_fill.date.tzinfo is None


def test_update_keeps_naive_date(session: Session) -> None:
    bucket = BucketService(session).create(BucketForm(name="Food"))
    fills = FillService(session)
    fill = fills.create(FillForm(amount=150.0, date=JULY, bucket_id=bucket.id))

    later = datetime(2022, 7, 31, 23, 59, 59)
    updated = fills.update(fill.id, FillForm(amount=150.0, date=later, bucket_id=bucket.id))

    assert updated.date == later
    assert fills.list_for_bucket_in_month(bucket.id, 2022, 7) == [updated]


def test_mutations_log_literal_event_names(session: Session, caplog) -> None:
    service = AccountService(session)

    with caplog.at_level(logging.INFO, logger="budget_ledger.app.services.resources"):
        account = service.create(AccountForm(name="banking"))
        service.delete(account.id)

    events = [
        (record.getMessage(), record.resource)
        for record in caplog.records
        if record.name == "budget_ledger.app.services.resources"
    ]
    assert events == [("record.created", "account"), ("record.deleted", "account")]
