from __future__ import annotations
from typing import Optional
from pydantic import NaiveDatetime
from sqlmodel import Field, SQLModel

class Account(SQLModel, table=True):
    __tablename__ = "accounts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)

class Bucket(SQLModel, table=True):
    __tablename__ = "buckets"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)

class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    amount: float
    date: NaiveDatetime = Field(index=True)
    account_id: int = Field(foreign_key="accounts.id", index=True)
    bucket_id: Optional[int] = Field(default=None, foreign_key="buckets.id", index=True)

class Fill(SQLModel, table=True):
    __tablename__ = "fills"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    amount: float
    date: NaiveDatetime = Field(index=True)
    bucket_id: int = Field(foreign_key="buckets.id", index=True)
