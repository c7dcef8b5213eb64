from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from ..core.errors import ConflictError


ModelT = TypeVar("ModelT", bound=SQLModel)


class SQLRepository(Generic[ModelT]):
    """Thin data access layer around the SQLModel session for one table.

    Unique and foreign-key violations raised by the database surface as
    :class:`ConflictError` carrying the driver's message; every other
    SQLAlchemy error propagates unchanged.
    """

    def __init__(self, session: Session, model: type[ModelT]) -> None:
        self.session = session
        self.model = model

    @contextmanager
    def _constraint_guard(self) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError(str(exc.orig)) from exc

    # Writes -------------------------------------------------------------
    def insert(self, record: ModelT) -> ModelT:
        with self._constraint_guard():
            self.session.add(record)
            self.session.flush()
        self.session.refresh(record)
        return record

    def update(self, record_id: int, values: dict[str, Any]) -> Optional[ModelT]:
        record = self.get(record_id)
        if record is None:
            return None
        for field, value in values.items():
            setattr(record, field, value)
        with self._constraint_guard():
            self.session.add(record)
            self.session.flush()
        self.session.refresh(record)
        return record

    def delete(self, record_id: int) -> bool:
        record = self.get(record_id)
        if record is None:
            return False
        with self._constraint_guard():
            self.session.delete(record)
            self.session.flush()
        return True

    def delete_all(self) -> int:
        with self._constraint_guard():
            result = self.session.exec(delete(self.model))
        return result.rowcount

    # Reads --------------------------------------------------------------
    def get(self, record_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, record_id)

    def list_all(self) -> list[ModelT]:
        return self.list_where()

    def list_where(self, *criteria: Any) -> list[ModelT]:
        stmt = select(self.model).where(*criteria).order_by(self.model.id)
        return list(self.session.exec(stmt))

    def commit(self) -> None:
        with self._constraint_guard():
            self.session.commit()
