from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

from alembic import command
from alembic.config import Config
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .config import get_settings


MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_url(database_url: str) -> Engine:
    connect_args: dict[str, Any] = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args = {"check_same_thread": False}
    new_engine = create_engine(
        database_url,
        echo=get_settings().sql_echo,
        connect_args=connect_args,
    )
    if is_sqlite:
        # SQLite leaves foreign keys unenforced unless asked per connection.
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


settings = get_settings()
engine = create_engine_for_url(settings.database_url)


def run_migrations(target_engine: Engine, revision: str = "head") -> None:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    with target_engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, revision)


def init_db() -> None:
    run_migrations(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


def set_engine(new_engine: Engine) -> None:
    global engine
    engine = new_engine
