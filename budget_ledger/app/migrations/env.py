from alembic import context
from sqlalchemy.engine import Connection
from sqlmodel import SQLModel

from budget_ledger.app.core.config import get_settings
from budget_ledger.app.models import db as _db_models  # noqa: F401 - ensure models register with metadata

config = context.config
target_metadata = SQLModel.metadata


def _configure_and_run(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    context.configure(
        url=get_settings().database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # The application hands over an open connection; standalone runs build one.
    connection = config.attributes.get("connection")
    if connection is not None:
        _configure_and_run(connection)
        return

    from budget_ledger.app.core.db import create_engine_for_url

    engine = create_engine_for_url(get_settings().database_url)
    try:
        with engine.begin() as new_connection:
            _configure_and_run(new_connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
