from collections.abc import Callable, Iterator
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from ..core import db as core_db
from ..core.db import create_engine_for_url, get_session, run_migrations, set_engine
from ..main import app

URL_ACCOUNT = "/account"
URL_BUCKET = "/bucket"
URL_TRANSACTION = "/transaction"
URL_FILL = "/fill"
DEFAULT_DATE = "2022-07-01T00:00:00"


@pytest.fixture
def engine(tmp_path) -> Iterator[Engine]:
    test_engine = create_engine_for_url(f"sqlite:///{tmp_path / 'test.db'}")
    run_migrations(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as test_session:
        yield test_session


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    original_engine = core_db.engine
    set_engine(engine)

    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override

    with TestClient(app) as test_client:
        yield test_client
        # Children first: accounts and buckets stay referenced otherwise.
        for url in (URL_TRANSACTION, URL_FILL, URL_BUCKET, URL_ACCOUNT):
            test_client.delete(url)

    app.dependency_overrides.clear()
    set_engine(original_engine)


@pytest.fixture
def create_account(client: TestClient) -> Callable[..., int]:
    suffix = count(1)

    def _create(name: str | None = None) -> int:
        response = client.post(URL_ACCOUNT, json={"name": name or f"account_{next(suffix)}"})
        assert response.status_code == 201
        return response.json()["id"]

    return _create


@pytest.fixture
def create_bucket(client: TestClient) -> Callable[..., int]:
    suffix = count(1)

    def _create(name: str | None = None) -> int:
        response = client.post(URL_BUCKET, json={"name": name or f"bucket_{next(suffix)}"})
        assert response.status_code == 201
        return response.json()["id"]

    return _create
