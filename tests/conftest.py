import pytest

from app.db.session import build_engine, build_session_factory, drop_db, init_db
from app.repositories.department_repo import DepartmentRepository
from app.services.department_service import DepartmentService


@pytest.fixture()
def engine():
    eng = build_engine("sqlite+pysqlite:///:memory:")
    init_db(eng)
    try:
        yield eng
    finally:
        drop_db(eng)
        eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def repo(session_factory):
    return DepartmentRepository(session_factory)


@pytest.fixture()
def service(repo):
    return DepartmentService(repo)
