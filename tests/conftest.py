# tests/conftest.py
import pytest
from sqlalchemy.orm import Session, sessionmaker

from identity.database import Base, build_engine
from identity.database.db_init import initialize_db


@pytest.fixture
def database_url(tmp_path) -> str:
    """테스트마다 임시 디렉터리에 새 SQLite 파일 DB를 만듭니다."""
    return f"sqlite:///{tmp_path / 'identity.db'}"


@pytest.fixture
def engine(database_url):
    engine = build_engine(database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def schema(engine):
    """마이그레이션 없이 모든 테이블을 바로 생성합니다. (리포지토리 단위 테스트용)"""
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def db_session(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def migrate(database_url):
    """주어진 컨텍스트로 Alembic 리비전을 적용하는 함수를 돌려줍니다."""
    def _migrate(context=None):
        return initialize_db(context, database_url=database_url)
    return _migrate
