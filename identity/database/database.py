from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from identity.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    SQLAlchemy 엔진을 생성합니다.
    SQLite인 경우 외래 키 제약(PRAGMA foreign_keys)을 연결마다 활성화합니다.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    # 메모리 DB는 연결이 끊기면 사라지므로 하나의 연결을 공유합니다.
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    sqlite_engine = create_engine(url, echo=echo, **kwargs)

    @event.listens_for(sqlite_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(settings.database_url, echo=settings.sql_echo)

# commit은 transaction_scope에서만 호출합니다.
SessionLocal = sessionmaker(autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()


@contextmanager
def transaction_scope(session: Session) -> Iterator[Session]:
    """
    하나의 all-or-nothing 트랜잭션 경계를 제공합니다.
    블록이 정상 종료되면 commit, 어떤 예외든 발생하면 rollback 후 예외를 다시 던집니다.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def utcnow() -> datetime:
    """created_at / updated_at 컬럼의 기본값으로 사용하는 현재 UTC 시각."""
    return datetime.now(timezone.utc)
