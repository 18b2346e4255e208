"""
Alembic Environment Configuration
=================================

- 데이터베이스 URL: alembic 설정의 sqlalchemy.url, 없으면 애플리케이션 설정(IDENTITY_DATABASE_URL)
- 메타데이터: identity.database.Base (모든 모델 포함)

각 리비전은 자신만의 트랜잭션에서 실행되므로(transaction_per_migration),
실패한 리비전 이전까지 적용된 리비전은 그대로 유지됩니다.
"""
from logging.config import fileConfig

from alembic import context

from identity.config import settings
from identity.database import Base, build_engine
from identity.database import models  # noqa: F401  (메타데이터에 모델 등록)

# Alembic Config object
config = context.config

if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))

# Configure logging (alembic.ini로 실행할 때만)
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    # build_engine은 SQLite 연결마다 외래 키 제약을 켭니다.
    connectable = build_engine(config.get_main_option("sqlalchemy.url"))

    try:
        with connectable.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                transaction_per_migration=True,
            )

            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    # 시드 리비전은 기존 행을 조회한 뒤 삽입하므로 SQL 스크립트 생성(--sql)은 지원하지 않습니다.
    raise RuntimeError("Offline (--sql) mode is not supported: seed revisions query existing rows.")

run_migrations_online()
