import sys
from typing import Optional, Set

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import make_url

from identity.config import settings
from identity.logger import configure_logging, get_logger
from .database import build_engine

log = get_logger(__name__)

SCRIPT_LOCATION = "identity:migrations"


def alembic_config(database_url: Optional[str] = None) -> Config:
    """alembic.ini 없이 사용할 수 있는 Alembic 설정을 만듭니다."""
    config = Config()
    config.set_main_option("script_location", SCRIPT_LOCATION)
    config.set_main_option("sqlalchemy.url", (database_url or settings.database_url).replace("%", "%%"))
    return config


def _upgrade_target(context: Optional[str]) -> str:
    # 환경별 시드는 브랜치 라벨(dev/uat/prod)로 구분되며, 컨텍스트가 없으면 모든 브랜치를 적용합니다.
    return f"{context}@head" if context else "heads"


def current_revisions(database_url: Optional[str] = None) -> Set[str]:
    """alembic_version 테이블에 기록된 현재 리비전(브랜치별 head)을 반환합니다."""
    engine = build_engine(database_url or settings.database_url)
    try:
        with engine.connect() as connection:
            return set(MigrationContext.configure(connection).get_current_heads())
    finally:
        engine.dispose()


def initialize_db(context: Optional[str] = None, database_url: Optional[str] = None) -> Set[str]:
    """
    Alembic 리비전을 적용하여 테이블을 만들고 환경별 기본 데이터를 넣습니다.
    이미 적용된 리비전은 건너뛰므로 여러 번 실행해도 안전합니다.

    Args:
        context: dev / uat / prod. 생략하면 설정값(environment)을 사용합니다.
        database_url: 대상 DB. 생략하면 설정값(database_url)을 사용합니다.

    Returns:
        적용 후의 현재 리비전 집합.
    """
    configure_logging()
    context = context or settings.environment
    url = database_url or settings.database_url
    log.info("db_init_started", context=context,
             database_url=make_url(url).render_as_string(hide_password=True))

    command.upgrade(alembic_config(url), _upgrade_target(context))

    revisions = current_revisions(url)
    log.info("db_init_finished", context=context, revisions=sorted(revisions))
    return revisions


def rollback_db(steps: int = 1, context: Optional[str] = None, database_url: Optional[str] = None) -> Set[str]:
    """
    가장 최근 리비전부터 steps개를 되돌립니다. (각 리비전의 downgrade 실행)

    Args:
        steps: 되돌릴 리비전 수. 1 이상이어야 합니다.
        context: 되돌릴 환경 브랜치. 여러 환경이 적용된 DB에서는 반드시 지정해야 합니다.

    Raises:
        ValueError: steps가 1보다 작을 때.
    """
    if steps < 1:
        raise ValueError(f"steps must be a positive integer, got {steps!r}")

    url = database_url or settings.database_url
    target = f"{context}@-{steps}" if context else f"-{steps}"
    command.downgrade(alembic_config(url), target)

    revisions = current_revisions(url)
    log.info("db_rollback_finished", context=context, steps=steps, revisions=sorted(revisions))
    return revisions


if __name__ == '__main__':
    initialize_db(sys.argv[1] if len(sys.argv) > 1 else None)
